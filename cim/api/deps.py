"""Shared FastAPI dependencies and response envelope"""
from typing import Generic, List, Optional, TypeVar

from fastapi import Depends, HTTPException, Request
from pydantic import BaseModel, Field

from cim.auth import get_current_user_id
from cim.models.notice import Notice
from cim.services.spark import SparkService
from cim.services.workspace import IdeaWorkspace, WorkspaceRegistry

T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Payload plus the notices raised while producing it"""
    data: Optional[T] = None
    notices: List[Notice] = Field(default_factory=list)


def get_registry(request: Request) -> WorkspaceRegistry:
    registry = getattr(request.app.state, "workspaces", None)
    if registry is None:
        raise HTTPException(status_code=503, detail="Workspaces are not initialised")
    return registry


async def get_workspace(
    user_id: str = Depends(get_current_user_id),
    registry: WorkspaceRegistry = Depends(get_registry),
) -> IdeaWorkspace:
    return registry.get(user_id)


def get_spark_service(request: Request) -> SparkService:
    service = getattr(request.app.state, "spark", None)
    if service is None:
        service = SparkService()
        request.app.state.spark = service
    return service


def respond(workspace: IdeaWorkspace, data=None) -> dict:
    """Wrap ``data`` with every notice the workspace has pending"""
    return {"data": data, "notices": workspace.drain_notices()}


async def find_or_404(store, record_id: str, detail: str):
    """Look a record up in a loaded store, 404 when the user has no such record"""
    await store.ensure_loaded()
    record = store.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=detail)
    return record
