from typing import List, Optional

from fastapi import APIRouter, Depends

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import ContentType, ContentTypeCreate, ContentTypeUpdate
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/content-types", tags=["content-types"])


@router.get("", response_model=Result[List[ContentType]])
async def list_content_types(workspace: IdeaWorkspace = Depends(get_workspace)):
    """Built-in types first, then the user's own, by name"""
    return respond(workspace, await workspace.content_types.ensure_loaded())


@router.post("", response_model=Result[Optional[ContentType]])
async def create_content_type(data: ContentTypeCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.content_types.create(data))


@router.patch("/{content_type_id}", response_model=Result[Optional[ContentType]])
async def update_content_type(
    content_type_id: str,
    data: ContentTypeUpdate,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    await find_or_404(workspace.content_types, content_type_id, "Content type not found")
    return respond(workspace, await workspace.content_types.update(content_type_id, data))


@router.delete("/{content_type_id}", response_model=Result[bool])
async def delete_content_type(content_type_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.content_types, content_type_id, "Content type not found")
    return respond(workspace, await workspace.content_types.delete(content_type_id))
