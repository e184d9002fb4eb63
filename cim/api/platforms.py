from typing import List, Optional

from fastapi import APIRouter, Depends

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import Platform, PlatformCreate, PlatformUpdate
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/platforms", tags=["platforms"])


@router.get("", response_model=Result[List[Platform]])
async def list_platforms(workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.platforms.ensure_loaded())


@router.post("", response_model=Result[Optional[Platform]])
async def create_platform(data: PlatformCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.platforms.create(data))


@router.patch("/{platform_id}", response_model=Result[Optional[Platform]])
async def update_platform(platform_id: str, data: PlatformUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.platforms, platform_id, "Platform not found")
    return respond(workspace, await workspace.platforms.update(platform_id, data))


@router.delete("/{platform_id}", response_model=Result[bool])
async def delete_platform(platform_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.platforms, platform_id, "Platform not found")
    return respond(workspace, await workspace.platforms.delete(platform_id))
