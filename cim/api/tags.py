from typing import List, Optional

from fastapi import APIRouter, Depends

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import Tag, TagCreate, TagUpdate
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/tags", tags=["tags"])


@router.get("", response_model=Result[List[Tag]])
async def list_tags(workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.tags.ensure_loaded())


@router.post("", response_model=Result[Optional[Tag]])
async def create_tag(data: TagCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.tags.create(data))


@router.patch("/{tag_id}", response_model=Result[Optional[Tag]])
async def update_tag(tag_id: str, data: TagUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.tags, tag_id, "Tag not found")
    return respond(workspace, await workspace.tags.update(tag_id, data))


@router.delete("/{tag_id}", response_model=Result[bool])
async def delete_tag(tag_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.tags, tag_id, "Tag not found")
    return respond(workspace, await workspace.tags.delete(tag_id))
