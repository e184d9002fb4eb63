from typing import List, Optional

from fastapi import APIRouter, Depends

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import QuickLink, QuickLinkCreate, QuickLinkUpdate
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/quicklinks", tags=["quicklinks"])


@router.get("", response_model=Result[List[QuickLink]])
async def list_quicklinks(
    content_type_id: Optional[str] = None,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    """
    All QuickLinks by name, or only those attached to ``content_type_id``
    (the links shown on an idea of that type).
    """
    links = await workspace.quicklinks.ensure_loaded()
    if content_type_id is not None:
        links = workspace.quicklinks.for_content_type(content_type_id)
    return respond(workspace, links)


@router.post("", response_model=Result[Optional[QuickLink]])
async def create_quicklink(data: QuickLinkCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.quicklinks.create(data))


@router.patch("/{quicklink_id}", response_model=Result[Optional[QuickLink]])
async def update_quicklink(
    quicklink_id: str,
    data: QuickLinkUpdate,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    await find_or_404(workspace.quicklinks, quicklink_id, "QuickLink not found")
    return respond(workspace, await workspace.quicklinks.update(quicklink_id, data))


@router.delete("/{quicklink_id}", response_model=Result[bool])
async def delete_quicklink(quicklink_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.quicklinks, quicklink_id, "QuickLink not found")
    return respond(workspace, await workspace.quicklinks.delete(quicklink_id))
