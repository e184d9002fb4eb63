import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from cim.api.deps import Result, get_workspace, respond
from cim.models import Idea, IdeaCreate, IdeaFile, IdeaTagsUpdate, IdeaUpdate
from cim.services.export import IDEAS_EXPORT_PREFIX, ideas_to_csv
from cim.services.workspace import IdeaWorkspace
from cim.utils.datetime_helper import dated_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ideas", tags=["ideas"])


async def _idea_or_404(workspace: IdeaWorkspace, idea_id: str) -> Idea:
    await workspace.ideas.ensure_loaded()
    idea = workspace.ideas.get(idea_id)
    if idea is None:
        raise HTTPException(status_code=404, detail="Idea not found")
    return idea


@router.get("", response_model=Result[List[Idea]])
async def list_ideas(refresh: bool = False, workspace: IdeaWorkspace = Depends(get_workspace)):
    """All of the user's ideas, newest first. ``refresh`` re-reads them from Supabase."""
    if refresh:
        ideas = await workspace.ideas.load()
    else:
        ideas = await workspace.ideas.ensure_loaded()
    return respond(workspace, ideas)


@router.get("/export.csv")
async def export_ideas(workspace: IdeaWorkspace = Depends(get_workspace)):
    ideas = await workspace.ideas.ensure_loaded()
    filename = dated_filename(IDEAS_EXPORT_PREFIX)
    return Response(
        content=ideas_to_csv(ideas),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("", response_model=Result[Optional[Idea]])
async def create_idea(data: IdeaCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    idea = await workspace.ideas.create(data)
    return respond(workspace, idea)


@router.get("/{idea_id}", response_model=Result[Idea])
async def get_idea(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    idea = await _idea_or_404(workspace, idea_id)
    return respond(workspace, idea)


@router.patch("/{idea_id}", response_model=Result[Optional[Idea]])
async def update_idea(idea_id: str, data: IdeaUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    idea = await workspace.ideas.update(idea_id, data)
    return respond(workspace, idea)


@router.delete("/{idea_id}", response_model=Result[bool])
async def delete_idea(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    deleted = await workspace.ideas.delete(idea_id)
    return respond(workspace, deleted)


@router.post("/{idea_id}/archive", response_model=Result[Optional[Idea]])
async def archive_idea(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.archive(idea_id))


@router.post("/{idea_id}/restore", response_model=Result[Optional[Idea]])
async def restore_idea(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.restore(idea_id))


@router.post("/{idea_id}/recycle", response_model=Result[Optional[Idea]])
async def recycle_idea(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.recycle(idea_id))


@router.post("/{idea_id}/duplicate", response_model=Result[Optional[Idea]])
async def duplicate_idea(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    source = await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.duplicate(source))


# -- tags --

@router.get("/{idea_id}/tags", response_model=Result[List[str]])
async def get_idea_tags(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.idea_tags.get(idea_id))


@router.put("/{idea_id}/tags", response_model=Result[bool])
async def set_idea_tags(
    idea_id: str,
    data: IdeaTagsUpdate,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    """Replace the idea's whole tag set"""
    await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.idea_tags.set(idea_id, data.tag_ids))


# -- attachments --

@router.get("/{idea_id}/files", response_model=Result[List[IdeaFile]])
async def list_idea_files(idea_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    return respond(workspace, await workspace.files.list_for_idea(idea_id))


@router.post("/{idea_id}/files", response_model=Result[Optional[IdeaFile]])
async def upload_idea_file(
    idea_id: str,
    file: UploadFile = File(...),
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    await _idea_or_404(workspace, idea_id)
    content = await file.read()
    uploaded = await workspace.files.upload(
        idea_id,
        file.filename or "file",
        content,
        file.content_type,
    )
    return respond(workspace, uploaded)


@router.delete("/{idea_id}/files/{file_id}", response_model=Result[bool])
async def delete_idea_file(idea_id: str, file_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await _idea_or_404(workspace, idea_id)
    files = await workspace.files.list_for_idea(idea_id)
    target = next((f for f in files if f.id == file_id), None)
    if target is None:
        raise HTTPException(status_code=404, detail="File not found")
    return respond(workspace, await workspace.files.delete(target))
