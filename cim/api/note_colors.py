from typing import List, Optional

from fastapi import APIRouter, Depends

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import NoteColor, NoteColorCreate, NoteColorUpdate, PaletteColor
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/note-colors", tags=["note-colors"])


@router.get("", response_model=Result[List[NoteColor]])
async def list_note_colors(workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.note_colors.ensure_loaded())


@router.get("/palette", response_model=Result[List[PaletteColor]])
async def get_palette(workspace: IdeaWorkspace = Depends(get_workspace)):
    """Colors offered for notes; the legacy palette when the user has none"""
    await workspace.note_colors.ensure_loaded()
    return respond(workspace, workspace.note_colors.palette())


@router.post("", response_model=Result[Optional[NoteColor]])
async def create_note_color(data: NoteColorCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await workspace.note_colors.ensure_loaded()
    return respond(workspace, await workspace.note_colors.create(data))


@router.patch("/{color_id}", response_model=Result[Optional[NoteColor]])
async def update_note_color(color_id: str, data: NoteColorUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.note_colors, color_id, "Color not found")
    return respond(workspace, await workspace.note_colors.update(color_id, data))


@router.delete("/{color_id}", response_model=Result[bool])
async def delete_note_color(color_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.note_colors, color_id, "Color not found")
    return respond(workspace, await workspace.note_colors.delete(color_id))
