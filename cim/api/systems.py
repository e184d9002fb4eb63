from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from cim.api.deps import Result, find_or_404, get_workspace, respond
from cim.models import SystemNote, SystemNoteCreate, SystemNoteType, SystemNoteUpdate
from cim.services.export import SYSTEMS_EXPORT_PREFIX, systems_to_csv
from cim.services.workspace import IdeaWorkspace
from cim.utils.datetime_helper import dated_filename

router = APIRouter(prefix="/api/systems", tags=["systems"])


@router.get("", response_model=Result[List[SystemNote]])
async def list_systems(
    note_type: Optional[SystemNoteType] = None,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    """Quick thoughts and journal entries, most recently updated first"""
    await workspace.systems.ensure_loaded()
    return respond(workspace, workspace.systems.by_type(note_type))


@router.get("/export.csv")
async def export_systems(
    note_type: Optional[SystemNoteType] = None,
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    await workspace.systems.ensure_loaded()
    filename = dated_filename(SYSTEMS_EXPORT_PREFIX)
    return Response(
        content=systems_to_csv(workspace.systems.by_type(note_type)),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("", response_model=Result[Optional[SystemNote]])
async def create_system_note(data: SystemNoteCreate, workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.systems.create(data))


@router.patch("/{note_id}", response_model=Result[Optional[SystemNote]])
async def update_system_note(note_id: str, data: SystemNoteUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.systems, note_id, "Note not found")
    return respond(workspace, await workspace.systems.update(note_id, data))


@router.delete("/{note_id}", response_model=Result[bool])
async def delete_system_note(note_id: str, workspace: IdeaWorkspace = Depends(get_workspace)):
    await find_or_404(workspace.systems, note_id, "Note not found")
    return respond(workspace, await workspace.systems.delete(note_id))
