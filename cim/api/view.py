from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from cim.api.deps import Result, get_workspace, respond
from cim.models import ArchiveView, CalendarView, Idea, IdeaFilters, IdeaStats, IdeaView, ViewMode
from cim.services.workspace import IdeaWorkspace

router = APIRouter(prefix="/api/view", tags=["view"])


class ViewState(BaseModel):
    view: IdeaView
    view_mode: ViewMode
    filters: IdeaFilters


class ViewModeUpdate(BaseModel):
    view_mode: ViewMode


async def _state(workspace: IdeaWorkspace) -> ViewState:
    return ViewState(
        view=await workspace.view(),
        view_mode=workspace.view_mode,
        filters=workspace.filters,
    )


@router.get("", response_model=Result[ViewState])
async def get_view(workspace: IdeaWorkspace = Depends(get_workspace)):
    """Derived idea view under the current filters"""
    return respond(workspace, await _state(workspace))


@router.put("/filters", response_model=Result[ViewState])
async def set_filters(filters: IdeaFilters, workspace: IdeaWorkspace = Depends(get_workspace)):
    workspace.set_filters(filters)
    return respond(workspace, await _state(workspace))


@router.delete("/filters", response_model=Result[ViewState])
async def clear_filters(workspace: IdeaWorkspace = Depends(get_workspace)):
    workspace.clear_filters()
    return respond(workspace, await _state(workspace))


@router.put("/mode", response_model=Result[ViewState])
async def set_view_mode(data: ViewModeUpdate, workspace: IdeaWorkspace = Depends(get_workspace)):
    workspace.set_view_mode(data.view_mode)
    return respond(workspace, await _state(workspace))


@router.get("/stats", response_model=Result[IdeaStats])
async def get_stats(workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.stats())


@router.get("/archive", response_model=Result[ArchiveView])
async def get_archive(workspace: IdeaWorkspace = Depends(get_workspace)):
    return respond(workspace, await workspace.archive_view())


@router.get("/calendar", response_model=Result[CalendarView])
async def get_calendar(
    selected_date: Optional[date] = Query(None, alias="date"),
    workspace: IdeaWorkspace = Depends(get_workspace),
):
    """Scheduled ideas on ``date`` (defaults to today) plus every day that has any"""
    return respond(workspace, await workspace.calendar(selected_date))


@router.get("/past", response_model=Result[List[Idea]])
async def get_past_ideas(workspace: IdeaWorkspace = Depends(get_workspace)):
    """Scheduled ideas whose date has arrived, latest first"""
    return respond(workspace, await workspace.past_ideas())
