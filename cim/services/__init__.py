"""Services module"""
from cim.services.notifier import Notifier
from cim.services.idea_view import build_idea_view, compute_stats, filter_ideas
from cim.services.workspace import IdeaWorkspace, WorkspaceRegistry

__all__ = [
    "Notifier",
    "build_idea_view",
    "compute_stats",
    "filter_ideas",
    "IdeaWorkspace",
    "WorkspaceRegistry",
]
