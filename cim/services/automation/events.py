"""Automation event vocabulary and payload envelope"""
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field

from cim.utils.datetime_helper import format_iso_utc, utc_now


class AutomationEvent(str, Enum):
    IDEA_CREATED = "idea_created"
    IDEA_UPDATED = "idea_updated"
    IDEA_STATUS_CHANGED = "idea_status_changed"
    QUICK_NOTE_CREATED = "quick_note_created"
    QUICK_NOTE_UPDATED = "quick_note_updated"
    JOURNAL_ENTRY_CREATED = "journal_entry_created"
    JOURNAL_ENTRY_UPDATED = "journal_entry_updated"


class WebhookEnvelope(BaseModel):
    """JSON body posted to the user's automation webhook"""
    event: AutomationEvent
    timestamp: str = Field(
        default_factory=lambda: format_iso_utc(utc_now())
    )
    data: Dict[str, Any]
