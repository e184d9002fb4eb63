"""CSV export of ideas and log notes"""
import csv
import io
import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from cim.models.idea import Idea
from cim.models.system_note import SystemNote

IDEAS_EXPORT_PREFIX = "ideas-export"
SYSTEMS_EXPORT_PREFIX = "systems-export"

_TAG_RE = re.compile(r"<[^>]*>")
_SPACE_RE = re.compile(r"\s+")


def strip_html(html: Optional[str]) -> str:
    """Drop tags from rich-text content and collapse whitespace"""
    if not html:
        return ""
    return _SPACE_RE.sub(" ", _TAG_RE.sub(" ", html)).strip()


def _text(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "value"):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_idea_for_csv(idea: Idea) -> Dict[str, str]:
    return {
        "title": idea.title,
        "description": _text(idea.description),
        "content": strip_html(idea.content),
        "status": _text(idea.status),
        "priority": _text(idea.priority),
        "is_timely": _yes_no(idea.is_timely),
        "scheduled_date": _text(idea.scheduled_date),
        "source": _text(idea.source),
        "next_action": _text(idea.next_action),
        "energy_level": _text(idea.energy_level),
        "time_estimate": _text(idea.time_estimate),
        "idea_type": idea.content_type.name if idea.content_type else "",
        "context": idea.platform.name if idea.platform else "",
        "created_at": _text(idea.created_at),
        "updated_at": _text(idea.updated_at),
    }


def format_system_for_csv(note: SystemNote) -> Dict[str, str]:
    return {
        "title": note.title,
        "content": strip_html(note.content),
        "type": _text(note.note_type),
        "mood": _text(note.mood),
        "entry_date": _text(note.entry_date),
        "is_pinned": _yes_no(note.is_pinned),
        "created_at": _text(note.created_at),
        "updated_at": _text(note.updated_at),
    }


def rows_to_csv(rows: Sequence[Dict[str, str]]) -> str:
    """Header from the first row's keys; no rows gives an empty document"""
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=list(rows[0].keys()),
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


def ideas_to_csv(ideas: Iterable[Idea]) -> str:
    rows: List[Dict[str, str]] = [format_idea_for_csv(idea) for idea in ideas]
    return rows_to_csv(rows)


def systems_to_csv(notes: Iterable[SystemNote]) -> str:
    rows: List[Dict[str, str]] = [format_system_for_csv(note) for note in notes]
    return rows_to_csv(rows)
