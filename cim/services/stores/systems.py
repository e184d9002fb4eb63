"""System note (quick thought / journal entry) record store"""
from typing import List, Optional

from cim.infra.supabase.repositories.systems import SystemNoteRepository
from cim.models.system_note import SystemNote, SystemNoteCreate, SystemNoteType, SystemNoteUpdate
from cim.services.automation import AutomationEvent, NullWebhookSink, WebhookSink
from cim.services.notifier import Notifier

from .base import RecordStore

_CREATED_EVENTS = {
    SystemNoteType.QUICK_THOUGHT: AutomationEvent.QUICK_NOTE_CREATED,
    SystemNoteType.JOURNAL_ENTRY: AutomationEvent.JOURNAL_ENTRY_CREATED,
}

_UPDATED_EVENTS = {
    SystemNoteType.QUICK_THOUGHT: AutomationEvent.QUICK_NOTE_UPDATED,
    SystemNoteType.JOURNAL_ENTRY: AutomationEvent.JOURNAL_ENTRY_UPDATED,
}


def note_event_data(note: SystemNote) -> dict:
    return {
        "id": note.id,
        "title": note.title,
        "type": note.note_type.value,
        "platform_id": note.platform_id,
        "idea_id": note.idea_id,
    }


class SystemNoteStore(RecordStore[SystemNote, SystemNoteCreate, SystemNoteUpdate]):
    """Journal entries and quick thoughts, most recently updated first"""

    label = "note"
    plural = "notes"
    prepend_new = True

    def __init__(
        self,
        repository: SystemNoteRepository,
        notifier: Notifier,
        user_id: Optional[str],
        webhooks: Optional[WebhookSink] = None,
    ):
        super().__init__(repository, notifier, user_id)
        self.webhooks = webhooks or NullWebhookSink()

    def by_type(self, note_type: Optional[SystemNoteType]) -> List[SystemNote]:
        if note_type is None:
            return list(self.items)
        return [note for note in self.items if note.note_type == note_type]

    async def create(self, data: SystemNoteCreate) -> Optional[SystemNote]:
        note = await super().create(data)
        if note is not None:
            self.webhooks.emit(_CREATED_EVENTS[note.note_type], note_event_data(note))
        return note

    async def update(self, id: str, data: SystemNoteUpdate) -> Optional[SystemNote]:
        note = await super().update(id, data)
        if note is not None:
            self.webhooks.emit(_UPDATED_EVENTS[note.note_type], note_event_data(note))
        return note
