"""System notes (quick thoughts and journal entries) repository"""
from supabase import Client  # type: ignore

from cim.models.system_note import SystemNote, SystemNoteCreate, SystemNoteUpdate

from .base import BaseRepository


class SystemNoteRepository(BaseRepository[SystemNote, SystemNoteCreate, SystemNoteUpdate]):
    order_by = (("updated_at", True),)

    def __init__(self, client: Client):
        super().__init__(client, "systems", SystemNote)
