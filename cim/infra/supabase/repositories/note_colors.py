"""Note colors repository"""
from typing import Any, Dict

from supabase import Client  # type: ignore

from cim.models.note_color import NoteColor, NoteColorCreate, NoteColorUpdate

from .base import BaseRepository


class NoteColorRepository(BaseRepository[NoteColor, NoteColorCreate, NoteColorUpdate]):
    order_by = (("sort_order", False),)

    def __init__(self, client: Client):
        super().__init__(client, "note_colors", NoteColor)

    async def create_with_order(self, user_id: str, data: NoteColorCreate, sort_order: int) -> NoteColor:
        """Create a color at an explicit position in the user's palette"""
        row: Dict[str, Any] = data.model_dump(mode='json')
        row.update(user_id=user_id, sort_order=sort_order)
        response = self._client.table(self._table_name).insert(row).execute()

        if not response.data:
            raise ValueError("Failed to create note color")

        return self._to_model(response.data[0])
