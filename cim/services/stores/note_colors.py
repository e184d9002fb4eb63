"""Note color record store with legacy palette fallback"""
import logging
from typing import List, Optional

from cim.models.note_color import (
    LEGACY_NOTE_COLORS,
    NoteColor,
    NoteColorCreate,
    NoteColorUpdate,
    PaletteColor,
)

from .base import RecordStore

logger = logging.getLogger(__name__)


class NoteColorStore(RecordStore[NoteColor, NoteColorCreate, NoteColorUpdate]):
    label = "color"
    plural = "note colors"

    async def create(self, data: NoteColorCreate) -> Optional[NoteColor]:
        """Add a color at the end of the user's palette"""
        if not self.user_id:
            return None

        next_order = max((color.sort_order for color in self.items), default=-1) + 1

        try:
            color = await self.repository.create_with_order(self.user_id, data, next_order)
        except Exception as e:
            logger.error(f"Error creating note color: {e}")
            self.notifier.error("Failed to add color")
            return None

        self._insert_local(color)
        self.notifier.success("Color added")
        return color

    def palette(self) -> List[PaletteColor]:
        """The user's colors, or the built-in palette when none are defined"""
        if not self.items:
            return list(LEGACY_NOTE_COLORS)
        return [
            PaletteColor(value=color.hex_color, label=color.name, hex_color=color.hex_color)
            for color in self.items
        ]

    def resolve(self, value: Optional[str]) -> Optional[PaletteColor]:
        """Look up a stored note color, accepting legacy color names"""
        if not value:
            return None
        for option in self.palette() + LEGACY_NOTE_COLORS:
            if option.value == value or option.hex_color.lower() == value.lower():
                return option
        return None
