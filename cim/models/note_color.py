"""Note color domain model and the built-in legacy palette"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .tag import validate_hex_color
from .validators import reject_null


class NoteColorCreate(BaseModel):
    """Note color creation model"""
    name: str = Field(..., min_length=1)
    hex_color: str

    @field_validator("hex_color")
    @classmethod
    def check_color(cls, value: str) -> str:
        return validate_hex_color(value)


class NoteColorUpdate(BaseModel):
    """Note color update model - all fields optional"""
    name: Optional[str] = Field(None, min_length=1)
    hex_color: Optional[str] = None

    @field_validator("hex_color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        return validate_hex_color(value)

    @field_validator("name", "hex_color")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class NoteColor(BaseModel):
    """Complete note color model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    name: str
    hex_color: str
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaletteColor(BaseModel):
    """One selectable quick-note color"""
    value: str
    label: str
    hex_color: str
    is_legacy: bool = False


# Used when the user has not defined any colors of their own.
# Quick notes saved before custom colors existed store these names.
LEGACY_NOTE_COLORS = [
    PaletteColor(value="yellow", label="Yellow", hex_color="#fef9c3", is_legacy=True),
    PaletteColor(value="green", label="Green", hex_color="#dcfce7", is_legacy=True),
    PaletteColor(value="blue", label="Blue", hex_color="#dbeafe", is_legacy=True),
    PaletteColor(value="purple", label="Purple", hex_color="#f3e8ff", is_legacy=True),
    PaletteColor(value="pink", label="Pink", hex_color="#fce7f3", is_legacy=True),
    PaletteColor(value="orange", label="Orange", hex_color="#ffedd5", is_legacy=True),
    PaletteColor(value="gray", label="Gray", hex_color="#f3f4f6", is_legacy=True),
]
