"""System note (quick thought / journal entry) domain model"""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .validators import reject_null


class SystemNoteType(str, Enum):
    QUICK_THOUGHT = "quick_thought"
    JOURNAL_ENTRY = "journal_entry"


class SystemNoteBase(BaseModel):
    """Base system note fields"""
    title: str = Field(..., min_length=1)
    content: Optional[str] = None
    note_type: SystemNoteType = SystemNoteType.QUICK_THOUGHT
    platform_id: Optional[str] = None
    idea_id: Optional[str] = None
    entry_date: Optional[date] = None
    mood: Optional[str] = None
    color: Optional[str] = None
    is_pinned: bool = False


class SystemNoteCreate(SystemNoteBase):
    """System note creation model"""
    pass


class SystemNoteUpdate(BaseModel):
    """System note update model - all fields optional"""
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    platform_id: Optional[str] = None
    idea_id: Optional[str] = None
    entry_date: Optional[date] = None
    mood: Optional[str] = None
    color: Optional[str] = None
    is_pinned: Optional[bool] = None

    @field_validator("title", "is_pinned")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class SystemNote(SystemNoteBase):
    """Complete system note model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @property
    def is_journal(self) -> bool:
        return self.note_type == SystemNoteType.JOURNAL_ENTRY
