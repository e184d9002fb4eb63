"""Tag domain model"""
import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .validators import reject_null

DEFAULT_TAG_COLOR = "#6366f1"

HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def validate_hex_color(value: Optional[str]) -> Optional[str]:
    if value is not None and not HEX_COLOR_RE.match(value):
        raise ValueError("Color must be a hex value like #6366f1")
    return value


class TagCreate(BaseModel):
    """Tag creation model"""
    name: str = Field(..., min_length=1)
    color: str = DEFAULT_TAG_COLOR

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Tag name is required")
        return value

    @field_validator("color")
    @classmethod
    def check_color(cls, value: str) -> str:
        return validate_hex_color(value)


class TagUpdate(BaseModel):
    """Tag update model - all fields optional"""
    name: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = None

    @field_validator("color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        return validate_hex_color(value)

    @field_validator("name")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class Tag(BaseModel):
    """Complete tag model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    color: Optional[str] = None
    user_id: Optional[str] = None
    is_system: bool = False
    created_at: Optional[datetime] = None


class IdeaTagsUpdate(BaseModel):
    """Full replacement of an idea's tag set"""
    tag_ids: List[str] = Field(default_factory=list)
