"""QuickLink domain model"""
from datetime import datetime
from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, ValidationInfo, field_validator

from .content_type import ContentType
from .validators import reject_null

_url_adapter = TypeAdapter(AnyHttpUrl)

# Built-in link types offered by the picker; anything else is a custom label
LINK_TYPES = ("LLM", "Biz Link", "Automation", "Multiple")


def is_custom_link_type(link_type: Optional[str]) -> bool:
    """True when a non-empty link type falls outside the built-in vocabulary"""
    return bool(link_type) and link_type not in LINK_TYPES


def _validate_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    # Validate only; the URL is stored exactly as entered
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL")
    return value


def _normalize_link_type(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


class QuickLinkCreate(BaseModel):
    """QuickLink creation model"""
    name: str = Field(..., min_length=1)
    url: str
    content_type_id: Optional[str] = None
    link_type: Optional[str] = None

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        return _validate_url(value)

    @field_validator("link_type")
    @classmethod
    def check_link_type(cls, value: Optional[str]) -> Optional[str]:
        return _normalize_link_type(value)


class QuickLinkUpdate(BaseModel):
    """QuickLink update model - all fields optional"""
    name: Optional[str] = Field(None, min_length=1)
    url: Optional[str] = None
    content_type_id: Optional[str] = None
    link_type: Optional[str] = None

    @field_validator("url")
    @classmethod
    def check_url(cls, value: Optional[str]) -> Optional[str]:
        return _validate_url(value)

    @field_validator("link_type")
    @classmethod
    def check_link_type(cls, value: Optional[str]) -> Optional[str]:
        return _normalize_link_type(value)

    @field_validator("name", "url")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class QuickLink(BaseModel):
    """Complete quicklink model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    name: str
    url: str
    content_type_id: Optional[str] = None
    link_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    content_type: Optional[ContentType] = None

    @property
    def is_custom_type(self) -> bool:
        return is_custom_link_type(self.link_type)
