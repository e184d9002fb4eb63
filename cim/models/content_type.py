"""Content type (idea type) domain model"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .validators import reject_null


class ContentTypeBase(BaseModel):
    """Base content type fields"""
    name: str = Field(..., min_length=1)


class ContentTypeCreate(ContentTypeBase):
    """Content type creation model"""
    pass


class ContentTypeUpdate(BaseModel):
    """Content type update model"""
    name: Optional[str] = Field(None, min_length=1)

    @field_validator("name")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class ContentType(ContentTypeBase):
    """Complete content type model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    is_system: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
