"""Content template domain model"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .validators import reject_null


class ContentTemplateCreate(BaseModel):
    """Content template creation model"""
    name: str = Field(..., min_length=1)
    template_content: str
    content_type_id: Optional[str] = None
    is_default: bool = False


class ContentTemplateUpdate(BaseModel):
    """Content template update model - all fields optional"""
    name: Optional[str] = Field(None, min_length=1)
    template_content: Optional[str] = None
    content_type_id: Optional[str] = None
    is_default: Optional[bool] = None

    @field_validator("name", "template_content", "is_default")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class ContentTemplate(BaseModel):
    """Complete content template model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    name: str
    template_content: str
    content_type_id: Optional[str] = None
    is_default: bool = False
    sort_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
