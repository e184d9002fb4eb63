"""Platform (idea context) domain model"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .validators import reject_null


class PlatformBase(BaseModel):
    """Base platform fields"""
    name: str = Field(..., min_length=1)


class PlatformCreate(PlatformBase):
    """Platform creation model"""
    pass


class PlatformUpdate(BaseModel):
    """Platform update model"""
    name: Optional[str] = Field(None, min_length=1)

    @field_validator("name")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class Platform(PlatformBase):
    """Complete platform model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    is_system: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
