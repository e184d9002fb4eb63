"""Idea domain model"""
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .content_type import ContentType
from .platform import Platform
from .validators import reject_null


class IdeaStatus(str, Enum):
    """Lifecycle state of an idea"""
    HOLD = "hold"
    DEVELOPING = "developing"
    READY = "ready"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"
    RECYCLED = "recycled"


class IdeaPriority(str, Enum):
    NONE = "none"
    GOOD = "good"
    BETTER = "better"
    BEST = "best"


class EnergyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeEstimate(str, Enum):
    QUICK = "quick"
    HOUR = "hour"
    DAY = "day"
    WEEK_PLUS = "week_plus"


# Statuses hidden from the default (filterless) views
HIDDEN_STATUSES = frozenset({IdeaStatus.ARCHIVED, IdeaStatus.RECYCLED})

STATUS_LABELS = {
    IdeaStatus.HOLD: "Captured",
    IdeaStatus.DEVELOPING: "Exploring",
    IdeaStatus.READY: "Actionable",
    IdeaStatus.SCHEDULED: "Planned",
    IdeaStatus.ARCHIVED: "Archived",
    IdeaStatus.RECYCLED: "Recycled",
}

PRIORITY_LABELS = {
    IdeaPriority.NONE: "",
    IdeaPriority.GOOD: "Good",
    IdeaPriority.BETTER: "Better",
    IdeaPriority.BEST: "Best",
}


class IdeaBase(BaseModel):
    """Base idea fields"""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content: Optional[str] = None
    content_type_id: Optional[str] = None
    platform_id: Optional[str] = None
    priority: IdeaPriority = IdeaPriority.NONE
    status: IdeaStatus = IdeaStatus.DEVELOPING
    is_timely: bool = False
    scheduled_date: Optional[date] = None
    source: Optional[str] = Field(None, max_length=255)
    next_action: Optional[str] = Field(None, max_length=500)
    energy_level: Optional[EnergyLevel] = None
    time_estimate: Optional[TimeEstimate] = None


class IdeaCreate(IdeaBase):
    """Idea creation model"""

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value


class IdeaUpdate(BaseModel):
    """Idea update model - all fields optional, only set fields are sent"""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    content: Optional[str] = None
    content_type_id: Optional[str] = None
    platform_id: Optional[str] = None
    priority: Optional[IdeaPriority] = None
    status: Optional[IdeaStatus] = None
    is_timely: Optional[bool] = None
    scheduled_date: Optional[date] = None
    source: Optional[str] = Field(None, max_length=255)
    next_action: Optional[str] = Field(None, max_length=500)
    energy_level: Optional[EnergyLevel] = None
    time_estimate: Optional[TimeEstimate] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value

    @field_validator("title", "status", "priority", "is_timely")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


class Idea(IdeaBase):
    """Complete idea model from database, with joined lookups"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
    content_type: Optional[ContentType] = None
    platform: Optional[Platform] = None

    @property
    def status_label(self) -> str:
        return STATUS_LABELS[self.status]

    def copy_fields(self) -> dict:
        """Fields carried over when duplicating"""
        return self.model_dump(
            include={
                "description", "content", "content_type_id", "platform_id",
                "priority", "source", "next_action",
                "energy_level", "time_estimate",
            }
        )
