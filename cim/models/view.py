"""Filter, stats and derived-view models for the idea collection"""
from datetime import date, datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from .idea import EnergyLevel, Idea, IdeaPriority, IdeaStatus


class ViewMode(str, Enum):
    GRID = "grid"
    COMPACT = "compact"
    LIST = "list"


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive bounds are taken as UTC so they compare with stored timestamps
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DateRange(BaseModel):
    """Inclusive bounds applied to an idea's created_at"""
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[datetime] = Field(None, alias="from")
    to: Optional[datetime] = None

    @field_validator("from_", "to")
    @classmethod
    def ensure_aware(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.from_ and self.to and self.from_ > self.to:
            raise ValueError("date_range.from must not be after date_range.to")
        return self

    @property
    def is_empty(self) -> bool:
        return self.from_ is None and self.to is None


class IdeaFilters(BaseModel):
    """
    Filter criteria for the idea collection.

    Every axis is optional; an empty or missing set places no constraint
    on that axis.
    """
    status: List[IdeaStatus] = Field(default_factory=list)
    content_type: List[str] = Field(default_factory=list)
    platform: List[str] = Field(default_factory=list)
    priority: List[IdeaPriority] = Field(default_factory=list)
    energy_level: List[EnergyLevel] = Field(default_factory=list)
    date_range: Optional[DateRange] = None
    search: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (
            self.status or self.content_type or self.platform or self.priority
            or self.energy_level or self.search
            or (self.date_range is not None and not self.date_range.is_empty)
        )


class IdeaStats(BaseModel):
    total: int
    by_status: Dict[IdeaStatus, int]
    timely: int


class IdeaView(BaseModel):
    """Filtered, partitioned and ordered projection of the idea collection"""
    filtered: List[Idea]
    timely: List[Idea]
    non_timely: List[Idea]
    stats: IdeaStats

    @computed_field
    @property
    def rendered(self) -> List[Idea]:
        """Display order: the timely group first, then the pinned non-timely group"""
        return self.timely + self.non_timely


class ArchiveView(BaseModel):
    """Archived and recycled ideas, most recently changed first"""
    archived: List[Idea]
    recycled: List[Idea]


class CalendarView(BaseModel):
    """Scheduled ideas by day"""
    selected_date: date
    # Days that have at least one scheduled idea, ascending
    dates: List[date]
    ideas: List[Idea]
