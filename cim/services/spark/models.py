"""Request and response shapes for the spark endpoint"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SparkType(str, Enum):
    HOOKS = "hooks"
    OUTLINE = "outline"
    TITLES = "titles"


class SparkRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    content: Optional[str] = None
    spark_type: SparkType = Field(..., alias="sparkType")


class SparkResponse(BaseModel):
    suggestions: str


class SparkErrorResponse(BaseModel):
    error: str
