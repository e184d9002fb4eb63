"""User-visible notification model"""
from enum import Enum

from pydantic import BaseModel


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notice(BaseModel):
    level: NoticeLevel
    message: str
