"""Idea file attachment model"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

# Uploads above this size are rejected before touching storage
MAX_FILE_SIZE = 1024 * 1024


class IdeaFileCreate(BaseModel):
    """Attachment metadata written after the object upload succeeds"""
    idea_id: str
    file_name: str
    file_path: str
    file_size: int
    file_type: Optional[str] = None


class IdeaFile(IdeaFileCreate):
    """Complete attachment model from database"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    created_at: datetime
    url: Optional[str] = None
