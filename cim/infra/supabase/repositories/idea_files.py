"""Idea file attachments: metadata rows plus objects in Supabase Storage"""
from typing import List, Optional

from pydantic import BaseModel
from supabase import Client  # type: ignore

from cim.models.idea_file import IdeaFile, IdeaFileCreate

from .base import BaseRepository

IDEA_FILES_BUCKET = "idea-files"


class IdeaFileRepository(BaseRepository[IdeaFile, IdeaFileCreate, BaseModel]):
    order_by = (("created_at", True),)

    def __init__(self, client: Client):
        super().__init__(client, "idea_files", IdeaFile)

    def _bucket(self):
        return self._client.storage.from_(IDEA_FILES_BUCKET)

    async def find_by_idea(self, idea_id: str) -> List[IdeaFile]:
        """Find all attachments of an idea, newest first"""
        return await self.find_by_filters({"idea_id": idea_id})

    async def upload_object(self, path: str, content: bytes, content_type: Optional[str]) -> None:
        """Store the file bytes in the bucket"""
        options = {"content-type": content_type} if content_type else None
        self._bucket().upload(path=path, file=content, file_options=options)

    async def remove_object(self, path: str) -> None:
        """Remove the file bytes from the bucket"""
        self._bucket().remove([path])

    def public_url(self, path: str) -> str:
        """Public URL of a stored object"""
        return self._bucket().get_public_url(path)
