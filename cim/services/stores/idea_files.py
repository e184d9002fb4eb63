"""Idea attachment store"""
import logging
from pathlib import PurePosixPath
from typing import List, Optional

from cim.infra.supabase.repositories.idea_files import IdeaFileRepository
from cim.models.idea_file import MAX_FILE_SIZE, IdeaFile, IdeaFileCreate
from cim.services.notifier import Notifier
from cim.utils.datetime_helper import epoch_millis

logger = logging.getLogger(__name__)


def clean_file_name(file_name: str) -> Optional[str]:
    """Last path segment of a client-supplied name; None when nothing usable is left"""
    name = PurePosixPath(file_name.replace("\\", "/")).name.strip()
    if name in ("", ".", ".."):
        return None
    return name


def build_file_path(user_id: str, idea_id: str, file_name: str, timestamp_ms: Optional[int] = None) -> str:
    """Storage path of an attachment: ``{user}/{idea}/{epoch_ms}_{name}``"""
    if timestamp_ms is None:
        timestamp_ms = epoch_millis()
    return f"{user_id}/{idea_id}/{timestamp_ms}_{file_name}"


class IdeaFileStore:
    """Attachments are fetched per idea; bytes go to object storage, metadata to the table"""

    def __init__(self, repository: IdeaFileRepository, notifier: Notifier, user_id: Optional[str]):
        self.repository = repository
        self.notifier = notifier
        self.user_id = user_id

    async def list_for_idea(self, idea_id: str) -> List[IdeaFile]:
        if not self.user_id:
            return []

        try:
            files = await self.repository.find_by_idea(idea_id)
        except Exception as e:
            logger.error(f"Error fetching idea files: {e}")
            return []

        return [self._with_url(f) for f in files]

    async def upload(
        self,
        idea_id: str,
        file_name: str,
        content: bytes,
        content_type: Optional[str] = None,
    ) -> Optional[IdeaFile]:
        """Upload an attachment; files over 1 MiB are rejected before any remote call"""
        if not self.user_id:
            return None

        if len(content) > MAX_FILE_SIZE:
            self.notifier.error("File must be under 1MB")
            return None

        name = clean_file_name(file_name)
        if name is None:
            self.notifier.error("Invalid file name")
            return None

        file_path = build_file_path(self.user_id, idea_id, name)

        try:
            await self.repository.upload_object(file_path, content, content_type)
        except Exception as e:
            logger.error(f"Error uploading file: {e}")
            self.notifier.error("Failed to upload file")
            return None

        try:
            record = await self.repository.create(
                self.user_id,
                IdeaFileCreate(
                    idea_id=idea_id,
                    file_name=name,
                    file_path=file_path,
                    file_size=len(content),
                    file_type=content_type or None,
                ),
            )
        except Exception as e:
            logger.error(f"Error saving file record for {file_path}: {e}")
            await self._discard_object(file_path)
            self.notifier.error("Failed to upload file")
            return None

        self.notifier.success("File uploaded")
        return self._with_url(record)

    async def delete(self, file: IdeaFile) -> bool:
        try:
            await self.repository.remove_object(file.file_path)
            deleted = await self.repository.delete(file.id)
        except Exception as e:
            logger.error(f"Error deleting file: {e}")
            self.notifier.error("Failed to delete file")
            return False

        if not deleted:
            logger.warning(f"Delete matched no file record with id {file.id}")
            self.notifier.error("Failed to delete file")
            return False

        self.notifier.success("File deleted")
        return True

    async def _discard_object(self, file_path: str) -> None:
        try:
            await self.repository.remove_object(file_path)
        except Exception as e:
            logger.warning(f"Could not remove orphaned object {file_path}: {e}")

    def public_url(self, file_path: str) -> str:
        return self.repository.public_url(file_path)

    def _with_url(self, file: IdeaFile) -> IdeaFile:
        try:
            return file.model_copy(update={"url": self.public_url(file.file_path)})
        except Exception as e:
            logger.warning(f"Could not build public URL for {file.file_path}: {e}")
            return file
