"""Tag record store and the idea-tag association store"""
import logging
from typing import List, Optional

from cim.infra.supabase.repositories.tags import IdeaTagRepository
from cim.models.tag import Tag, TagCreate, TagUpdate
from cim.services.notifier import Notifier

from .base import RecordStore, by_name

logger = logging.getLogger(__name__)


class TagStore(RecordStore[Tag, TagCreate, TagUpdate]):
    label = "tag"
    plural = "tags"
    sort_key = staticmethod(by_name)


class IdeaTagStore:
    """
    Tag membership per idea, fetched on demand rather than joined.

    ``set`` replaces the whole membership: it deletes every link and then
    inserts the new ones. The two steps are separate calls, so a failure in
    between leaves the idea with no tags.
    """

    def __init__(self, repository: IdeaTagRepository, notifier: Notifier, user_id: Optional[str]):
        self.repository = repository
        self.notifier = notifier
        self.user_id = user_id

    async def get(self, idea_id: str) -> List[str]:
        if not self.user_id:
            return []

        try:
            return await self.repository.find_tag_ids(idea_id)
        except Exception as e:
            logger.error(f"Error fetching idea tags: {e}")
            return []

    async def set(self, idea_id: str, tag_ids: List[str]) -> bool:
        if not self.user_id:
            return False

        # Keep first occurrence order, drop repeats
        unique_ids = list(dict.fromkeys(tag_ids))

        try:
            await self.repository.delete_for_idea(idea_id)
            if unique_ids:
                await self.repository.insert_links(self.user_id, idea_id, unique_ids)
        except Exception as e:
            logger.error(f"Error updating idea tags: {e}")
            self.notifier.error("Failed to update tags")
            return False

        return True
