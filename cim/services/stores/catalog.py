"""Content type and platform record stores"""
import logging

from cim.models.content_type import ContentType, ContentTypeCreate, ContentTypeUpdate
from cim.models.platform import Platform, PlatformCreate, PlatformUpdate

from .base import CreateT, RecordStore, T, UpdateT, by_name

logger = logging.getLogger(__name__)


class SystemProtectedStore(RecordStore[T, CreateT, UpdateT]):
    """Store whose built-in (``is_system``) rows cannot be deleted"""

    async def delete(self, id: str) -> bool:
        item = self.get(id)
        if item is not None and item.is_system:
            logger.warning(f"Refusing to delete built-in {self.label} {id}")
            self.notifier.error(f"Built-in {self.plural} cannot be deleted")
            return False
        return await super().delete(id)


class ContentTypeStore(SystemProtectedStore[ContentType, ContentTypeCreate, ContentTypeUpdate]):
    label = "content type"
    plural = "content types"
    sort_key = staticmethod(lambda item: (not item.is_system, item.name.casefold()))


class PlatformStore(SystemProtectedStore[Platform, PlatformCreate, PlatformUpdate]):
    label = "platform"
    plural = "platforms"
    sort_key = staticmethod(by_name)
