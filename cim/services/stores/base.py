"""
Record Store

Keeps one user's collection of one entity in memory and mirrors it to
Supabase through a repository. The local collection only changes after the
remote call succeeds. Failures are logged and reported to the notifier,
never raised to the caller.
"""

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from cim.infra.supabase.repositories.base import BaseRepository
from cim.services.notifier import Notifier

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)


def by_name(item: Any) -> str:
    return item.name.casefold()


class RecordStore(Generic[T, CreateT, UpdateT]):
    """Generic fetch/create/update/delete wrapper around one table"""

    # Singular/plural nouns used in user-facing notices
    label: str = "record"
    plural: str = "records"
    # Where newly created records land before any re-sort
    prepend_new: bool = False
    # Optional key used to keep the collection ordered after inserts and updates
    sort_key: Optional[Callable[[Any], Any]] = None
    # Read the record back after an update instead of trusting the update response
    refetch_on_update: bool = False

    def __init__(self, repository: BaseRepository, notifier: Notifier, user_id: Optional[str]):
        self.repository = repository
        self.notifier = notifier
        self.user_id = user_id
        self.items: List[T] = []
        self.loaded = False

    @property
    def title(self) -> str:
        return self.label[:1].upper() + self.label[1:]

    def get(self, id: str) -> Optional[T]:
        """Find a record in the local collection"""
        return next((item for item in self.items if item.id == id), None)

    async def load(self) -> List[T]:
        """Fetch the user's whole collection and replace the local copy"""
        if not self.user_id:
            self.items = []
            self.loaded = True
            return self.items

        try:
            self.items = await self.repository.find_by_user(self.user_id)
            self.loaded = True
        except Exception as e:
            logger.error(f"Error fetching {self.plural}: {e}")
            self.notifier.error(f"Failed to load {self.plural}")

        return self.items

    async def ensure_loaded(self) -> List[T]:
        if not self.loaded:
            await self.load()
        return self.items

    async def create(self, data: CreateT) -> Optional[T]:
        """Insert a record; returns the stored record or None on failure"""
        if not self.user_id:
            return None

        try:
            item = await self.repository.create(self.user_id, data)
        except Exception as e:
            logger.error(f"Error creating {self.label}: {e}")
            self.notifier.error(f"Failed to create {self.label}")
            return None

        self._insert_local(item)
        self.notifier.success(f"{self.title} created!")
        return item

    async def update(self, id: str, data: UpdateT) -> Optional[T]:
        """Patch a record with the fields set on ``data``"""
        try:
            item = await self.repository.update(id, data)
            if item is not None and self.refetch_on_update:
                item = await self.repository.find_by_id(id)
        except Exception as e:
            logger.error(f"Error updating {self.label} {id}: {e}")
            self.notifier.error(f"Failed to update {self.label}")
            return None

        if item is None:
            logger.warning(f"Update matched no {self.label} with id {id}")
            self.notifier.error(f"Failed to update {self.label}")
            return None

        self._replace_local(id, item)
        self.notifier.success(f"{self.title} updated!")
        return item

    async def delete(self, id: str) -> bool:
        """Delete remotely, then drop the local record"""
        try:
            deleted = await self.repository.delete(id)
        except Exception as e:
            logger.error(f"Error deleting {self.label} {id}: {e}")
            self.notifier.error(f"Failed to delete {self.label}")
            return False

        if not deleted:
            logger.warning(f"Delete matched no {self.label} with id {id}")
            self.notifier.error(f"Failed to delete {self.label}")
            return False

        self.items = [item for item in self.items if item.id != id]
        self.notifier.success(f"{self.title} deleted!")
        return True

    def _insert_local(self, item: T) -> None:
        if self.prepend_new:
            self.items.insert(0, item)
        else:
            self.items.append(item)
        self._resort()

    def _replace_local(self, id: str, item: T) -> None:
        self.items = [item if existing.id == id else existing for existing in self.items]
        self._resort()

    def _resort(self) -> None:
        if self.sort_key is not None:
            self.items.sort(key=self.sort_key)
