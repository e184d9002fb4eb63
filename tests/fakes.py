"""In-memory stand-ins for the Supabase repositories."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from cim.models import (
    ContentTemplate,
    ContentType,
    Idea,
    IdeaFile,
    NoteColor,
    Platform,
    QuickLink,
    SystemNote,
    Tag,
)

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


class RepositoryError(Exception):
    """Raised by fakes configured to fail."""


class FakeRepository:
    """Mimics BaseRepository over a dict of models, newest rows first."""

    def __init__(self, model_cls, rows=None):
        self.model_cls = model_cls
        self.rows: Dict[str, object] = {}
        self.fail_on: set = set()
        self.calls: List[str] = []
        self._clock = 0
        for row in rows or []:
            self.rows[row.id] = row

    def _check(self, method: str) -> None:
        self.calls.append(method)
        if method in self.fail_on:
            raise RepositoryError(f"{method} failed")

    def _now(self) -> datetime:
        self._clock += 1
        return BASE_TIME + timedelta(minutes=self._clock)

    async def find_by_id(self, id: str):
        self._check("find_by_id")
        return self.rows.get(id)

    async def find_by_user(self, user_id: str):
        self._check("find_by_user")
        return [row for row in self.rows.values() if getattr(row, "user_id", user_id) in (user_id, None)]

    async def create(self, user_id: str, data, **extra):
        self._check("create")
        now = self._now()
        row = self.model_cls(
            **data.model_dump(),
            **extra,
            id=str(uuid.uuid4()),
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        self.rows[row.id] = row
        return row

    async def update(self, id: str, data):
        self._check("update")
        existing = self.rows.get(id)
        if existing is None:
            return None
        patch = data.model_dump(exclude_unset=True)
        if "updated_at" in self.model_cls.model_fields:
            patch["updated_at"] = self._now()
        row = existing.model_copy(update=patch)
        self.rows[id] = row
        return row

    async def delete(self, id: str) -> bool:
        self._check("delete")
        return self.rows.pop(id, None) is not None


class FakeNoteColorRepository(FakeRepository):
    async def create_with_order(self, user_id: str, data, sort_order: int):
        return await self.create(user_id, data, sort_order=sort_order)


class FakeIdeaTagRepository:
    def __init__(self):
        self.links: Dict[str, List[str]] = {}
        self.fail_on: set = set()
        self.calls: List[str] = []

    def _check(self, method: str) -> None:
        self.calls.append(method)
        if method in self.fail_on:
            raise RepositoryError(f"{method} failed")

    async def find_tag_ids(self, idea_id: str) -> List[str]:
        self._check("find_tag_ids")
        return list(self.links.get(idea_id, []))

    async def delete_for_idea(self, idea_id: str) -> None:
        self._check("delete_for_idea")
        self.links.pop(idea_id, None)

    async def insert_links(self, user_id: str, idea_id: str, tag_ids: List[str]) -> None:
        self._check("insert_links")
        self.links.setdefault(idea_id, []).extend(tag_ids)


class FakeIdeaFileRepository(FakeRepository):
    def __init__(self):
        super().__init__(IdeaFile)
        self.objects: Dict[str, bytes] = {}

    async def find_by_idea(self, idea_id: str):
        self._check("find_by_idea")
        return [row for row in self.rows.values() if row.idea_id == idea_id]

    async def upload_object(self, path: str, content: bytes, content_type: Optional[str] = None) -> None:
        self._check("upload_object")
        self.objects[path] = content

    async def remove_object(self, path: str) -> None:
        self._check("remove_object")
        self.objects.pop(path, None)

    def public_url(self, path: str) -> str:
        return f"https://storage.example.com/idea-files/{path}"


class FakeProfileRepository:
    def __init__(self, webhook_url: Optional[str] = None):
        self.webhook_urls: Dict[str, Optional[str]] = {}
        self.default_url = webhook_url
        self.passwords: Dict[str, str] = {}
        self.fail_on: set = set()

    async def get_webhook_url(self, user_id: str) -> Optional[str]:
        if "get_webhook_url" in self.fail_on:
            raise RepositoryError("get_webhook_url failed")
        return self.webhook_urls.get(user_id, self.default_url)

    async def set_webhook_url(self, user_id: str, url: Optional[str]) -> None:
        if "set_webhook_url" in self.fail_on:
            raise RepositoryError("set_webhook_url failed")
        self.webhook_urls[user_id] = url

    async def update_password(self, user_id: str, password: str) -> None:
        if "update_password" in self.fail_on:
            raise RepositoryError("Password should be different from the old password.")
        self.passwords[user_id] = password


class FakeRepositoryFactory:
    """Same attribute surface as RepositoryFactory."""

    def __init__(self):
        self.ideas = FakeRepository(Idea)
        self.content_types = FakeRepository(ContentType)
        self.platforms = FakeRepository(Platform)
        self.quicklinks = FakeRepository(QuickLink)
        self.tags = FakeRepository(Tag)
        self.idea_tags = FakeIdeaTagRepository()
        self.systems = FakeRepository(SystemNote)
        self.templates = FakeRepository(ContentTemplate)
        self.note_colors = FakeNoteColorRepository(NoteColor)
        self.idea_files = FakeIdeaFileRepository()
        self.profiles = FakeProfileRepository()


class RecordingWebhookSink:
    """Collects emitted events instead of posting them."""

    def __init__(self):
        self.events = []

    def emit(self, event, data) -> None:
        self.events.append((event, data))

    async def drain(self) -> None:
        return None


def make_idea(**kwargs) -> Idea:
    """Return a stored Idea with sensible defaults, override via kwargs."""
    defaults = {
        "id": str(uuid.uuid4()),
        "user_id": "user-1",
        "title": "An idea",
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    defaults.update(kwargs)
    return Idea(**defaults)
