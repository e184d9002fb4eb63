"""
Idea Workspace

One object per signed-in user that gathers every record store, the
session view state (view mode and filters) and the derived idea view.
Routers receive it through dependency injection; nothing here is a module
level singleton.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from cim.infra.supabase.repositories import RepositoryFactory
from cim.models.idea import Idea, IdeaCreate, IdeaStatus, IdeaUpdate
from cim.models.notice import Notice
from cim.models.view import ArchiveView, CalendarView, IdeaFilters, IdeaStats, IdeaView, ViewMode
from cim.services.automation import NullWebhookSink, WebhookSink, ZapierWebhookSink
from cim.services.idea_view import (
    build_archive_view,
    build_calendar_view,
    build_idea_view,
    compute_stats,
    past_scheduled_ideas,
)
from cim.services.notifier import Notifier
from cim.services.stores import (
    AccountSettingsStore,
    ContentTemplateStore,
    ContentTypeStore,
    IdeaFileStore,
    IdeaStore,
    IdeaTagStore,
    NoteColorStore,
    PlatformStore,
    QuickLinkStore,
    SystemNoteStore,
    TagStore,
)
from cim.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)


class IdeaWorkspace:
    """Everything one user's screens read from and write to"""

    def __init__(
        self,
        user_id: Optional[str],
        repositories: RepositoryFactory,
        webhooks: Optional[WebhookSink] = None,
    ):
        self.user_id = user_id
        self.repositories = repositories
        self.notifier = Notifier()
        self.webhooks = webhooks or NullWebhookSink()

        self.ideas = IdeaStore(repositories.ideas, self.notifier, user_id, self.webhooks)
        self.content_types = ContentTypeStore(repositories.content_types, self.notifier, user_id)
        self.platforms = PlatformStore(repositories.platforms, self.notifier, user_id)
        self.quicklinks = QuickLinkStore(repositories.quicklinks, self.notifier, user_id)
        self.tags = TagStore(repositories.tags, self.notifier, user_id)
        self.idea_tags = IdeaTagStore(repositories.idea_tags, self.notifier, user_id)
        self.systems = SystemNoteStore(repositories.systems, self.notifier, user_id, self.webhooks)
        self.templates = ContentTemplateStore(repositories.templates, self.notifier, user_id)
        self.note_colors = NoteColorStore(repositories.note_colors, self.notifier, user_id)
        self.files = IdeaFileStore(repositories.idea_files, self.notifier, user_id)
        self.settings = AccountSettingsStore(repositories.profiles, self.notifier, user_id)

        self.view_mode = ViewMode.GRID
        self.filters = IdeaFilters()

    # -- view state --

    def set_view_mode(self, mode: ViewMode) -> None:
        self.view_mode = mode

    def set_filters(self, filters: IdeaFilters) -> None:
        self.filters = filters

    def clear_filters(self) -> None:
        self.filters = IdeaFilters()

    async def view(self) -> IdeaView:
        """Derived view of the current collection under the current filters"""
        await self.ideas.ensure_loaded()
        return build_idea_view(self.ideas.items, self.filters)

    async def stats(self) -> IdeaStats:
        await self.ideas.ensure_loaded()
        return compute_stats(self.ideas.items)

    async def archive_view(self) -> ArchiveView:
        await self.ideas.ensure_loaded()
        return build_archive_view(self.ideas.items)

    async def calendar(self, selected_date: Optional[date] = None) -> CalendarView:
        """Scheduled ideas on one day, today (UTC) unless a day is given"""
        await self.ideas.ensure_loaded()
        return build_calendar_view(self.ideas.items, selected_date or utc_now().date())

    async def past_ideas(self) -> List[Idea]:
        await self.ideas.ensure_loaded()
        return past_scheduled_ideas(self.ideas.items, utc_now().date())

    # -- idea state transitions --

    async def archive(self, idea_id: str) -> Optional[Idea]:
        return await self.ideas.update(
            idea_id, IdeaUpdate(status=IdeaStatus.ARCHIVED, scheduled_date=None)
        )

    async def restore(self, idea_id: str) -> Optional[Idea]:
        return await self.ideas.update(idea_id, IdeaUpdate(status=IdeaStatus.DEVELOPING))

    async def recycle(self, idea_id: str) -> Optional[Idea]:
        return await self.ideas.update(
            idea_id, IdeaUpdate(status=IdeaStatus.RECYCLED, scheduled_date=None)
        )

    async def duplicate(self, source: Idea) -> Optional[Idea]:
        """
        Copy an idea as a new developing, non-timely idea titled
        "<title> (Copy)", then give it the source idea's tags.
        """
        copy = await self.ideas.create(
            IdeaCreate(
                title=f"{source.title} (Copy)",
                status=IdeaStatus.DEVELOPING,
                is_timely=False,
                **source.copy_fields(),
            )
        )
        if copy is None:
            return None

        tag_ids = await self.idea_tags.get(source.id)
        if tag_ids:
            await self.idea_tags.set(copy.id, tag_ids)

        return copy

    # -- lifecycle --

    def drain_notices(self) -> List[Notice]:
        return self.notifier.drain()

    async def drain_webhooks(self) -> None:
        await self.webhooks.drain()


class WorkspaceRegistry:
    """
    Keeps one workspace per user for the lifetime of the process.

    Collections and view state survive between requests the way they would
    survive between renders in a single browser session; nothing is written
    back to disk.
    """

    def __init__(self, repositories: RepositoryFactory, webhooks_enabled: bool = True):
        self._repositories = repositories
        self._webhooks_enabled = webhooks_enabled
        self._workspaces: Dict[str, IdeaWorkspace] = {}

    def get(self, user_id: str) -> IdeaWorkspace:
        workspace = self._workspaces.get(user_id)
        if workspace is None:
            workspace = IdeaWorkspace(user_id, self._repositories, self._webhook_sink(user_id))
            self._workspaces[user_id] = workspace
            logger.info(f"Opened workspace for user {user_id}")
        return workspace

    def discard(self, user_id: str) -> None:
        if self._workspaces.pop(user_id, None) is not None:
            logger.info(f"Closed workspace for user {user_id}")

    async def drain_all(self) -> None:
        """Wait for outstanding webhook deliveries of every workspace"""
        for workspace in list(self._workspaces.values()):
            await workspace.drain_webhooks()

    def __len__(self) -> int:
        return len(self._workspaces)

    def _webhook_sink(self, user_id: str) -> WebhookSink:
        if not self._webhooks_enabled:
            return NullWebhookSink()

        profiles = self._repositories.profiles

        async def webhook_url() -> Optional[str]:
            return await profiles.get_webhook_url(user_id)

        return ZapierWebhookSink(webhook_url)
