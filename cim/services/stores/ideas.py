"""Idea record store"""
import logging
from typing import Optional

from cim.infra.supabase.repositories.ideas import IdeaRepository
from cim.models.idea import Idea, IdeaCreate, IdeaStatus, IdeaUpdate
from cim.services.automation import AutomationEvent, NullWebhookSink, WebhookSink
from cim.services.notifier import Notifier

from .base import RecordStore

logger = logging.getLogger(__name__)


def idea_event_data(idea: Idea) -> dict:
    return {
        "id": idea.id,
        "title": idea.title,
        "type": "idea",
        "status": idea.status.value,
        "content_type_id": idea.content_type_id,
        "platform_id": idea.platform_id,
    }


class IdeaStore(RecordStore[Idea, IdeaCreate, IdeaUpdate]):
    """Ideas, newest first, kept with their joined content type and platform"""

    label = "idea"
    plural = "ideas"
    prepend_new = True
    refetch_on_update = True

    def __init__(
        self,
        repository: IdeaRepository,
        notifier: Notifier,
        user_id: Optional[str],
        webhooks: Optional[WebhookSink] = None,
    ):
        super().__init__(repository, notifier, user_id)
        self.webhooks = webhooks or NullWebhookSink()

    async def create(self, data: IdeaCreate) -> Optional[Idea]:
        idea = await super().create(data)
        if idea is not None:
            self.webhooks.emit(AutomationEvent.IDEA_CREATED, idea_event_data(idea))
        return idea

    async def update(self, id: str, data: IdeaUpdate) -> Optional[Idea]:
        """
        Patch an idea.

        Moving an idea out of ``scheduled`` clears its scheduled date unless
        the same update sets one explicitly.
        """
        before = self.get(id)
        data = self._clear_stale_schedule(before, data)

        idea = await super().update(id, data)
        if idea is None:
            return None

        if before is not None and "status" in data.model_fields_set and before.status != idea.status:
            event = AutomationEvent.IDEA_STATUS_CHANGED
        else:
            event = AutomationEvent.IDEA_UPDATED
        self.webhooks.emit(event, idea_event_data(idea))
        return idea

    @staticmethod
    def _clear_stale_schedule(before: Optional[Idea], data: IdeaUpdate) -> IdeaUpdate:
        fields = data.model_fields_set
        if (
            "status" in fields
            and data.status is not None
            and data.status != IdeaStatus.SCHEDULED
            and "scheduled_date" not in fields
            and before is not None
            and before.scheduled_date is not None
        ):
            patch = data.model_dump(exclude_unset=True)
            patch["scheduled_date"] = None
            return IdeaUpdate(**patch)
        return data
