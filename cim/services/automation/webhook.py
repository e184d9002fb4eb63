"""
Automation Webhook

Posts idea and note events to the user's configured automation webhook
(e.g. a Zapier catch hook). Delivery is fire-and-forget: failures are
logged, never raised, never retried, and never shown to the user.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Set
from urllib.parse import urlparse

import httpx

from cim import config
from .events import AutomationEvent, WebhookEnvelope

logger = logging.getLogger(__name__)


class WebhookSink(Protocol):
    """Anything that accepts automation events without blocking the caller"""

    def emit(self, event: AutomationEvent, data: Dict[str, Any]) -> None: ...

    async def drain(self) -> None: ...


class NullWebhookSink:
    """Sink used when no automation is wired up"""

    def emit(self, event: AutomationEvent, data: Dict[str, Any]) -> None:
        return None

    async def drain(self) -> None:
        return None


def is_valid_webhook_url(url: Optional[str]) -> bool:
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ZapierWebhookSink:
    """
    Sends each event as its own background POST.

    The webhook URL is looked up per event so changes in settings apply
    immediately. Pending deliveries are tracked so they are not garbage
    collected mid-flight and can be awaited with ``drain``.
    """

    def __init__(
        self,
        url_provider: Callable[[], Awaitable[Optional[str]]],
        timeout: float = config.WEBHOOK_TIMEOUT_SECONDS,
    ):
        self._url_provider = url_provider
        self._timeout = timeout
        self._pending: Set[asyncio.Task] = set()

    def emit(self, event: AutomationEvent, data: Dict[str, Any]) -> None:
        envelope = WebhookEnvelope(event=event, data=data)
        task = asyncio.create_task(self._deliver(envelope))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every delivery started so far"""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _deliver(self, envelope: WebhookEnvelope) -> None:
        try:
            url = await self._url_provider()
        except Exception as e:
            logger.error(f"Could not look up automation webhook URL: {e}")
            return

        if not url:
            logger.debug("No automation webhook configured")
            return

        if not is_valid_webhook_url(url):
            logger.error("Invalid automation webhook URL")
            return

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    json=envelope.model_dump(mode="json"),
                    headers={"Content-Type": "application/json"},
                    timeout=self._timeout,
                )
            if not response.is_success:
                logger.error(f"Automation webhook failed with status {response.status_code}")
            else:
                logger.info(f"Delivered {envelope.event.value} to automation webhook")
        except Exception as e:
            # Webhook failures must never break the primary operation
            logger.error(f"Error triggering automation webhook: {e}")
