"""Account settings: automation webhook URL and password"""
import logging
from typing import Optional

from cim.infra.supabase.repositories.profiles import ProfileRepository
from cim.models.profile import WebhookSettings, mask_webhook_url
from cim.services.notifier import Notifier

logger = logging.getLogger(__name__)


class AccountSettingsStore:
    def __init__(self, repository: ProfileRepository, notifier: Notifier, user_id: Optional[str]):
        self.repository = repository
        self.notifier = notifier
        self.user_id = user_id

    async def webhook(self) -> WebhookSettings:
        """Current webhook, with the secret part of the URL masked"""
        if not self.user_id:
            return WebhookSettings(configured=False)

        try:
            url = await self.repository.get_webhook_url(self.user_id)
        except Exception as e:
            logger.error(f"Error fetching webhook settings: {e}")
            self.notifier.error("Failed to load webhook settings")
            return WebhookSettings(configured=False)

        return WebhookSettings(configured=bool(url), masked_url=mask_webhook_url(url))

    async def save_webhook(self, url: str) -> bool:
        if not self.user_id:
            return False

        try:
            await self.repository.set_webhook_url(self.user_id, url)
        except Exception as e:
            logger.error(f"Error saving webhook URL: {e}")
            self.notifier.error("Failed to save webhook URL")
            return False

        self.notifier.success("Zapier webhook URL saved")
        return True

    async def clear_webhook(self) -> bool:
        if not self.user_id:
            return False

        try:
            await self.repository.set_webhook_url(self.user_id, None)
        except Exception as e:
            logger.error(f"Error clearing webhook URL: {e}")
            self.notifier.error("Failed to disconnect webhook")
            return False

        self.notifier.success("Zapier webhook disconnected")
        return True

    async def update_password(self, password: str) -> bool:
        if not self.user_id:
            return False

        try:
            await self.repository.update_password(self.user_id, password)
        except Exception as e:
            logger.error(f"Error updating password: {e}")
            self.notifier.error(str(e) or "Failed to update password")
            return False

        self.notifier.success("Password updated successfully")
        return True
