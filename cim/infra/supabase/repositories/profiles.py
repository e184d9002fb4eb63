"""User profile and account repository"""
import logging
from typing import Optional

from supabase import Client  # type: ignore

from cim.models.profile import Profile

logger = logging.getLogger(__name__)


class ProfileRepository:
    """Profile settings and Supabase Auth admin operations for a user"""

    def __init__(self, client: Client):
        self._client = client
        self._table_name = "profiles"

    async def find_by_user(self, user_id: str) -> Optional[Profile]:
        """Get the profile row of a user"""
        response = (
            self._client.table(self._table_name)
            .select("*")
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            return None
        return Profile(**response.data[0])

    async def get_webhook_url(self, user_id: str) -> Optional[str]:
        profile = await self.find_by_user(user_id)
        return profile.zapier_webhook_url if profile else None

    async def set_webhook_url(self, user_id: str, url: Optional[str]) -> None:
        """Save or clear (``None``) the automation webhook URL"""
        (
            self._client.table(self._table_name)
            .update({"zapier_webhook_url": url})
            .eq("user_id", user_id)
            .execute()
        )

    async def update_password(self, user_id: str, password: str) -> None:
        """Set a new password through the Supabase Auth admin API"""
        self._client.auth.admin.update_user_by_id(user_id, {"password": password})
        logger.info(f"Password updated for user {user_id}")
