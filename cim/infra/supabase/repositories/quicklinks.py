"""QuickLinks repository"""
from supabase import Client  # type: ignore

from cim.models.quicklink import QuickLink, QuickLinkCreate, QuickLinkUpdate

from .base import BaseRepository


class QuickLinkRepository(BaseRepository[QuickLink, QuickLinkCreate, QuickLinkUpdate]):
    """Repository for quicklinks, read together with their content type"""

    select_columns = "*, content_type:content_types(*)"
    order_by = (("name", False),)

    def __init__(self, client: Client):
        super().__init__(client, "quicklinks", QuickLink)
