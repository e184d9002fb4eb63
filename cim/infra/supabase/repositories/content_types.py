"""Content types repository"""
from supabase import Client  # type: ignore

from cim.models.content_type import ContentType, ContentTypeCreate, ContentTypeUpdate

from .base import BaseRepository


class ContentTypeRepository(BaseRepository[ContentType, ContentTypeCreate, ContentTypeUpdate]):
    """Repository for content types; built-in types are listed first"""

    order_by = (("is_system", True), ("name", False))

    def __init__(self, client: Client):
        super().__init__(client, "content_types", ContentType)
