"""Content templates repository"""
from supabase import Client  # type: ignore

from cim.models.template import ContentTemplate, ContentTemplateCreate, ContentTemplateUpdate

from .base import BaseRepository


class ContentTemplateRepository(
    BaseRepository[ContentTemplate, ContentTemplateCreate, ContentTemplateUpdate]
):
    order_by = (("sort_order", False),)

    def __init__(self, client: Client):
        super().__init__(client, "content_templates", ContentTemplate)
