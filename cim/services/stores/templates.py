"""Content template record store"""
from typing import List, Optional

from cim.models.template import ContentTemplate, ContentTemplateCreate, ContentTemplateUpdate

from .base import RecordStore


class ContentTemplateStore(RecordStore[ContentTemplate, ContentTemplateCreate, ContentTemplateUpdate]):
    label = "template"
    plural = "templates"

    def for_content_type(self, content_type_id: Optional[str]) -> List[ContentTemplate]:
        """Templates usable for an idea type: the type's own plus the unscoped ones"""
        return [
            template for template in self.items
            if template.content_type_id is None or template.content_type_id == content_type_id
        ]
