"""QuickLink record store"""
from typing import List, Optional

from cim.models.quicklink import QuickLink, QuickLinkCreate, QuickLinkUpdate

from .base import RecordStore, by_name


class QuickLinkStore(RecordStore[QuickLink, QuickLinkCreate, QuickLinkUpdate]):
    label = "quicklink"
    plural = "quicklinks"
    sort_key = staticmethod(by_name)
    refetch_on_update = True

    @property
    def title(self) -> str:
        return "QuickLink"

    def for_content_type(self, content_type_id: Optional[str]) -> List[QuickLink]:
        """Links associated with an idea's content type"""
        if not content_type_id:
            return []
        return [link for link in self.items if link.content_type_id == content_type_id]
