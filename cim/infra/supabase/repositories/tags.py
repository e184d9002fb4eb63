"""Tags and idea-tag link repositories"""
from typing import List

from supabase import Client  # type: ignore

from cim.models.tag import Tag, TagCreate, TagUpdate

from .base import BaseRepository


class TagRepository(BaseRepository[Tag, TagCreate, TagUpdate]):
    order_by = (("name", False),)

    def __init__(self, client: Client):
        super().__init__(client, "tags", Tag)


class IdeaTagRepository:
    """Many-to-many links between ideas and tags. Links carry no data of their own."""

    def __init__(self, client: Client):
        self._client = client
        self._table_name = "idea_tags"

    async def find_tag_ids(self, idea_id: str) -> List[str]:
        """Get the tag IDs linked to an idea"""
        response = (
            self._client.table(self._table_name)
            .select("tag_id")
            .eq("idea_id", idea_id)
            .execute()
        )
        return [item["tag_id"] for item in response.data or []]

    async def delete_for_idea(self, idea_id: str) -> None:
        """Remove every tag link of an idea"""
        self._client.table(self._table_name).delete().eq("idea_id", idea_id).execute()

    async def insert_links(self, user_id: str, idea_id: str, tag_ids: List[str]) -> None:
        """Link an idea to each of the given tags"""
        rows = [
            {"idea_id": idea_id, "tag_id": tag_id, "user_id": user_id}
            for tag_id in tag_ids
        ]
        self._client.table(self._table_name).insert(rows).execute()
