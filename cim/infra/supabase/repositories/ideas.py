"""Ideas repository"""
from supabase import Client  # type: ignore

from cim.models.idea import Idea, IdeaCreate, IdeaUpdate

from .base import BaseRepository


class IdeaRepository(BaseRepository[Idea, IdeaCreate, IdeaUpdate]):
    """Repository for ideas, read together with their content type and platform"""

    select_columns = "*, content_type:content_types(*), platform:platforms(*)"
    order_by = (("created_at", True),)

    def __init__(self, client: Client):
        super().__init__(client, "ideas", Idea)
