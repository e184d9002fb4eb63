"""Platforms repository"""
from supabase import Client  # type: ignore

from cim.models.platform import Platform, PlatformCreate, PlatformUpdate

from .base import BaseRepository


class PlatformRepository(BaseRepository[Platform, PlatformCreate, PlatformUpdate]):
    order_by = (("name", False),)

    def __init__(self, client: Client):
        super().__init__(client, "platforms", Platform)
