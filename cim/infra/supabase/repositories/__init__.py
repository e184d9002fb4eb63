"""Repository factory and exports"""
from supabase import Client
from .base import BaseRepository
from .ideas import IdeaRepository
from .content_types import ContentTypeRepository
from .platforms import PlatformRepository
from .quicklinks import QuickLinkRepository
from .tags import TagRepository, IdeaTagRepository
from .systems import SystemNoteRepository
from .templates import ContentTemplateRepository
from .note_colors import NoteColorRepository
from .idea_files import IdeaFileRepository, IDEA_FILES_BUCKET
from .profiles import ProfileRepository


class RepositoryFactory:
    """Factory for creating repository instances"""

    def __init__(self, client: Client):
        self._client = client
        self._ideas: IdeaRepository = None
        self._content_types: ContentTypeRepository = None
        self._platforms: PlatformRepository = None
        self._quicklinks: QuickLinkRepository = None
        self._tags: TagRepository = None
        self._idea_tags: IdeaTagRepository = None
        self._systems: SystemNoteRepository = None
        self._templates: ContentTemplateRepository = None
        self._note_colors: NoteColorRepository = None
        self._idea_files: IdeaFileRepository = None
        self._profiles: ProfileRepository = None

    @property
    def ideas(self) -> IdeaRepository:
        """Get ideas repository"""
        if self._ideas is None:
            self._ideas = IdeaRepository(self._client)
        return self._ideas

    @property
    def content_types(self) -> ContentTypeRepository:
        """Get content types repository"""
        if self._content_types is None:
            self._content_types = ContentTypeRepository(self._client)
        return self._content_types

    @property
    def platforms(self) -> PlatformRepository:
        """Get platforms repository"""
        if self._platforms is None:
            self._platforms = PlatformRepository(self._client)
        return self._platforms

    @property
    def quicklinks(self) -> QuickLinkRepository:
        """Get quicklinks repository"""
        if self._quicklinks is None:
            self._quicklinks = QuickLinkRepository(self._client)
        return self._quicklinks

    @property
    def tags(self) -> TagRepository:
        """Get tags repository"""
        if self._tags is None:
            self._tags = TagRepository(self._client)
        return self._tags

    @property
    def idea_tags(self) -> IdeaTagRepository:
        """Get idea-tag links repository"""
        if self._idea_tags is None:
            self._idea_tags = IdeaTagRepository(self._client)
        return self._idea_tags

    @property
    def systems(self) -> SystemNoteRepository:
        """Get system notes repository"""
        if self._systems is None:
            self._systems = SystemNoteRepository(self._client)
        return self._systems

    @property
    def templates(self) -> ContentTemplateRepository:
        """Get content templates repository"""
        if self._templates is None:
            self._templates = ContentTemplateRepository(self._client)
        return self._templates

    @property
    def note_colors(self) -> NoteColorRepository:
        """Get note colors repository"""
        if self._note_colors is None:
            self._note_colors = NoteColorRepository(self._client)
        return self._note_colors

    @property
    def idea_files(self) -> IdeaFileRepository:
        """Get idea files repository"""
        if self._idea_files is None:
            self._idea_files = IdeaFileRepository(self._client)
        return self._idea_files

    @property
    def profiles(self) -> ProfileRepository:
        """Get profiles repository"""
        if self._profiles is None:
            self._profiles = ProfileRepository(self._client)
        return self._profiles


__all__ = [
    'RepositoryFactory',
    'BaseRepository',
    'IdeaRepository',
    'ContentTypeRepository',
    'PlatformRepository',
    'QuickLinkRepository',
    'TagRepository',
    'IdeaTagRepository',
    'SystemNoteRepository',
    'ContentTemplateRepository',
    'NoteColorRepository',
    'IdeaFileRepository',
    'IDEA_FILES_BUCKET',
    'ProfileRepository',
]
