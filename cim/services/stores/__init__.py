"""Record stores: one in-memory collection per entity, mirrored to Supabase"""
from .base import RecordStore
from .ideas import IdeaStore
from .catalog import ContentTypeStore, PlatformStore
from .tags import TagStore, IdeaTagStore
from .quicklinks import QuickLinkStore
from .systems import SystemNoteStore
from .templates import ContentTemplateStore
from .note_colors import NoteColorStore
from .idea_files import IdeaFileStore, build_file_path, clean_file_name
from .settings import AccountSettingsStore

__all__ = [
    "RecordStore",
    "IdeaStore",
    "ContentTypeStore",
    "PlatformStore",
    "TagStore",
    "IdeaTagStore",
    "QuickLinkStore",
    "SystemNoteStore",
    "ContentTemplateStore",
    "NoteColorStore",
    "IdeaFileStore",
    "build_file_path",
    "clean_file_name",
    "AccountSettingsStore",
]
