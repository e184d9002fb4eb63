"""Domain models for the application"""
from .idea import (
    Idea, IdeaCreate, IdeaUpdate, IdeaStatus, IdeaPriority, EnergyLevel, TimeEstimate,
    HIDDEN_STATUSES, STATUS_LABELS, PRIORITY_LABELS,
)
from .content_type import ContentType, ContentTypeCreate, ContentTypeUpdate
from .platform import Platform, PlatformCreate, PlatformUpdate
from .tag import Tag, TagCreate, TagUpdate, IdeaTagsUpdate, DEFAULT_TAG_COLOR
from .quicklink import QuickLink, QuickLinkCreate, QuickLinkUpdate, LINK_TYPES, is_custom_link_type
from .system_note import SystemNote, SystemNoteCreate, SystemNoteUpdate, SystemNoteType
from .idea_file import IdeaFile, IdeaFileCreate, MAX_FILE_SIZE
from .template import ContentTemplate, ContentTemplateCreate, ContentTemplateUpdate
from .note_color import NoteColor, NoteColorCreate, NoteColorUpdate, PaletteColor, LEGACY_NOTE_COLORS
from .profile import Profile, WebhookSettings, WebhookSettingsUpdate, PasswordUpdate, mask_webhook_url
from .notice import Notice, NoticeLevel
from .view import ViewMode, DateRange, IdeaFilters, IdeaStats, IdeaView, ArchiveView, CalendarView

__all__ = [
    'Idea', 'IdeaCreate', 'IdeaUpdate', 'IdeaStatus', 'IdeaPriority', 'EnergyLevel', 'TimeEstimate',
    'HIDDEN_STATUSES', 'STATUS_LABELS', 'PRIORITY_LABELS',
    'ContentType', 'ContentTypeCreate', 'ContentTypeUpdate',
    'Platform', 'PlatformCreate', 'PlatformUpdate',
    'Tag', 'TagCreate', 'TagUpdate', 'IdeaTagsUpdate', 'DEFAULT_TAG_COLOR',
    'QuickLink', 'QuickLinkCreate', 'QuickLinkUpdate', 'LINK_TYPES', 'is_custom_link_type',
    'SystemNote', 'SystemNoteCreate', 'SystemNoteUpdate', 'SystemNoteType',
    'IdeaFile', 'IdeaFileCreate', 'MAX_FILE_SIZE',
    'ContentTemplate', 'ContentTemplateCreate', 'ContentTemplateUpdate',
    'NoteColor', 'NoteColorCreate', 'NoteColorUpdate', 'PaletteColor', 'LEGACY_NOTE_COLORS',
    'Profile', 'WebhookSettings', 'WebhookSettingsUpdate', 'PasswordUpdate', 'mask_webhook_url',
    'Notice', 'NoticeLevel',
    'ViewMode', 'DateRange', 'IdeaFilters', 'IdeaStats', 'IdeaView', 'ArchiveView', 'CalendarView',
]
