"""CSV export module"""
from .csv_export import (
    IDEAS_EXPORT_PREFIX,
    SYSTEMS_EXPORT_PREFIX,
    format_idea_for_csv,
    format_system_for_csv,
    ideas_to_csv,
    rows_to_csv,
    strip_html,
    systems_to_csv,
)

__all__ = [
    'IDEAS_EXPORT_PREFIX',
    'SYSTEMS_EXPORT_PREFIX',
    'format_idea_for_csv',
    'format_system_for_csv',
    'ideas_to_csv',
    'rows_to_csv',
    'strip_html',
    'systems_to_csv',
]
