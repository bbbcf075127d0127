"""Detect added migration files and render their markdown summary."""

from dbchanges.migrations.detector import detect_added_migrations
from dbchanges.migrations.summary import (
    HEADING,
    blob_url,
    count_added_lines,
    group_migrations,
    render_file_list,
    render_migration_pairs,
    render_section,
)

__all__ = [
    "HEADING",
    "blob_url",
    "count_added_lines",
    "detect_added_migrations",
    "group_migrations",
    "render_file_list",
    "render_migration_pairs",
    "render_section",
]
