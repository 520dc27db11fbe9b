"""Changelog file handling module."""

from .project import detect_project_version
from .writer import (
    PREAMBLE,
    TITLE,
    insert_section,
    new_changelog,
    update_changelog_file,
    write_section_file,
)

__all__ = [
    "PREAMBLE",
    "TITLE",
    "detect_project_version",
    "insert_section",
    "new_changelog",
    "update_changelog_file",
    "write_section_file",
]
