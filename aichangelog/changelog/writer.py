"""Changelog file updates."""

import logging
import re
from pathlib import Path
from typing import Optional, Tuple


logger = logging.getLogger(__name__)

TITLE = "# Changelog"

PREAMBLE = (
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.1.0/),\n"
    "and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html)."
)

TITLE_RE = re.compile(r'^#[ \t]*Changelog[ \t]*$', re.MULTILINE | re.IGNORECASE)
PARAGRAPH_SEP_RE = re.compile(r'\n[ \t]*\n')

# First lines of the standard Keep a Changelog preamble paragraphs
PREAMBLE_OPENERS = ("All notable changes", "The format is based on")


def split_preamble(text: str) -> Tuple[str, str]:
    """Split leading preamble paragraphs off changelog body text.

    Args:
        text: Content below the title line

    Returns:
        Tuple of (preamble, remainder); preamble is empty when absent
    """
    text = text.strip()
    preamble_end = 0
    pos = 0
    while pos < len(text) and text.startswith(PREAMBLE_OPENERS, pos):
        sep = PARAGRAPH_SEP_RE.search(text, pos)
        preamble_end = sep.start() if sep else len(text)
        pos = sep.end() if sep else len(text)
    return text[:preamble_end], text[pos:]


def new_changelog(section: str) -> str:
    """Build a fresh changelog document around a single section."""
    return f"{TITLE}\n\n{PREAMBLE}\n\n{section.strip()}\n"


def insert_section(existing: Optional[str], section: str) -> str:
    """Insert a release section into changelog content.

    Args:
        existing: Current file content, or None when there is no file yet
        section: Markdown section to add

    Returns:
        Updated changelog content
    """
    section = section.strip()
    if existing is None:
        return new_changelog(section)

    match = TITLE_RE.search(existing)
    if not match:
        return f"{section}\n\n{existing}"

    head = existing[:match.end()]
    # Only the standard preamble stays between the title and the new section
    preamble, releases = split_preamble(existing[match.end():])

    parts = [head, preamble, section, releases.strip()]
    return '\n\n'.join(p for p in parts if p) + '\n'


def update_changelog_file(path: str, section: str) -> str:
    """Insert a section into the changelog at ``path``, creating it if needed.

    Args:
        path: Changelog file path
        section: Markdown section to add

    Returns:
        The content written
    """
    file_path = Path(path)
    existing = file_path.read_text(encoding='utf-8') if file_path.exists() else None
    if existing is None:
        logger.info(f"Creating new changelog at {file_path}")

    content = insert_section(existing, section)
    file_path.write_text(content, encoding='utf-8')
    return content


def write_section_file(path: str, section: str) -> None:
    """Write a single section to its own file.

    Args:
        path: Output file path
        section: Markdown section
    """
    Path(path).write_text(section.strip() + '\n', encoding='utf-8')
