"""Git history module."""

from .repository import GitError, GitRepository, build_range, parse_log

__all__ = ["GitError", "GitRepository", "build_range", "parse_log"]
