"""Local git repository access through the git command line."""

import logging
import subprocess
from typing import List, Optional

from ..providers.models import Commit


FIELD_SEP = "\x1f"
RECORD_SEP = "\x1e"
LOG_FORMAT = "%H%x1f%ad%x1f%s%x1f%b%x1e"


class GitError(RuntimeError):
    """Raised when a git command cannot be run or fails."""


def build_range(from_ref: Optional[str], to_ref: str = "HEAD") -> str:
    """Build a git revision range.

    Args:
        from_ref: Starting reference (exclusive), may be empty
        to_ref: Ending reference

    Returns:
        ``from..to`` when a start is given, otherwise just ``to``
    """
    return f"{from_ref}..{to_ref}" if from_ref else to_ref


def parse_log(raw: str) -> List[Commit]:
    """Parse ``git log`` output produced with LOG_FORMAT.

    Args:
        raw: Raw stdout of git log

    Returns:
        Commits in the order git printed them
    """
    commits = []
    for record in raw.split(RECORD_SEP):
        record = record.strip('\n')
        if not record.strip():
            continue
        parts = record.split(FIELD_SEP)
        parts += [''] * (4 - len(parts))
        commit_hash, date, subject, body = parts[0], parts[1], parts[2], FIELD_SEP.join(parts[3:])
        commits.append(Commit(hash=commit_hash.strip(), date=date.strip(), subject=subject, body=body))
    return commits


class GitRepository:
    """Read tags and commit history from a local working copy."""

    def __init__(self, path: Optional[str] = None, logger: Optional[logging.Logger] = None):
        """Initialize repository access.

        Args:
            path: Working directory of the repository (defaults to the current one)
            logger: Logger instance
        """
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    def _run(self, *args: str) -> str:
        cmd = ["git", *args]
        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=self.path, capture_output=True, text=True, check=True)
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or '').strip()
            raise GitError(f"{' '.join(cmd)} failed: {stderr or e}") from e
        return result.stdout

    def get_last_tag(self) -> str:
        """Get the most recent tag reachable from HEAD.

        Returns:
            Tag name or an empty string if the repository has no tags
        """
        try:
            return self._run("describe", "--tags", "--abbrev=0").strip()
        except GitError as e:
            self.logger.debug(f"No tag found: {e}")
            return ""

    def get_commits(self, revision_range: str) -> List[Commit]:
        """List non-merge commits in a range, newest first.

        Args:
            revision_range: Range such as ``v1.0.0..HEAD``

        Returns:
            List of commits
        """
        raw = self._run(
            "log", "--no-merges", "--date=iso-strict",
            f"--pretty=format:{LOG_FORMAT}", revision_range,
        )
        commits = parse_log(raw)
        self.logger.debug(f"Found {len(commits)} commits in {revision_range}")
        return commits
