"""Data contract passed from the orchestration shell to changelog providers."""

from datetime import date as date_type
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Commit(BaseModel):
    """A single commit parsed from ``git log`` output."""

    model_config = ConfigDict(frozen=True)

    hash: str
    date: str
    subject: str
    body: str = ""

    @field_validator('subject', 'body')
    @classmethod
    def strip_text(cls, v):
        return (v or "").strip()

    def to_entry(self) -> "CommitEntry":
        """Project the commit onto the fields a model is allowed to see."""
        return CommitEntry(subject=self.subject, body=self.body)


class CommitEntry(BaseModel):
    """Subject and body of one commit, as sent to the model."""

    model_config = ConfigDict(frozen=True)

    subject: str
    body: str = ""


class ChangelogRequest(BaseModel):
    """Normalized request handed to every provider.

    ``commits`` keeps the order it was given in and must not be empty: an empty
    commit range is rejected here, before any provider is reached.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    date: str
    commits: Tuple[CommitEntry, ...]

    @field_validator('version')
    @classmethod
    def check_version(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("version must not be empty")
        return v

    @field_validator('date')
    @classmethod
    def check_date(cls, v):
        try:
            parsed = date_type.fromisoformat(v)
        except (TypeError, ValueError):
            raise ValueError(f"date must be an ISO date (YYYY-MM-DD), got {v!r}")
        return parsed.isoformat()

    @field_validator('commits')
    @classmethod
    def check_commits(cls, v):
        if not v:
            raise ValueError("commits must not be empty")
        return v

    @classmethod
    def from_commits(cls, version: str, date: str, commits) -> "ChangelogRequest":
        """Build a request from parsed commits, dropping hash and date."""
        return cls(version=version, date=date, commits=tuple(c.to_entry() for c in commits))

    def to_payload(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'date': self.date,
            'commits': [{'subject': c.subject, 'body': c.body} for c in self.commits],
        }
