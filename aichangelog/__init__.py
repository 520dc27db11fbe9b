"""Generate Keep a Changelog sections from git history with an LLM."""

__version__ = "0.1.0"
