"""Rules for spotting breaking changes in commit messages."""

import re
from typing import Callable, Iterable, Sequence

from .models import CommitEntry

BreakingRule = Callable[[CommitEntry], bool]

# "BREAKING CHANGE: ..." or "BREAKING-CHANGE: ..." at the start of any line
BREAKING_FOOTER_RE = re.compile(r'^BREAKING[ -]CHANGE:', re.MULTILINE)

# Conventional commit subject with a bang, e.g. "feat(api)!: drop v1"
BANG_MARKER_RE = re.compile(r'^[A-Za-z]+(\([^)]*\))?!:')


def breaking_footer(entry: CommitEntry) -> bool:
    """Match a BREAKING CHANGE footer token in the subject or body."""
    return bool(BREAKING_FOOTER_RE.search(entry.subject) or BREAKING_FOOTER_RE.search(entry.body))


def bang_marker(entry: CommitEntry) -> bool:
    """Match a ``type(scope)!:`` subject marker."""
    return bool(BANG_MARKER_RE.match(entry.subject))


DEFAULT_BREAKING_RULES: Sequence[BreakingRule] = (breaking_footer, bang_marker)


def is_breaking(entry: CommitEntry, rules: Iterable[BreakingRule] = DEFAULT_BREAKING_RULES) -> bool:
    """Check whether any rule flags the commit as breaking.

    Args:
        entry: Commit subject and body
        rules: Predicates to apply

    Returns:
        True if at least one rule matches
    """
    return any(rule(entry) for rule in rules)
