# robots_warden/evaluator.py
"""
Permission queries over a parsed RobotsDocument.

Entry selection is first-match in document order; the default ('*') entry is
consulted only when no named entry applies.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from robots_warden.models import Entry, PermissionOverride, RobotsDocument
from robots_warden.utils import query_path, unescape_path

__all__ = [
    "DecisionType",
    "FetchDecision",
    "evaluate",
    "can_fetch",
    "get_crawl_delay",
    "get_disallowed_paths",
]


class DecisionType(str, Enum):
    """Which mechanism produced a decision."""

    STATUS_CODE = "statusCode"
    ENTRY = "entry"
    DEFAULT_ENTRY = "defaultEntry"
    NO_RULE = "noRule"


@dataclass(frozen=True, slots=True)
class FetchDecision:
    allowed: bool
    path: str
    type: DecisionType
    status_code: Optional[int] = None
    entry: Optional[Entry] = None


def _first_matching_entry(document: RobotsDocument, user_agent: str) -> Optional[Entry]:
    for entry in document.entries:
        if entry.applies_to(user_agent):
            return entry
    return None


def _matching_entries(document: RobotsDocument, user_agent: str) -> Iterator[Entry]:
    return (entry for entry in document.entries if entry.applies_to(user_agent))


def evaluate(document: RobotsDocument, user_agent: str, path: Optional[str] = None) -> FetchDecision:
    """Decide whether *user_agent* may fetch *path* and report how the decision was made."""
    path = query_path(path)
    override = document.permission_override
    if override is not PermissionOverride.NONE:
        return FetchDecision(
            allowed=override is PermissionOverride.ALLOW_ALL,
            path=path,
            type=DecisionType.STATUS_CODE,
            status_code=document.status_code,
        )

    entry = _first_matching_entry(document, user_agent)
    if entry is not None:
        return FetchDecision(entry.allowance(path), path, DecisionType.ENTRY, entry=entry)

    if document.default_entry is not None:
        return FetchDecision(
            document.default_entry.allowance(path),
            path,
            DecisionType.DEFAULT_ENTRY,
            entry=document.default_entry,
        )

    # agent unknown to the document
    return FetchDecision(True, path, DecisionType.NO_RULE)


def can_fetch(document: RobotsDocument, user_agent: str, path: Optional[str] = None) -> bool:
    return evaluate(document, user_agent, path).allowed


def get_crawl_delay(document: RobotsDocument, user_agent: str) -> Optional[float]:
    """Crawl delay of the first applicable entry that declares one, else the default entry's."""
    for entry in _matching_entries(document, user_agent):
        if entry.crawl_delay is not None:
            return entry.crawl_delay
    if document.default_entry is None:
        return None
    return document.default_entry.crawl_delay


def get_disallowed_paths(document: RobotsDocument, user_agent: str) -> List[str]:
    """De-escaped Disallow paths of every applicable entry, then of the default entry."""
    entries = list(_matching_entries(document, user_agent))
    if document.default_entry is not None:
        entries.append(document.default_entry)
    return [
        unescape_path(rule.path)
        for entry in entries
        for rule in entry.rules
        if not rule.allowance
    ]
