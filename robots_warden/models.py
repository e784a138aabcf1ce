# robots_warden/models.py
"""
Data models for a parsed robots.txt document: rules, entries and the document itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import unquote

from robots_warden.logger import logger
from robots_warden.utils import unescape_path

DEFAULT_REDIRECT_LIMIT = 5


class PermissionOverride(str, Enum):
    """Blanket decision derived from the HTTP outcome of the fetch."""

    NONE = "none"
    DISALLOW_ALL = "disallow_all"
    ALLOW_ALL = "allow_all"


@dataclass(frozen=True, slots=True)
class Rule:
    """A single Allow/Disallow directive bound to a path prefix."""

    path: str
    allowance: bool

    @property
    def decoded_path(self) -> str:
        return unescape_path(self.path)

    def applies_to(self, path: str) -> bool:
        return path.startswith(self.decoded_path)

    def __str__(self) -> str:
        return f"{'Allow' if self.allowance else 'Disallow'}: {self.path}"


@dataclass(slots=True)
class Entry:
    """A group of user agents sharing one rule set and an optional crawl delay."""

    user_agents: List[str] = field(default_factory=list)
    rules: List[Rule] = field(default_factory=list)
    crawl_delay: Optional[float] = None

    def add_user_agent(self, name: str) -> None:
        if name:
            self.user_agents.append(name.lower())

    def add_rule(self, rule: Rule) -> None:
        self.rules.append(rule)

    def set_crawl_delay(self, value: str) -> None:
        try:
            self.crawl_delay = float(value)
        except ValueError:
            logger.debug("Ignoring unparsable Crawl-delay %r", value)

    @property
    def is_default(self) -> bool:
        return "*" in self.user_agents

    def applies_to(self, user_agent: str) -> bool:
        """True for the wildcard or when a token is a substring of *user_agent* (case-insensitive)."""
        ua = user_agent.lower()
        return any(agent == "*" or agent in ua for agent in self.user_agents)

    def allowance(self, path: str) -> bool:
        """Longest matching rule wins; on a tie in length Allow beats Disallow."""
        if not self.rules:
            return True
        path = unquote(path)
        best_len = -1
        allowed = True
        for rule in self.rules:
            if not rule.applies_to(path):
                continue
            length = len(rule.decoded_path)
            if length > best_len or (length == best_len and rule.allowance):
                best_len = length
                allowed = rule.allowance
        return allowed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_agents": list(self.user_agents),
            "rules": [{"path": r.path, "allowance": r.allowance} for r in self.rules],
            "crawl_delay": self.crawl_delay,
        }

    def __str__(self) -> str:
        lines = [f"User-agent: {agent}" for agent in self.user_agents]
        lines.extend(str(rule) for rule in self.rules)
        if self.crawl_delay is not None:
            lines.append(f"Crawl-delay: {self.crawl_delay:g}")
        return "\n".join(lines)


@dataclass(slots=True)
class RobotsDocument:
    """
    In-memory state of one robots.txt: parsed entries, sitemaps and the fetch outcome.

    Documents are not safe for concurrent mutation: callers must not touch a
    document while its fetch is in flight.
    """

    url: Optional[str] = None
    entries: List[Entry] = field(default_factory=list)
    default_entry: Optional[Entry] = None
    sitemaps: List[str] = field(default_factory=list)
    status_code: int = -1
    permission_override: PermissionOverride = PermissionOverride.NONE
    redirect_budget: int = DEFAULT_REDIRECT_LIMIT
    error: Optional[str] = None

    def add_entry(self, entry: Entry) -> None:
        # the first '*' group is the default one, later ones are dropped
        if entry.is_default:
            if self.default_entry is None:
                self.default_entry = entry
            else:
                logger.debug("Dropping duplicate default entry: %s", entry.user_agents)
        else:
            self.entries.append(entry)

    def reset(self, url: Optional[str], redirect_budget: int = DEFAULT_REDIRECT_LIMIT) -> None:
        self.url = url
        self.entries = []
        self.default_entry = None
        self.sitemaps = []
        self.status_code = -1
        self.permission_override = PermissionOverride.NONE
        self.redirect_budget = redirect_budget
        self.error = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "status_code": self.status_code,
            "permission_override": self.permission_override.value,
            "redirect_budget": self.redirect_budget,
            "error": self.error,
            "default_entry": self.default_entry.to_dict() if self.default_entry else None,
            "entries": [entry.to_dict() for entry in self.entries],
            "sitemaps": list(self.sitemaps),
        }
