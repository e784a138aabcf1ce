# robots_warden/crawler/robots.py
"""
RobotsParser: reads one robots.txt and answers questions about it.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Iterable, List, Optional

from aiohttp import ClientSession

from robots_warden.config import FetcherConfig
from robots_warden.crawler.fetcher import RobotsFetcher, fetch_robots
from robots_warden.evaluator import FetchDecision, evaluate, get_crawl_delay, get_disallowed_paths
from robots_warden.logger import logger
from robots_warden.models import RobotsDocument
from robots_warden.parser.robots_parser import parse_lines

AfterParse = Callable[["RobotsParser", bool], None]
DecisionCallback = Callable[[bool, str, FetchDecision], None]


class RobotsParser:
    """Wraps a RobotsDocument with fetch, parse and query operations.

    Query methods never mutate the document. Calling :meth:`read` or
    :meth:`set_url` while another read is in flight is the caller's problem.
    """

    def __init__(self, url: Optional[str] = None, config: Optional[FetcherConfig] = None) -> None:
        self.config = config or FetcherConfig()
        self.document = RobotsDocument(url=url, redirect_budget=self.config.redirect_limit)

    @property
    def url(self) -> Optional[str]:
        return self.document.url

    @property
    def status_code(self) -> int:
        return self.document.status_code

    @property
    def error(self) -> Optional[str]:
        return self.document.error

    @property
    def sitemaps(self) -> List[str]:
        return list(self.document.sitemaps)

    def set_url(self, url: Optional[str]) -> None:
        """Point the parser at a new robots.txt, dropping everything learned so far."""
        self.document.reset(url, redirect_budget=self.config.redirect_limit)

    async def read(
        self,
        session: Optional[ClientSession] = None,
        after_parse: Optional[AfterParse] = None,
    ) -> bool:
        """Fetch and parse the current URL; *after_parse(parser, success)* runs on completion."""
        self.document.reset(self.document.url, redirect_budget=self.config.redirect_limit)
        if self.document.url is None:
            logger.warning("RobotsParser.read called without a URL")
            success = False
        elif session is not None:
            success = await RobotsFetcher(session, self.config).fetch(self.document)
        else:
            _, success = await fetch_robots(self.document.url, self.config, document=self.document)
        if after_parse is not None:
            after_parse(self, success)
        return success

    def parse(self, lines: Iterable[str]) -> RobotsParser:
        parse_lines(lines, self.document)
        return self

    def can_fetch(self, user_agent: str, path: Optional[str] = None) -> bool:
        return evaluate(self.document, user_agent, path).allowed

    async def can_fetch_async(
        self,
        user_agent: str,
        path: Optional[str] = None,
        callback: Optional[DecisionCallback] = None,
    ) -> FetchDecision:
        """Same answer as :meth:`can_fetch`, delivered after yielding to the event loop."""
        await asyncio.sleep(0)
        decision = evaluate(self.document, user_agent, path)
        if callback is not None:
            callback(decision.allowed, decision.path, decision)
        return decision

    def get_crawl_delay(self, user_agent: str) -> Optional[float]:
        return get_crawl_delay(self.document, user_agent)

    def get_disallowed_paths(self, user_agent: str) -> List[str]:
        return get_disallowed_paths(self.document, user_agent)

    async def get_sitemaps(self, callback: Optional[Callable[[List[str]], None]] = None) -> List[str]:
        await asyncio.sleep(0)
        sitemaps = self.sitemaps
        if callback is not None:
            callback(sitemaps)
        return sitemaps

    def describe(self) -> str:
        """Short form listing the crawler agent and every agent named in the file."""
        names: List[str] = []
        if self.document.default_entry is not None:
            names.extend(self.document.default_entry.user_agents)
        for entry in self.document.entries:
            names.extend(entry.user_agents)
        return (
            f"<Parser: Crawler User Agent is `{self.config.user_agent}`, "
            f"Listed Robot Agents: `{'`, `'.join(names)}`>"
        )

    def __str__(self) -> str:
        parts = [f"<Parser: Crawler User Agent: {self.config.user_agent}"]
        if self.document.default_entry is not None:
            parts.append(str(self.document.default_entry))
        parts.extend(str(entry) for entry in self.document.entries)
        parts.append(">")
        return "\n".join(parts)
