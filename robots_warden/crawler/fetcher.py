# robots_warden/crawler/fetcher.py
"""
Fetcher module: retrieves robots.txt, follows redirects within a budget and
turns the HTTP outcome into a permission policy.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urljoin

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from robots_warden.config import FetcherConfig
from robots_warden.logger import logger
from robots_warden.models import PermissionOverride, RobotsDocument
from robots_warden.parser.robots_parser import parse_lines
from robots_warden.utils import split_lines

__all__ = ["RobotsFetcher", "fetch_robots"]

_DENY_STATUS = (401, 403)
_REDIRECT_STATUS = (301, 302)


class RobotsFetcher:
    """Runs the GET/redirect loop for one document at a time."""

    def __init__(self, session: ClientSession, config: FetcherConfig) -> None:
        self.session = session
        self.config = config

    def _request_kwargs(self) -> Dict[str, Any]:
        options = dict(self.config.request_options)
        headers = {"User-Agent": self.config.user_agent}
        headers.update(options.pop("headers", None) or {})
        options.pop("allow_redirects", None)
        options.setdefault("timeout", ClientTimeout(total=self.config.timeout))
        return {**options, "headers": headers, "allow_redirects": False}

    async def fetch(self, document: RobotsDocument) -> bool:
        """
        Fetch ``document.url`` and fill *document*.

        Returns True when a body was parsed, False for every other outcome
        (denied, allow-all, redirect budget exhausted, transport error).
        """
        while True:
            if document.url is None:
                raise ValueError("document has no URL to fetch")
            logger.debug("Requesting %s", document.url)
            try:
                async with self.session.get(document.url, **self._request_kwargs()) as resp:
                    outcome = await self._handle(document, resp)
            except asyncio.TimeoutError:
                logger.warning("Timeout fetching %s", document.url)
                document.error = "timeout"
                return False
            except ClientError as exc:
                logger.warning("Error fetching %s: %s", document.url, exc)
                document.error = str(exc) or type(exc).__name__
                return False
            except ValueError as exc:
                # unresolvable Location header
                logger.warning("Bad redirect from %s: %s", document.url, exc)
                document.error = str(exc) or type(exc).__name__
                return False

            if isinstance(outcome, bool):
                return outcome
            # outcome is the next hop
            document.url = outcome

    async def _handle(self, document: RobotsDocument, resp: ClientResponse) -> bool | str:
        status = resp.status
        document.status_code = status
        logger.debug("%s -> HTTP %s", document.url, status)

        if status in _DENY_STATUS:
            document.permission_override = PermissionOverride.DISALLOW_ALL
            await resp.read()
            return False

        if status >= 400:
            document.permission_override = PermissionOverride.ALLOW_ALL
            await resp.read()
            return False

        if status in _REDIRECT_STATUS and "Location" in resp.headers:
            await resp.read()
            if document.redirect_budget <= 0:
                logger.debug("Redirect limit reached at %s", document.url)
                document.permission_override = PermissionOverride.ALLOW_ALL
                return False
            document.redirect_budget -= 1
            return urljoin(str(document.url), resp.headers["Location"])

        text = await resp.text(encoding="utf-8-sig", errors="replace")
        parse_lines(split_lines(text), document)
        return True


async def fetch_robots(
    url: str,
    config: Optional[FetcherConfig] = None,
    *,
    session: Optional[ClientSession] = None,
    document: Optional[RobotsDocument] = None,
) -> Tuple[RobotsDocument, bool]:
    """
    Fetch and parse the robots.txt at *url*.

    A session is created (and closed) here unless one is supplied.
    Returns the populated document and the success flag.
    """
    config = config or FetcherConfig()
    if document is None:
        document = RobotsDocument(url=url, redirect_budget=config.redirect_limit)
    else:
        document.url = url

    if session is not None:
        return document, await RobotsFetcher(session, config).fetch(document)

    async with ClientSession(timeout=ClientTimeout(total=config.timeout)) as own_session:
        return document, await RobotsFetcher(own_session, config).fetch(document)
