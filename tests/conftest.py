# File: tests/conftest.py
from typing import List

import pytest

from robots_warden.config import FetcherConfig
from robots_warden.models import RobotsDocument
from robots_warden.parser.robots_parser import parse_text

SAMPLE_ROBOTS = """\
# sample robots.txt
User-agent: *
Disallow: /private
Allow: /private/open
Crawl-delay: 2

User-agent: Googlebot
User-agent: bingbot
Disallow: /no-search
Crawl-delay: 5

User-agent: slowbot
Disallow: /

Sitemap: https://example.com:8080/sitemap.xml
Sitemap: http://example.com/news.xml
"""


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_ROBOTS


@pytest.fixture()
def sample_document() -> RobotsDocument:
    """
    Return a RobotsDocument parsed from SAMPLE_ROBOTS.
    """
    return parse_text(SAMPLE_ROBOTS)


@pytest.fixture()
def fast_config() -> FetcherConfig:
    """
    Return a FetcherConfig with a short timeout for fetch tests.
    """
    return FetcherConfig(user_agent="TestAgent/1.0", timeout=2.0)


@pytest.fixture()
def lines() -> List[str]:
    return [
        "User-agent: *",
        "Disallow: /a",
        "",
        "User-agent: bot",
        "Disallow: /b",
        "",
    ]
