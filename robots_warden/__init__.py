# robots_warden/__init__.py
"""
robots_warden package initializer.
Defines package version and exposes the public API.
"""
__version__ = "0.1.0"

from robots_warden.config import FetcherConfig, load_config
from robots_warden.crawler.fetcher import RobotsFetcher, fetch_robots
from robots_warden.crawler.robots import RobotsParser
from robots_warden.evaluator import DecisionType, FetchDecision
from robots_warden.models import Entry, PermissionOverride, RobotsDocument, Rule
from robots_warden.parser.robots_parser import parse_lines, parse_text

__all__ = [
    "__version__",
    "DecisionType",
    "Entry",
    "FetchDecision",
    "FetcherConfig",
    "PermissionOverride",
    "RobotsDocument",
    "RobotsFetcher",
    "RobotsParser",
    "Rule",
    "fetch_robots",
    "load_config",
    "parse_lines",
    "parse_text",
]
