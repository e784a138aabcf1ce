# File: tests/test_models.py
import pytest

from robots_warden.models import Entry, PermissionOverride, RobotsDocument, Rule


def make_entry(*rules, agents=("bot",)):
    entry = Entry()
    for agent in agents:
        entry.add_user_agent(agent)
    for path, allow in rules:
        entry.add_rule(Rule(path, allow))
    return entry


@pytest.mark.parametrize(
    "agents,user_agent,expected",
    [
        (("*",), "anything", True),
        (("googlebot",), "Mozilla/5.0 (compatible; Googlebot/2.1)", True),
        (("GoogleBot",), "googlebot", True),
        (("bot",), "Crawler/1.0", False),
        (("other", "crawler"), "MyCrawler/1.0", True),
    ],
)
def test_entry_applies_to(agents, user_agent, expected):
    assert make_entry(agents=agents).applies_to(user_agent) is expected


def test_user_agents_lowercased_and_empty_skipped():
    entry = make_entry(agents=("BingBot", ""))
    assert entry.user_agents == ["bingbot"]


def test_allowance_without_rules():
    assert make_entry().allowance("/anything") is True


def test_allowance_no_matching_rule_allows():
    assert make_entry(("/private", False)).allowance("/public") is True


def test_longest_prefix_wins():
    entry = make_entry(("/", False), ("/public", True))
    assert entry.allowance("/public/x") is True
    assert entry.allowance("/private") is False


def test_longest_prefix_wins_regardless_of_order():
    entry = make_entry(("/docs/internal", False), ("/docs", True))
    assert entry.allowance("/docs/internal/a") is False
    assert entry.allowance("/docs/a") is True


def test_allow_wins_tie():
    assert make_entry(("/page", False), ("/page", True)).allowance("/page") is True
    assert make_entry(("/page", True), ("/page", False)).allowance("/page") is True


def test_percent_encoded_paths_compare_decoded():
    entry = make_entry(("/caf%C3%A9", False))
    assert entry.allowance("/café/menu") is False
    assert entry.allowance("/caf%c3%a9/menu") is False


def test_rule_str():
    assert str(Rule("/x", True)) == "Allow: /x"
    assert str(Rule("/y", False)) == "Disallow: /y"


def test_entry_str():
    entry = make_entry(("/x", False), agents=("bot",))
    entry.set_crawl_delay("3")
    assert str(entry) == "User-agent: bot\nDisallow: /x\nCrawl-delay: 3"


def test_add_entry_first_default_wins():
    doc = RobotsDocument()
    first = make_entry(("/a", False), agents=("*",))
    second = make_entry(("/b", False), agents=("*",))
    named = make_entry(("/c", False))
    doc.add_entry(first)
    doc.add_entry(named)
    doc.add_entry(second)
    assert doc.default_entry is first
    assert doc.entries == [named]


def test_new_document_defaults():
    doc = RobotsDocument()
    assert doc.status_code == -1
    assert doc.permission_override is PermissionOverride.NONE
    assert doc.redirect_budget == 5
    assert doc.entries == [] and doc.sitemaps == []


def test_reset_clears_state():
    doc = RobotsDocument(url="http://a/robots.txt", status_code=403,
                         permission_override=PermissionOverride.DISALLOW_ALL, redirect_budget=1)
    doc.sitemaps.append("http://a/s.xml")
    doc.reset("http://b/robots.txt", redirect_budget=3)
    assert doc.url == "http://b/robots.txt"
    assert doc.status_code == -1
    assert doc.permission_override is PermissionOverride.NONE
    assert doc.redirect_budget == 3
    assert doc.sitemaps == []


def test_to_dict(sample_document):
    data = sample_document.to_dict()
    assert data["status_code"] == -1
    assert data["permission_override"] == "none"
    assert data["default_entry"]["crawl_delay"] == 2.0
    assert data["entries"][1] == {
        "user_agents": ["slowbot"],
        "rules": [{"path": "/", "allowance": False}],
        "crawl_delay": None,
    }
