# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from robots_warden.config import DEFAULT_USER_AGENT, FetcherConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("user_agent: MyBot/2.0\nredirect_limit: 2", ".yaml", None),
        (json.dumps({"user_agent": "MyBot/2.0", "redirect_limit": 2}), ".json", None),
        ("redirect_limit: -1", ".yaml", ValidationError),
        ("unknown_field: 1", ".yml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- a\n- b", ".yaml", TypeError),
        ("{broken", ".json", ValueError),
        ("user_agent = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, FetcherConfig)
        assert cfg.user_agent == "MyBot/2.0"
        assert cfg.redirect_limit == 2


def test_defaults():
    cfg = FetcherConfig()
    assert cfg.user_agent == DEFAULT_USER_AGENT
    assert cfg.redirect_limit == 5
    assert cfg.timeout == 10.0
    assert cfg.request_options == {}


def test_load_config_without_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == FetcherConfig()


def test_load_config_reads_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("timeout: 3.5\n", encoding="utf-8")
    assert load_config(None).timeout == 3.5


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_request_headers_must_be_mapping():
    with pytest.raises(ValidationError):
        FetcherConfig(request_options={"headers": ["X-Test: 1"]})


def test_config_is_frozen():
    cfg = FetcherConfig()
    with pytest.raises(ValidationError):
        cfg.redirect_limit = 1
