# File: robots_warden/utils.py
"""robots_warden.utils: Утилиты для разбора строк robots.txt, проверки путей и работы с URL."""

from __future__ import annotations

import re
from typing import List, Sequence
from urllib.parse import unquote, urlparse, urlsplit, urlunparse

from robots_warden.logger import logger

__all__: Sequence[str] = (
    "MAX_VALUE_LENGTH",
    "split_lines",
    "is_path_safe",
    "unescape_path",
    "robots_url",
    "query_path",
)

#: longest directive value that is still admitted
MAX_VALUE_LENGTH = 2048

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def split_lines(text: str) -> List[str]:
    """Делит текст только по ``\\r\\n``, ``\\r`` и ``\\n`` (без прочих разделителей str.splitlines)."""
    return _LINE_BREAK_RE.split(text)


def is_path_safe(value: str) -> bool:
    """Проверяет значение директивы: непустое, не слишком длинное, без управляющих символов
    и с корректным percent-encoding."""
    if not value or len(value) > MAX_VALUE_LENGTH:
        return False
    if _CONTROL_RE.search(value):
        return False
    try:
        unescape_path(value)
    except UnicodeDecodeError:
        return False
    return True


def unescape_path(path: str) -> str:
    """Раскрывает percent-encoding; некорректный UTF-8 вызывает UnicodeDecodeError."""
    return unquote(path, errors="strict")


def robots_url(url: str) -> str:
    """Возвращает URL robots.txt для сайта; URL, уже указывающий на robots.txt, не меняется."""
    parsed = urlparse(url)
    if parsed.path.endswith("/robots.txt"):
        return url
    result = urlunparse((parsed.scheme, parsed.netloc, "/robots.txt", "", "", ""))
    logger.debug("Robots URL: %s -> %s", url, result)
    return result


def query_path(path: str | None) -> str:
    """Приводит аргумент запроса к пути: пустой -> "/", полный URL -> путь с query."""
    if not path:
        return "/"
    if "://" in path:
        parts = urlsplit(path)
        path = parts.path or "/"
        if parts.query:
            path = f"{path}?{parts.query}"
    return path
