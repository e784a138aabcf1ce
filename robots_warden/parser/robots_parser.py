# File: robots_warden/parser/robots_parser.py
"""robots_warden.parser.robots_parser: Построчный разбор robots.txt в группы User-agent и правила.

Каждая строка обрабатывается независимо; между строками сохраняются только
состояние разбора и накапливаемая группа (Entry). User-agent не обязан
предваряться пустой строкой.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Optional, Tuple

from robots_warden.logger import logger
from robots_warden.models import Entry, PermissionOverride, RobotsDocument, Rule
from robots_warden.utils import is_path_safe, split_lines

__all__ = ["Directive", "ParseState", "parse_lines", "parse_text"]

# placeholders keep URL colons out of the field/value split
_PORT_RE = re.compile(r":(\d+/)")
_PORT_RESTORE_RE = re.compile(r"__(\d+/)")


class Directive(Enum):
    """Поддерживаемые поля robots.txt."""

    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    SITEMAP = "sitemap"
    CRAWL_DELAY = "crawl-delay"
    UNKNOWN = ""

    @classmethod
    def from_field(cls, name: str) -> Directive:
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.UNKNOWN


class ParseState(Enum):
    START = 0
    SAW_AGENT = 1
    SAW_RULE = 2


def _split_directive(line: str) -> Optional[Tuple[str, str]]:
    """Делит строку на (поле, значение); None, если двоеточий не ровно одно."""
    line = line.replace("http:", "http_", 1).replace("https:", "https_", 1)
    line = _PORT_RE.sub(r"__\1", line, count=1)
    parts = line.split(":")
    if len(parts) != 2:
        return None
    field, value = parts
    value = value.replace("http_", "http:", 1).replace("https_", "https:", 1)
    value = _PORT_RESTORE_RE.sub(r":\1", value, count=1)
    return field, value.strip()


def parse_lines(lines: Iterable[str], document: Optional[RobotsDocument] = None) -> RobotsDocument:
    """Разбирает строки robots.txt и дополняет ими документ.

    Args:
        lines: строки файла без символов перевода строки.
        document: документ для заполнения; по умолчанию создаётся новый.

    Returns:
        Тот же (или новый) RobotsDocument. Если у документа уже выставлен
        permission_override, строки не разбираются.
    """
    if document is None:
        document = RobotsDocument()
    if document.permission_override is not PermissionOverride.NONE:
        logger.debug("Skipping parse, document is %s", document.permission_override.value)
        return document

    state = ParseState.START
    entry = Entry()

    for raw in lines:
        line = raw.lstrip("\ufeff").split("#", 1)[0].strip()

        if not line:
            if state is ParseState.SAW_AGENT:
                entry = Entry()
                state = ParseState.START
            elif state is ParseState.SAW_RULE:
                document.add_entry(entry)
                entry = Entry()
                state = ParseState.START
            continue

        split = _split_directive(line)
        if split is None:
            continue
        field, value = split
        directive = Directive.from_field(field)

        if directive is Directive.USER_AGENT:
            if state is ParseState.SAW_RULE:
                document.add_entry(entry)
                entry = Entry()
            entry.add_user_agent(value)
            state = ParseState.SAW_AGENT

        elif directive in (Directive.ALLOW, Directive.DISALLOW):
            if state is ParseState.START:
                logger.debug("Orphan %s directive ignored: %r", directive.value, value)
            elif is_path_safe(value):
                entry.add_rule(Rule(value, directive is Directive.ALLOW))
                state = ParseState.SAW_RULE
            else:
                logger.debug("Unsafe %s value dropped: %r", directive.value, value)

        elif directive is Directive.SITEMAP:
            if is_path_safe(value):
                document.sitemaps.append(value)

        elif directive is Directive.CRAWL_DELAY:
            if state is not ParseState.START:
                entry.set_crawl_delay(value)
                state = ParseState.SAW_RULE

    if state is ParseState.SAW_RULE:
        document.add_entry(entry)
    return document


def parse_text(text: str, document: Optional[RobotsDocument] = None) -> RobotsDocument:
    """Разбирает полный текст robots.txt (переводы строк \\r\\n, \\r или \\n)."""
    return parse_lines(split_lines(text), document)
