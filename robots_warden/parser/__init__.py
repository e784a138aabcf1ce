"""robots_warden.parser: Разбор директив robots.txt."""

from robots_warden.parser.robots_parser import Directive, ParseState, parse_lines, parse_text

__all__ = ["Directive", "ParseState", "parse_lines", "parse_text"]
