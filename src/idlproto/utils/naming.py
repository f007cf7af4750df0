"""Identifier case conversion and comment formatting helpers."""

from __future__ import annotations

import re
import textwrap

_SEPARATORS = re.compile(r"[\s_\-]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_LOWER_UPPER_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def pascal_case(name: str) -> str:
    """Convert an identifier to PascalCase.

    Words are split on underscores, hyphens, whitespace and lower-to-upper
    camel boundaries. Only the first letter of each word is changed, so
    acronyms survive.

    Example:
        >>> pascal_case("get_user")
        'GetUser'
        >>> pascal_case("getHTTPStatus")
        'GetHTTPStatus'
    """
    words = [
        word
        for part in _SEPARATORS.split(name)
        for word in _CAMEL_BOUNDARY.split(part)
        if word
    ]
    return "".join(word[0].upper() + word[1:] for word in words)


def snake_case(name: str) -> str:
    """Convert an identifier to lower snake_case.

    Example:
        >>> snake_case("userId")
        'user_id'
        >>> snake_case("HTTPServer")
        'http_server'
    """
    result = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    result = _LOWER_UPPER_BOUNDARY.sub(r"\1_\2", result)
    result = _SEPARATORS.sub("_", result)
    return result.lower()


def format_comment(prefix: str, text: str | None, wrap_length: int = 80) -> str:
    """Format a description as a block of prefixed comment lines.

    Newlines in the description are folded into spaces and the words are
    re-wrapped so each line, prefix included, fits in ``wrap_length``. A word
    longer than the available width is kept whole on its own line.

    Args:
        prefix: Text put in front of every line, e.g. ``"  // "``
        text: Description to format (None or blank gives no comment)
        wrap_length: Maximum line length including the prefix

    Returns:
        The comment block with a trailing newline, or ``""``
    """
    if not text or not text.strip():
        return ""

    lines = textwrap.wrap(
        text,
        width=max(1, wrap_length - len(prefix)),
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "".join(f"{prefix}{line}\n" for line in lines)
