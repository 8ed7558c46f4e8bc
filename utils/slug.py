"""Slug and reading-time helpers shared by the content use cases.

All functions are pure and total: any string input produces a result.
"""

from __future__ import annotations

import math
import re

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
_HTML_TAG = re.compile(r"<[^>]*>")
_WORD_START = re.compile(r"\b\w")

DEFAULT_WORDS_PER_MINUTE = 200


def generate_slug(text: str) -> str:
    """Derive a URL-safe slug from free text.

    Examples:
        >>> generate_slug("Hello, World!")
        'hello-world'
        >>> generate_slug("  --Foo--  ")
        'foo'
    """
    return _NON_SLUG_RUN.sub("-", (text or "").lower()).strip("-")


def estimate_reading_time(
    html: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
) -> int:
    """Estimate reading time in whole minutes, rounded up.

    Tags are removed with a plain ``<...>`` match, not an HTML parser.
    Content without any words reads in 0 minutes; anything else takes
    at least 1.
    """
    text = _HTML_TAG.sub("", html or "")
    word_count = len(text.split())
    return math.ceil(word_count / words_per_minute)


def humanize_slug(slug: str) -> str:
    """Display name for a category created from its slug.

    Only the first hyphen becomes a space; every word start is upper-cased:
        >>> humanize_slug("web-dev-tips")
        'Web Dev-Tips'
    """
    return _WORD_START.sub(lambda m: m.group(0).upper(), slug.replace("-", " ", 1))


__all__ = [
    "generate_slug",
    "estimate_reading_time",
    "humanize_slug",
]
