"""Encoding and copy helpers shared by the page and sitemap renderers.

Feed data reaches generated markup only through :func:`escape_html` (text and
attribute values) and :func:`encode_component` / :func:`build_url` (URL query
components).
"""
from __future__ import annotations

import re
from html import escape as html_escape
from typing import Iterable, List, Mapping
from urllib.parse import quote

_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")
ELLIPSIS = "…"


def escape_html(value: object) -> str:
    """Escape a value for use as HTML text or a quoted attribute."""

    return html_escape("" if value is None else str(value), quote=True)


def encode_component(value: object) -> str:
    """Percent-encode a single URL query component."""

    return quote("" if value is None else str(value), safe="")


def build_url(base: str, params: Mapping[str, object]) -> str:
    """Append percent-encoded ``params`` to ``base`` as a query string."""

    query = "&".join(
        f"{encode_component(key)}={encode_component(value)}" for key, value in params.items()
    )
    if not query:
        return base
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{query}"


def truncate(value: str, limit: int) -> str:
    """Trim to ``limit`` characters, preferring a word boundary, and add an ellipsis."""

    text = " ".join((value or "").split())
    if len(text) <= limit:
        return text
    if limit <= len(ELLIPSIS):
        return text[:limit]
    cut = limit - len(ELLIPSIS)
    trimmed = text[:cut]
    if not trimmed.endswith(" ") and text[cut] != " ":
        last_space = trimmed.rfind(" ")
        if last_space > limit // 2:  # only cut on whitespace when little is lost
            trimmed = trimmed[:last_space]
    return trimmed.rstrip(" ,.;:!-") + ELLIPSIS


def keyword_set(*values: str | None) -> List[str]:
    """Return lowercase word tokens from ``values``, deduplicated in first-seen order."""

    seen: set[str] = set()
    keywords: List[str] = []
    for value in values:
        for token in _TOKEN_PATTERN.findall((value or "").lower()):
            if token in seen:
                continue
            seen.add(token)
            keywords.append(token)
    return keywords


def join_keywords(keywords: Iterable[str]) -> str:
    return ", ".join(keywords)
