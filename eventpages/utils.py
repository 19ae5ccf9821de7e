"""General utility helpers."""
from __future__ import annotations

import logging
import re
from datetime import date, timedelta
from typing import Dict, Set

logger = logging.getLogger(__name__)

_WHITESPACE_PATTERN = re.compile(r"\s+")
_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN_PATTERN = re.compile(r"-{2,}")

FALLBACK_SLUG = "event"
SATURDAY = 5


def slugify(value: str) -> str:
    """Return a URL-safe slug for the provided value.

    The result matches ``^[a-z0-9]+(-[a-z0-9]+)*$`` or is empty, and
    ``slugify(slugify(x)) == slugify(x)``.
    """

    value = (value or "").lower()
    value = _WHITESPACE_PATTERN.sub("-", value)
    value = _DISALLOWED_PATTERN.sub("", value)
    value = _HYPHEN_RUN_PATTERN.sub("-", value)
    return value.strip("-")


class SlugRegistry:
    """Hand out slugs that are unique within one generation run."""

    def __init__(self) -> None:
        self._claimed: Set[str] = set()
        self._counters: Dict[str, int] = {}

    def claim(self, name: str) -> str:
        base = slugify(name) or FALLBACK_SLUG
        candidate = base
        counter = self._counters.get(base, 1)
        while candidate in self._claimed:
            counter += 1
            candidate = f"{base}-{counter}"
        if candidate != base:
            logger.warning("Slug collision for %r; using %s", name, candidate)
        self._counters[base] = counter
        self._claimed.add(candidate)
        return candidate

    def __contains__(self, slug: object) -> bool:
        return slug in self._claimed

    def __len__(self) -> int:
        return len(self._claimed)


def next_event_day(today: date, weekday: int = SATURDAY) -> date:
    """Return the first ``weekday`` on or after ``today`` (Monday is 0)."""

    return today + timedelta(days=(weekday - today.weekday()) % 7)
