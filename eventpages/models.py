"""Data models used by the event page pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

PLACEHOLDER_NAME = "Unnamed event"
LOCATION_FALLBACK = "Location details coming soon"
DESCRIPTION_FALLBACK = (
    "Find places to stay near {name}, compare nearby hotel prices and get directions to the start."
)


@dataclass(frozen=True)
class EventRecord:
    """Canonical, shape-independent view of one feed feature.

    Optional fields stay ``None`` when the feed omits them; the ``*_label`` and
    ``description_text`` properties supply the documented fallback copy.
    """

    name: str
    short_name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def short_label(self) -> str:
        return self.short_name or self.name

    @property
    def location_label(self) -> str:
        return self.location or LOCATION_FALLBACK

    @property
    def description_text(self) -> str:
        return self.description or DESCRIPTION_FALLBACK.format(name=self.name)

    @property
    def has_coordinates(self) -> bool:
        return not (self.latitude == 0.0 and self.longitude == 0.0)


@dataclass(frozen=True)
class SitemapEntry:
    """A single ``<url>`` entry of the generated sitemap."""

    url: str
    lastmod: str
    changefreq: str
    priority: str
