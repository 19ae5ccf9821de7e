"""Render one static accommodation page per event."""
from __future__ import annotations

import logging
import re
from datetime import date
from typing import List

from .config import TEMPLATE_DIR, GeneratorSettings
from .models import EventRecord
from .text import build_url, escape_html, join_keywords, keyword_set, truncate
from .utils import slugify

LOGGER = logging.getLogger(__name__)

BASE_TEMPLATE_PATH = TEMPLATE_DIR / "base.html"
DIRECTIONS_URL = "https://www.google.com/maps/dir/"
MAP_EMBED_URL = "https://maps.google.com/maps"
MAP_ZOOM = 13

_SLOT_PATTERN = re.compile(r"\{\{\s*(?P<slot>head\|safe|content\|safe|language)\s*\}\}")


def _read_markup() -> str:
    return BASE_TEMPLATE_PATH.read_text(encoding="utf-8").lstrip("\ufeff")


BASE_TEMPLATE = _read_markup()


def _render_with_base(*, head: str, content: str, language: str) -> str:
    # Single pass: inserted values are never rescanned for slots.
    values = {
        "head|safe": head,
        "content|safe": content,
        "language": escape_html(language),
    }
    return _SLOT_PATTERN.sub(lambda match: values[match.group("slot")], BASE_TEMPLATE)


def _coordinate_text(value: float) -> str:
    return repr(float(value))


def page_url(slug: str, settings: GeneratorSettings) -> str:
    """Absolute URL of the page generated for ``slug``."""

    return f"{settings.base_url.rstrip('/')}/{slug}{settings.page_extension}"


def page_title(record: EventRecord) -> str:
    return f"Accommodation near {record.name}"


def lodging_url(record: EventRecord, reference_date: date, settings: GeneratorSettings) -> str:
    return build_url(
        settings.lodging_widget_url,
        {
            "aid": settings.lodging_widget_id,
            "lat": _coordinate_text(record.latitude),
            "lng": _coordinate_text(record.longitude),
            "checkin": reference_date.isoformat(),
            "venue": record.name,
            "maincolor": settings.lodging_widget_color,
        },
    )


def directions_url(record: EventRecord) -> str:
    if record.location:
        destination = record.location
    else:
        destination = f"{_coordinate_text(record.latitude)},{_coordinate_text(record.longitude)}"
    return build_url(DIRECTIONS_URL, {"api": "1", "destination": destination})


def map_embed_url(record: EventRecord) -> str:
    if record.has_coordinates or not record.location:
        query = f"{_coordinate_text(record.latitude)},{_coordinate_text(record.longitude)}"
    else:
        query = record.location
    return build_url(MAP_EMBED_URL, {"q": query, "z": MAP_ZOOM, "output": "embed"})


def _head_markup(record: EventRecord, slug: str, settings: GeneratorSettings) -> str:
    description = truncate(record.description_text, settings.description_limit)
    keywords = join_keywords(keyword_set(record.name, record.location))
    parts: List[str] = [
        f"<title>{escape_html(page_title(record))}</title>",
        f'<meta name="description" content="{escape_html(description)}" />',
        f'<meta name="keywords" content="{escape_html(keywords)}" />',
        f'<link rel="canonical" href="{escape_html(page_url(slug, settings))}" />',
    ]
    return "\n  ".join(parts)


def _intro_markup(record: EventRecord) -> str:
    return "\n".join(
        [
            '  <section class="event-intro">',
            f"    <h1>{escape_html(page_title(record))}</h1>",
            f'    <p class="event-short-name">{escape_html(record.short_label)}</p>',
            f'    <p class="event-location">{escape_html(record.location_label)}</p>',
            f'    <p class="event-description">{escape_html(record.description_text)}</p>',
            "  </section>",
        ]
    )


def _hotels_markup(record: EventRecord, reference_date: date, settings: GeneratorSettings) -> str:
    title = f"Hotels near {record.name}"
    return "\n".join(
        [
            '  <section class="hotels">',
            "    <h2>Nearby hotel prices</h2>",
            '    <div id="stay22-hotels">',
            f'      <iframe src="{escape_html(lodging_url(record, reference_date, settings))}"'
            f' title="{escape_html(title)}" loading="lazy" allowfullscreen></iframe>',
            "    </div>",
            "  </section>",
        ]
    )


def _map_markup(record: EventRecord, settings: GeneratorSettings) -> str:
    title = f"Map of {record.name}"
    return "\n".join(
        [
            '  <section class="map-section">',
            "    <h2>Find accommodation</h2>",
            f'    <iframe src="{escape_html(map_embed_url(record))}" title="{escape_html(title)}"'
            ' loading="lazy" allowfullscreen></iframe>',
            '    <div class="directions">',
            f'      <a href="{escape_html(directions_url(record))}" target="_blank" rel="noopener noreferrer">'
            "Click for directions</a>",
            f'      <a href="{escape_html(settings.map_page_url)}" target="_blank" rel="noopener noreferrer">'
            "Explore the full map</a>",
            "    </div>",
            "  </section>",
        ]
    )


def _footer_markup(settings: GeneratorSettings) -> str:
    return "\n".join(
        [
            "<footer>",
            "  Download the app:",
            '  <div class="download-links">',
            f'    <a href="{escape_html(settings.apple_store_url)}" target="_blank" rel="noopener noreferrer"'
            ' aria-label="Download on the Apple App Store">',
            f'      <img src="{escape_html(settings.apple_badge_url)}" alt="Apple App Store" />',
            "    </a>",
            f'    <a href="{escape_html(settings.google_play_url)}" target="_blank" rel="noopener noreferrer"'
            ' aria-label="Get it on Google Play">',
            f'      <img src="{escape_html(settings.google_play_badge_url)}" alt="Google Play Store" />',
            "    </a>",
            "  </div>",
            "</footer>",
        ]
    )


def render_event_page(
    record: EventRecord,
    reference_date: date,
    settings: GeneratorSettings,
    *,
    slug: str | None = None,
) -> str:
    """Return the complete HTML document for ``record``.

    ``reference_date`` is the hotel check-in date; the renderer never reads
    the clock, so identical inputs always produce identical output. ``slug``
    is the (possibly disambiguated) page slug used for the canonical link and
    defaults to ``slugify(record.name)``.
    """

    page_slug = slug if slug is not None else slugify(record.name)
    LOGGER.debug("Rendering page %s for %s", page_slug, record.name)
    header = (
        "<header>\n"
        f'  <a href="{escape_html(settings.site_url)}" target="_blank" rel="noopener">'
        f"{escape_html(settings.site_name)}</a>\n"
        "</header>"
    )
    main = "\n".join(
        [
            "<main>",
            _intro_markup(record),
            _hotels_markup(record, reference_date, settings),
            _map_markup(record, settings),
            "</main>",
        ]
    )
    content = "\n".join([header, main, _footer_markup(settings)])
    return _render_with_base(
        head=_head_markup(record, page_slug, settings),
        content=content,
        language=settings.language,
    )
