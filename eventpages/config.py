"""Configuration helpers for the event page generator."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

LOGGER = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_FEED_URL = "https://raw.githubusercontent.com/ALD-Models/Testing/refs/heads/main/events1.json"
DEFAULT_OUTPUT_DIR = Path("events")
DEFAULT_MAX_EVENTS = 10


@dataclass(frozen=True)
class GeneratorSettings:
    """Run level settings threaded through every stage of the pipeline."""

    feed_url: str = DEFAULT_FEED_URL
    output_dir: Path = DEFAULT_OUTPUT_DIR
    max_events: int = DEFAULT_MAX_EVENTS
    base_url: str = "https://www.parkrunnertourist.co.uk/events/"
    page_extension: str = ".html"
    sitemap_name: str = "sitemap.xml"
    sitemap_changefreq: str = "weekly"
    sitemap_priority: str = "0.8"
    site_name: str = "parkrunnertourist"
    site_url: str = "https://www.parkrunnertourist.co.uk"
    map_page_url: str = "https://www.parkrunnertourist.co.uk/main"
    lodging_widget_url: str = "https://www.stay22.com/embed/gm"
    lodging_widget_id: str = "parkrunnertourist"
    lodging_widget_color: str = "7dd856"
    apple_store_url: str = "https://apps.apple.com/gb/app/parkrunner-tourist/id6743163993"
    apple_badge_url: str = "https://developer.apple.com/assets/elements/badges/download-on-the-app-store.svg"
    google_play_url: str = "https://play.google.com/store/apps/details?id=co.uk.parkrunnertourist.app"
    google_play_badge_url: str = "https://upload.wikimedia.org/wikipedia/commons/7/78/Google_Play_Store_badge_EN.svg"
    description_limit: int = 155
    language: str = "en"
    request_timeout: float = 30.0
    fetch_attempts: int = 3
    retry_delay: float = 2.0

    def with_overrides(self, **overrides: object) -> "GeneratorSettings":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        if "output_dir" in changes:
            changes["output_dir"] = Path(changes["output_dir"])  # type: ignore[arg-type]
        return replace(self, **changes) if changes else self


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        LOGGER.warning("Ignoring non-numeric %s=%r; using %s", name, raw, default)
        return default
    if value < 1:
        LOGGER.warning("Ignoring %s=%s; value must be at least 1", name, value)
        return default
    return value


def load_settings() -> GeneratorSettings:
    """Build settings from defaults and ``EVENTS_*`` environment overrides."""

    defaults = GeneratorSettings()
    return GeneratorSettings(
        feed_url=_env("EVENTS_FEED_URL", defaults.feed_url) or defaults.feed_url,
        output_dir=Path(_env("EVENTS_OUTPUT_DIR", str(defaults.output_dir)) or defaults.output_dir),
        max_events=_env_int("EVENTS_MAX", defaults.max_events),
        base_url=_env("EVENTS_BASE_URL", defaults.base_url) or defaults.base_url,
    )
