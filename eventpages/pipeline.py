"""Event page generation pipeline."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import List

from .config import GeneratorSettings
from .feed import FeedFetcher
from .generator import render_event_page
from .normalization import normalize_events
from .sitemap import build_sitemap, render_sitemap_xml
from .utils import SlugRegistry
from .writer import OutputWriter

LOGGER = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Files produced by one pipeline run."""

    sitemap: Path
    pages: List[Path] = field(default_factory=list)
    slugs: List[str] = field(default_factory=list)


class EventPipeline:
    def __init__(
        self,
        settings: GeneratorSettings,
        fetcher: FeedFetcher | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self.settings = settings
        self.fetcher = fetcher or FeedFetcher(settings)
        self.writer = writer or OutputWriter(
            settings.output_dir,
            extension=settings.page_extension,
            sitemap_name=settings.sitemap_name,
        )

    def run(self, *, reference_date: date, generated_on: date) -> BuildResult:
        settings = self.settings
        payload = self.fetcher.fetch(settings.feed_url)
        records = normalize_events(payload, settings.max_events)
        LOGGER.info("Normalized %s events", len(records))

        self.writer.prepare()
        registry = SlugRegistry()
        pages: List[Path] = []
        slugs: List[str] = []
        for record in records:
            slug = registry.claim(record.name)
            html = render_event_page(record, reference_date, settings, slug=slug)
            path = self.writer.write_page(slug, html)
            LOGGER.info("Generated: %s", path)
            pages.append(path)
            slugs.append(slug)

        entries = build_sitemap(
            slugs,
            settings.base_url,
            generated_on,
            extension=settings.page_extension,
            changefreq=settings.sitemap_changefreq,
            priority=settings.sitemap_priority,
        )
        sitemap_path = self.writer.write_sitemap(render_sitemap_xml(entries))
        LOGGER.info("Successfully generated %s event pages and %s", len(pages), sitemap_path)
        return BuildResult(sitemap=sitemap_path, pages=pages, slugs=slugs)
