"""Build the sitemap manifest for the pages produced in one run."""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Sequence

from .models import SitemapEntry
from .text import escape_html

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap(
    slugs: Iterable[str],
    base_url: str,
    generated_on: date,
    *,
    extension: str = ".html",
    changefreq: str = "weekly",
    priority: str = "0.8",
) -> List[SitemapEntry]:
    base = base_url.rstrip("/")
    lastmod = generated_on.isoformat()
    return [
        SitemapEntry(
            url=f"{base}/{slug}{extension}",
            lastmod=lastmod,
            changefreq=changefreq,
            priority=priority,
        )
        for slug in slugs
    ]


def render_sitemap_xml(entries: Sequence[SitemapEntry]) -> str:
    lines = [
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>",
        f"<urlset xmlns=\"{SITEMAP_NAMESPACE}\">",
    ]
    for entry in entries:
        lines.append("<url>")
        lines.append(f"<loc>{escape_html(entry.url)}</loc>")
        lines.append(f"<lastmod>{escape_html(entry.lastmod)}</lastmod>")
        lines.append(f"<changefreq>{escape_html(entry.changefreq)}</changefreq>")
        lines.append(f"<priority>{escape_html(entry.priority)}</priority>")
        lines.append("</url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
