from datetime import date

from eventpages.models import SitemapEntry
from eventpages.sitemap import build_sitemap, render_sitemap_xml


def test_build_sitemap_creates_one_entry_per_slug():
    entries = build_sitemap(
        ["bushy-park", "richmond-park"],
        "https://example.com/events/",
        date(2024, 6, 1),
    )
    assert entries == [
        SitemapEntry(
            url="https://example.com/events/bushy-park.html",
            lastmod="2024-06-01",
            changefreq="weekly",
            priority="0.8",
        ),
        SitemapEntry(
            url="https://example.com/events/richmond-park.html",
            lastmod="2024-06-01",
            changefreq="weekly",
            priority="0.8",
        ),
    ]


def test_build_sitemap_with_no_slugs_is_empty():
    assert build_sitemap([], "https://example.com", date(2024, 6, 1)) == []


def test_render_sitemap_xml():
    entries = build_sitemap(
        ["bushy-park"],
        "https://example.com/a&b",
        date(2024, 6, 1),
        extension=".htm",
        changefreq="daily",
        priority="1.0",
    )
    xml = render_sitemap_xml(entries)
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
    assert "<loc>https://example.com/a&amp;b/bushy-park.htm</loc>" in xml
    assert "<lastmod>2024-06-01</lastmod>" in xml
    assert "<changefreq>daily</changefreq>" in xml
    assert "<priority>1.0</priority>" in xml
    assert xml.count("<url>") == 1
