import pytest

from eventpages.errors import OutputError
from eventpages.writer import OutputWriter


def test_prepare_creates_missing_directory(tmp_path):
    output_dir = tmp_path / "nested" / "events"
    writer = OutputWriter(output_dir)
    assert writer.prepare() == []
    assert output_dir.is_dir()
    assert writer.prepare() == []


def test_prepare_purges_stale_pages_and_sitemap_only(tmp_path):
    (tmp_path / "old-event.html").write_text("old", encoding="utf-8")
    (tmp_path / "sitemap.xml").write_text("old", encoding="utf-8")
    (tmp_path / "robots.txt").write_text("keep", encoding="utf-8")
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "nested.html").write_text("keep", encoding="utf-8")

    removed = OutputWriter(tmp_path).prepare()

    assert sorted(path.name for path in removed) == ["old-event.html", "sitemap.xml"]
    assert not (tmp_path / "old-event.html").exists()
    assert not (tmp_path / "sitemap.xml").exists()
    assert (tmp_path / "robots.txt").exists()
    assert (tmp_path / "assets" / "nested.html").exists()


def test_write_page_and_sitemap(tmp_path):
    writer = OutputWriter(tmp_path, extension=".htm", sitemap_name="pages.xml")
    writer.prepare()
    page = writer.write_page("bushy-park", "<p>Hello £</p>")
    sitemap = writer.write_sitemap("<urlset/>")
    assert page == tmp_path / "bushy-park.htm"
    assert page.read_text(encoding="utf-8") == "<p>Hello £</p>"
    assert sitemap == tmp_path / "pages.xml"
    writer.write_page("bushy-park", "<p>Replaced</p>")
    assert page.read_text(encoding="utf-8") == "<p>Replaced</p>"


def test_write_page_requires_slug(tmp_path):
    with pytest.raises(OutputError):
        OutputWriter(tmp_path).write_page("", "<p></p>")


def test_prepare_fails_when_output_path_is_a_file(tmp_path):
    blocker = tmp_path / "events"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(OutputError):
        OutputWriter(blocker).prepare()
