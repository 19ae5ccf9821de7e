from pathlib import Path

from eventpages.config import DEFAULT_MAX_EVENTS, GeneratorSettings, load_settings


def test_load_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("EVENTS_FEED_URL", "https://feeds.example.com/events.json")
    monkeypatch.setenv("EVENTS_OUTPUT_DIR", "build/events")
    monkeypatch.setenv("EVENTS_MAX", "25")
    monkeypatch.setenv("EVENTS_BASE_URL", "https://example.com/events/")
    settings = load_settings()
    assert settings.feed_url == "https://feeds.example.com/events.json"
    assert settings.output_dir == Path("build/events")
    assert settings.max_events == 25
    assert settings.base_url == "https://example.com/events/"


def test_load_settings_ignores_invalid_max(monkeypatch, caplog):
    monkeypatch.setenv("EVENTS_MAX", "lots")
    assert load_settings().max_events == DEFAULT_MAX_EVENTS
    monkeypatch.setenv("EVENTS_MAX", "0")
    assert load_settings().max_events == DEFAULT_MAX_EVENTS
    assert "EVENTS_MAX" in caplog.text


def test_with_overrides_skips_none_values():
    settings = GeneratorSettings()
    assert settings.with_overrides(feed_url=None) is settings
    updated = settings.with_overrides(output_dir="out", max_events=4)
    assert updated.output_dir == Path("out")
    assert updated.max_events == 4
    assert settings.max_events == DEFAULT_MAX_EVENTS
