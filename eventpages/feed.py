"""Retrieve the raw events feed over HTTP or from a local JSON file."""
from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

import requests

from .config import GeneratorSettings
from .errors import FetchError, ParseError

LOGGER = logging.getLogger(__name__)

HEADERS = {
    "Accept": "application/json",
    "User-Agent": "eventpages/1.0 (+https://www.parkrunnertourist.co.uk)",
}


def _is_remote(source: str) -> bool:
    lowered = source.strip().lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def _parse_body(body: str, source: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Feed at {source} is not valid JSON: {exc}") from exc


class FeedFetcher:
    """Perform a single logical retrieval of the feed payload."""

    def __init__(
        self,
        settings: GeneratorSettings,
        session: requests.Session | None = None,
        sleep=time.sleep,
    ) -> None:
        self.settings = settings
        self._session = session
        self._sleep = sleep

    def fetch(self, source: str | None = None) -> Any:
        location = (source or self.settings.feed_url).strip()
        if not location:
            raise FetchError("No feed source configured")
        if _is_remote(location) and self._session is not None:
            body = self._download(location, self._session)
        elif _is_remote(location):
            with requests.Session() as session:
                body = self._download(location, session)
        else:
            body = self._read_local(Path(location))
        return _parse_body(body, location)

    def _read_local(self, path: Path) -> str:
        LOGGER.info("Reading events feed from %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(f"Unable to read feed file {path}: {exc}") from exc

    def _download(self, url: str, session: requests.Session) -> str:
        attempts = max(1, int(self.settings.fetch_attempts))
        for attempt in range(1, attempts + 1):
            LOGGER.info("Fetching events feed from %s (attempt %s/%s)", url, attempt, attempts)
            try:
                response = session.get(
                    url,
                    headers=HEADERS,
                    timeout=self.settings.request_timeout,
                )
                response.raise_for_status()
            except requests.RequestException as exc:
                if attempt == attempts:
                    raise FetchError(f"Failed to fetch feed from {url}: {exc}") from exc
                LOGGER.warning("Feed request failed (%s); retrying in %ss", exc, self.settings.retry_delay)
                self._sleep(self.settings.retry_delay)
                continue
            return response.text
        raise FetchError(f"Unable to load feed from {url}")


def fetch_feed(source: str | None, settings: GeneratorSettings) -> Any:
    """Return the parsed feed payload for ``source`` (defaults to ``settings.feed_url``)."""

    return FeedFetcher(settings).fetch(source)
