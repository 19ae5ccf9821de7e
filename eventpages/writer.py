"""Persist generated pages and the sitemap to the output directory."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .errors import OutputError

LOGGER = logging.getLogger(__name__)


class OutputWriter:
    """Own the output directory for the duration of one run.

    Before writing, :meth:`prepare` removes pages and the sitemap left by a
    previous run so the directory only reflects the current batch. Other files
    and subdirectories are never touched.
    """

    def __init__(
        self,
        output_dir: Path | str,
        *,
        extension: str = ".html",
        sitemap_name: str = "sitemap.xml",
    ) -> None:
        self.output_dir = Path(output_dir)
        self.extension = extension
        self.sitemap_name = sitemap_name

    @property
    def sitemap_path(self) -> Path:
        return self.output_dir / self.sitemap_name

    def page_path(self, slug: str) -> Path:
        return self.output_dir / f"{slug}{self.extension}"

    def prepare(self) -> List[Path]:
        """Create the directory if needed and purge stale output; return removed paths."""

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            stale = [
                entry
                for entry in sorted(self.output_dir.iterdir())
                if entry.is_file()
                and (entry.name.endswith(self.extension) or entry.name == self.sitemap_name)
            ]
            for entry in stale:
                entry.unlink()
        except OSError as exc:
            raise OutputError(f"Unable to prepare output directory {self.output_dir}: {exc}") from exc
        if stale:
            LOGGER.info("Removed %s stale files from %s", len(stale), self.output_dir)
        return stale

    def _write(self, target: Path, content: str) -> Path:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Unable to write {target}: {exc}") from exc
        LOGGER.debug("Wrote %s", target)
        return target

    def write_page(self, slug: str, html: str) -> Path:
        if not slug:
            raise OutputError("Refusing to write a page without a slug")
        return self._write(self.page_path(slug), html)

    def write_sitemap(self, xml: str) -> Path:
        return self._write(self.sitemap_path, xml)
