"""Command line entrypoints for the event page generator."""
from __future__ import annotations

import argparse
import html
import logging
import re
from datetime import date
from pathlib import Path
from typing import List

from .config import GeneratorSettings, load_settings
from .errors import GeneratorError
from .pipeline import EventPipeline
from .utils import next_event_day

LOGGER = logging.getLogger(__name__)

_LOC_PATTERN = re.compile(r"<loc>(.*?)</loc>", re.S)


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}; expected YYYY-MM-DD") from exc


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    # SUPPRESS keeps a value given before the subcommand.
    parser.add_argument(
        "--log-level",
        default=argparse.SUPPRESS,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate static accommodation pages for events")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_cmd = subparsers.add_parser("build", help="Fetch the feed and render every event page")
    build_cmd.add_argument("--source", help="Feed URL or local JSON file (defaults to EVENTS_FEED_URL)")
    build_cmd.add_argument("--output", type=Path, help="Output directory for generated pages")
    build_cmd.add_argument("--limit", type=int, help="Maximum number of events to render")
    build_cmd.add_argument("--base-url", help="Base URL used for canonical links and the sitemap")
    build_cmd.add_argument(
        "--checkin",
        type=_iso_date,
        help="Hotel check-in date (YYYY-MM-DD); defaults to the next Saturday",
    )
    _add_log_level(build_cmd)
    build_cmd.set_defaults(func=handle_build)

    check_cmd = subparsers.add_parser("check", help="Validate generated pages against the sitemap")
    check_cmd.add_argument("--output", type=Path, help="Directory that should contain the generated pages")
    _add_log_level(check_cmd)
    check_cmd.set_defaults(func=handle_check)

    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _settings_from_args(args: argparse.Namespace) -> GeneratorSettings:
    return load_settings().with_overrides(
        feed_url=getattr(args, "source", None),
        output_dir=getattr(args, "output", None),
        max_events=getattr(args, "limit", None),
        base_url=getattr(args, "base_url", None),
    )


def handle_build(args: argparse.Namespace) -> None:
    if args.limit is not None and args.limit < 1:
        raise SystemExit("--limit must be at least 1")
    settings = _settings_from_args(args)
    today = date.today()
    reference_date = args.checkin or next_event_day(today)
    LOGGER.info("Using check-in date %s", reference_date.isoformat())
    pipeline = EventPipeline(settings)
    try:
        result = pipeline.run(reference_date=reference_date, generated_on=today)
    except GeneratorError as exc:
        LOGGER.error("Error: %s", exc)
        raise SystemExit(1) from exc
    LOGGER.info("Build complete. %s pages written to %s", len(result.pages), settings.output_dir)


def handle_check(args: argparse.Namespace) -> None:
    settings = _settings_from_args(args)
    output_dir = settings.output_dir
    sitemap_path = output_dir / settings.sitemap_name
    errors: List[str] = []
    if not sitemap_path.exists():
        errors.append(f"Missing {settings.sitemap_name} in {output_dir}")
        listed: set[str] = set()
    else:
        xml = sitemap_path.read_text(encoding="utf-8")
        listed = {
            html.unescape(match.strip()).rstrip("/").rsplit("/", 1)[-1]
            for match in _LOC_PATTERN.findall(xml)
        }
    on_disk = {
        entry.name
        for entry in output_dir.glob(f"*{settings.page_extension}")
        if entry.is_file()
    } if output_dir.exists() else set()
    for name in sorted(listed - on_disk):
        errors.append(f"Sitemap lists {name} but the page is missing")
    for name in sorted(on_disk - listed):
        errors.append(f"Page {name} is not listed in the sitemap")
    if not on_disk:
        errors.append(f"No pages found in {output_dir}")
    if errors:
        for error in errors:
            LOGGER.error(error)
        raise SystemExit(1)
    LOGGER.info("Check passed: %s pages listed in %s", len(on_disk), sitemap_path)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
