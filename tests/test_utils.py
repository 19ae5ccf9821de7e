from __future__ import annotations

import re
import unittest
from datetime import date

from eventpages.utils import SlugRegistry, next_event_day, slugify

SLUG_FORMAT = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

SAMPLE_NAMES = [
    "Bushy Park",
    "St. James's Park!",
    "  Leading and trailing  ",
    "--already--hyphenated--",
    "Tabs\tand\nnewlines",
    "Ünïcödé Park",
    "!!!",
    "",
    "Park - Run   --  Extra",
    "123 Numbers 456",
]


class SlugifyTests(unittest.TestCase):
    def test_slugify_generates_clean_url_component(self) -> None:
        self.assertEqual(slugify("Bushy Park"), "bushy-park")

    def test_slugify_drops_punctuation(self) -> None:
        self.assertEqual(slugify("St. James's Park!"), "st-jamess-park")

    def test_slugify_collapses_hyphens_and_trims(self) -> None:
        self.assertEqual(slugify("Park - Run   --  Extra"), "park-run-extra")
        self.assertEqual(slugify("--already--hyphenated--"), "already-hyphenated")

    def test_slugify_can_return_empty(self) -> None:
        self.assertEqual(slugify("!!!"), "")
        self.assertEqual(slugify(""), "")

    def test_slugify_is_idempotent(self) -> None:
        for name in SAMPLE_NAMES:
            with self.subTest(name=name):
                once = slugify(name)
                self.assertEqual(slugify(once), once)

    def test_slugify_output_format(self) -> None:
        for name in SAMPLE_NAMES:
            with self.subTest(name=name):
                slug = slugify(name)
                self.assertTrue(slug == "" or SLUG_FORMAT.match(slug), slug)


class SlugRegistryTests(unittest.TestCase):
    def test_collisions_receive_numeric_suffix(self) -> None:
        registry = SlugRegistry()
        self.assertEqual(registry.claim("Bushy Park"), "bushy-park")
        self.assertEqual(registry.claim("Bushy  Park!"), "bushy-park-2")
        self.assertEqual(registry.claim("bushy park"), "bushy-park-3")
        self.assertEqual(len(registry), 3)

    def test_suffix_skips_names_already_claimed(self) -> None:
        registry = SlugRegistry()
        registry.claim("Park 2")
        registry.claim("Park")
        self.assertEqual(registry.claim("Park"), "park-3")
        self.assertIn("park-2", registry)

    def test_empty_slug_uses_fallback(self) -> None:
        registry = SlugRegistry()
        self.assertEqual(registry.claim("???"), "event")
        self.assertEqual(registry.claim(""), "event-2")


class NextEventDayTests(unittest.TestCase):
    def test_returns_same_day_when_already_saturday(self) -> None:
        self.assertEqual(next_event_day(date(2024, 6, 1)), date(2024, 6, 1))

    def test_rolls_forward_to_saturday(self) -> None:
        self.assertEqual(next_event_day(date(2024, 6, 2)), date(2024, 6, 8))
        self.assertEqual(next_event_day(date(2024, 6, 7)), date(2024, 6, 8))


if __name__ == "__main__":
    unittest.main()
