"""Resolve the feed payload shape and normalize features into records."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .errors import SchemaError
from .models import PLACEHOLDER_NAME, EventRecord

LOGGER = logging.getLogger(__name__)

NAME_FIELDS: Tuple[str, ...] = ("EventLongName", "EventShortName", "eventname")


class FeedShape(enum.Enum):
    """Accepted top-level layouts of the events feed."""

    BARE = "bare"
    FEATURE_COLLECTION = "feature_collection"
    NESTED_EVENTS = "nested_events"


def _is_sequence(value: object) -> bool:
    return isinstance(value, list)


def _bare_features(payload: Any) -> Optional[list]:
    return payload if _is_sequence(payload) else None


def _collection_features(payload: Any) -> Optional[list]:
    if isinstance(payload, Mapping) and _is_sequence(payload.get("features")):
        return payload["features"]
    return None


def _nested_features(payload: Any) -> Optional[list]:
    if isinstance(payload, Mapping):
        return _collection_features(payload.get("events"))
    return None


# Evaluated in order; the first matching shape wins.
_SHAPE_MATCHERS: Tuple[Tuple[FeedShape, Callable[[Any], Optional[list]]], ...] = (
    (FeedShape.BARE, _bare_features),
    (FeedShape.FEATURE_COLLECTION, _collection_features),
    (FeedShape.NESTED_EVENTS, _nested_features),
)


def resolve_features(payload: Any) -> Tuple[FeedShape, list]:
    """Return the matched shape and its feature list, or raise ``SchemaError``."""

    for shape, matcher in _SHAPE_MATCHERS:
        features = matcher(payload)
        if features is not None:
            return shape, features
    raise SchemaError(
        "Invalid events data structure: expected a feature list, "
        "{features: [...]} or {events: {features: [...]}}"
    )


def _clean(value: object) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _coordinate(value: object) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except (ValueError, OverflowError):
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _coordinates(geometry: object) -> Tuple[float, float]:
    """Return ``(latitude, longitude)`` from a ``[lon, lat]`` pair, else ``(0.0, 0.0)``."""

    if not isinstance(geometry, Mapping):
        return 0.0, 0.0
    pair = geometry.get("coordinates")
    if not isinstance(pair, (list, tuple)) or len(pair) < 2:
        return 0.0, 0.0
    longitude = _coordinate(pair[0])
    latitude = _coordinate(pair[1])
    if latitude is None or longitude is None:
        return 0.0, 0.0
    return latitude, longitude


def normalize_feature(raw: object) -> EventRecord:
    feature = raw if isinstance(raw, Mapping) else {}
    properties = feature.get("properties")
    if not isinstance(properties, Mapping):
        properties = {}
    name = next(
        (text for text in (_clean(properties.get(key)) for key in NAME_FIELDS) if text),
        PLACEHOLDER_NAME,
    )
    latitude, longitude = _coordinates(feature.get("geometry"))
    return EventRecord(
        name=name,
        short_name=_clean(properties.get("EventShortName")),
        location=_clean(properties.get("EventLocation")),
        description=_clean(properties.get("EventDescription")),
        latitude=latitude,
        longitude=longitude,
    )


def normalize_events(payload: Any, limit: int) -> List[EventRecord]:
    """Normalize the first ``limit`` features of ``payload`` in feed order."""

    if limit < 0:
        raise ValueError("limit cannot be negative")
    shape, features = resolve_features(payload)
    selected: Sequence[object] = features[:limit]
    dropped = len(features) - len(selected)
    LOGGER.info(
        "Resolved %s feed with %s features; keeping %s", shape.value, len(features), len(selected)
    )
    if dropped:
        LOGGER.info("Dropped %s features beyond the batch cap of %s", dropped, limit)
    return [normalize_feature(feature) for feature in selected]
