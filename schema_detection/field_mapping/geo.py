"""
Geo field detection.

Finds separate latitude/longitude columns, single columns holding a coordinate
pair ("52.52,13.405"), and textual address columns usable for geocoding. Values
are validated against coordinate bounds using numeric statistics or at most
MAX_SAMPLES unique samples per column.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence

from schema_detection.field_mapping.matching import find_field_by_pattern, is_text_field
from schema_detection.field_mapping.normalize import leaf_name
from schema_detection.field_mapping.patterns import (
    ADDRESS_PATTERNS,
    COMBINED_COORDINATE_PATTERNS,
    COORDINATE_BOUNDS,
    DEFAULT_LANGUAGE,
    LATITUDE_PATTERNS,
    LONGITUDE_PATTERNS,
    PatternList,
    get_patterns,
    match_index,
)
from schema_detection.field_mapping.values import parse_float
from schema_detection.types import CombinedCoordinate, FieldMapping, FieldStatistics, GeoFieldMapping
from schema_detection.utils.logger import logger

MAX_SAMPLES = 10
MIN_VALID_RATIO = 0.7
SINGLE_AXIS_FACTOR = 0.5
LOCATION_ONLY_FACTOR = 0.3


class CombinedMatch(NamedTuple):
    path: str
    format: str
    confidence: float


def _in_bounds(value: float, bounds: Mapping[str, float]) -> bool:
    return bounds["min"] <= value <= bounds["max"]


def is_valid_coordinate_field(stats: FieldStatistics, bounds: Mapping[str, float]) -> bool:
    """Check that a column's values fit within coordinate bounds."""
    has_numeric_type = stats.type_count("number") > 0 or stats.type_count("integer") > 0
    if has_numeric_type and stats.numeric_stats is not None:
        return stats.numeric_stats.min >= bounds["min"] and stats.numeric_stats.max <= bounds["max"]

    if stats.type_count("string") == 0 or not stats.unique_samples:
        return False

    inspected = parsed = valid = 0
    for sample in stats.unique_samples[:MAX_SAMPLES]:
        if isinstance(sample, str) and sample.strip() == "":
            continue
        if sample is None or isinstance(sample, bool):
            continue
        inspected += 1
        value = parse_float(sample)
        if value is None:
            continue
        parsed += 1
        if _in_bounds(value, bounds):
            valid += 1

    if parsed == 0:
        return False
    return parsed / inspected >= MIN_VALID_RATIO and valid / parsed >= MIN_VALID_RATIO


def find_coordinate_field(
    field_stats: Dict[str, FieldStatistics],
    patterns: PatternList,
    bounds: Mapping[str, float],
) -> Optional[FieldMapping]:
    return find_field_by_pattern(field_stats, patterns, lambda stats: is_valid_coordinate_field(stats, bounds))


def check_comma_format(samples: Sequence[object]) -> Optional[CombinedMatch]:
    """
    Decide whether samples are "a,b" coordinate pairs and in which order.

    Returns a match with an empty path; the caller fills it in. The order is
    "lat,lng" unless strictly more pairs only fit the "lng,lat" bounds.
    """
    if not samples:
        return None

    lat = COORDINATE_BOUNDS["latitude"]
    lng = COORDINATE_BOUNDS["longitude"]
    matches = lat_lng_order = lng_lat_order = 0
    for sample in samples:
        if not isinstance(sample, str):
            continue
        parts = sample.split(",")
        if len(parts) != 2:
            continue
        first, second = parse_float(parts[0]), parse_float(parts[1])
        if first is None or second is None:
            continue

        fits_lat_lng = _in_bounds(first, lat) and _in_bounds(second, lng)
        fits_lng_lat = _in_bounds(first, lng) and _in_bounds(second, lat)
        if not (fits_lat_lng or fits_lng_lat):
            continue
        matches += 1
        lat_lng_order += fits_lat_lng
        lng_lat_order += fits_lng_lat

    if matches == 0:
        return None
    confidence = matches / len(samples)
    if confidence < MIN_VALID_RATIO:
        return None

    fmt = "lat,lng" if lat_lng_order >= lng_lat_order else "lng,lat"
    return CombinedMatch(path="", format=fmt, confidence=confidence)


def find_combined_coordinate_field(field_stats: Dict[str, FieldStatistics]) -> Optional[CombinedMatch]:
    """First column named like a combined coordinate whose samples parse as pairs."""
    for path, stats in field_stats.items():
        if match_index(leaf_name(path), COMBINED_COORDINATE_PATTERNS) == -1:
            continue
        if not stats.unique_samples:
            continue

        samples = [s for s in stats.unique_samples[:MAX_SAMPLES] if s is not None and s != ""]
        found = check_comma_format(samples)
        if found is not None:
            return found._replace(path=path)
    return None


def _first_found(strategies: Iterable[Callable[[], Optional[FieldMapping]]]) -> Optional[FieldMapping]:
    for strategy in strategies:
        found = strategy()
        if found is not None:
            return found
    return None


def find_location_field(
    field_stats: Dict[str, FieldStatistics],
    language: str = DEFAULT_LANGUAGE,
) -> Optional[FieldMapping]:
    """Textual address column for geocoding: generic address names, then the language's bank."""
    strategies: List[Callable[[], Optional[FieldMapping]]] = [
        lambda: find_field_by_pattern(field_stats, ADDRESS_PATTERNS, is_text_field),
        lambda: find_field_by_pattern(field_stats, get_patterns("location", language), is_text_field),
    ]
    return _first_found(strategies)


def detect_geo_fields(
    field_stats: Dict[str, FieldStatistics],
    language: str = DEFAULT_LANGUAGE,
) -> Optional[GeoFieldMapping]:
    """
    Detect how coordinates are represented in a dataset.

    Confidence decays down the ladder: both axes, a combined column, a single axis
    (halved) and finally only an address column (x0.3).
    """
    latitude = find_coordinate_field(field_stats, LATITUDE_PATTERNS, COORDINATE_BOUNDS["latitude"])
    longitude = find_coordinate_field(field_stats, LONGITUDE_PATTERNS, COORDINATE_BOUNDS["longitude"])
    location_field = find_location_field(field_stats, language)

    if latitude is not None and longitude is not None:
        logger.debug(f"Geo: separate coordinates {latitude.path}/{longitude.path}")
        return GeoFieldMapping(
            type="separate",
            confidence=(latitude.confidence + longitude.confidence) / 2,
            latitude=latitude,
            longitude=longitude,
            location_field=location_field,
        )

    combined = find_combined_coordinate_field(field_stats)
    if combined is not None:
        logger.debug(f"Geo: combined coordinates in {combined.path} ({combined.format})")
        return GeoFieldMapping(
            type="combined",
            confidence=combined.confidence,
            combined=CombinedCoordinate(path=combined.path, format=combined.format),
            location_field=location_field,
        )

    axis = latitude or longitude
    if axis is not None:
        logger.debug(f"Geo: single coordinate axis {axis.path}")
        return GeoFieldMapping(
            type="separate",
            confidence=axis.confidence * SINGLE_AXIS_FACTOR,
            latitude=latitude,
            longitude=longitude,
            location_field=location_field,
        )

    if location_field is not None:
        logger.debug(f"Geo: address column {location_field.path} only")
        return GeoFieldMapping(
            type="separate",
            confidence=location_field.confidence * LOCATION_ONLY_FACTOR,
            location_field=location_field,
        )

    return None
