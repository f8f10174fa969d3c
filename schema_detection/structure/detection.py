"""
Structural pattern detection: identifier columns and low-cardinality (enum) columns.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List

from schema_detection.config import ENUM_MODES
from schema_detection.field_mapping.normalize import leaf_name
from schema_detection.field_mapping.patterns import COORDINATE_BOUNDS
from schema_detection.field_mapping.values import ALNUM_ID_RE, OBJECT_ID_RE, UUID_RE, is_number
from schema_detection.types import FieldStatistics, PatternResult

ID_NAME_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE) for p in (r"^id$", r"_id$", r"^uuid$", r"^guid$", r"^key$", r"_key$")
)
ID_VALUE_TYPES = ("string", "number", "integer")
LARGE_NUMERIC_ID = 1_000_000

DEFAULT_ENUM_THRESHOLD = 50
DEFAULT_ENUM_MODE = "count"

_AXIS_BOUNDS = {
    "lat": COORDINATE_BOUNDS["latitude"],
    "lng": COORDINATE_BOUNDS["longitude"],
}


def _has_id_name(path: str) -> bool:
    name = leaf_name(path)
    return any(p.search(name) for p in ID_NAME_PATTERNS)


def _has_id_characteristics(stats: FieldStatistics) -> bool:
    all_unique = stats.unique_values == stats.occurrences and stats.occurrences > 1
    return all_unique and any(stats.type_count(t) > 0 for t in ID_VALUE_TYPES)


def detect_id_fields(field_stats: Dict[str, FieldStatistics]) -> List[str]:
    """Columns named like identifiers or whose values are all unique."""
    return [
        path
        for path, stats in field_stats.items()
        if _has_id_name(path) or _has_id_characteristics(stats)
    ]


def detect_enum_fields(
    field_stats: Dict[str, FieldStatistics],
    enum_threshold: float = DEFAULT_ENUM_THRESHOLD,
    enum_mode: str = DEFAULT_ENUM_MODE,
) -> List[str]:
    """
    Columns with few distinct string values that repeat.

    In "count" mode a column qualifies with at most `enum_threshold` unique values,
    in "percentage" mode when unique/occurrences is at most `enum_threshold` percent.
    Constant and all-unique columns never qualify.
    """
    if enum_mode not in ENUM_MODES:
        raise ValueError(f"enum_mode must be one of {ENUM_MODES}, got {enum_mode!r}")
    if enum_threshold < 0:
        raise ValueError(f"enum_threshold must be >= 0, got {enum_threshold}")

    enum_fields: List[str] = []
    for path, stats in field_stats.items():
        if stats.type_count("string") == 0 or not stats.unique_samples:
            continue
        if stats.unique_values <= 1 or stats.unique_values >= stats.occurrences:
            continue

        if enum_mode == "percentage":
            within = stats.unique_values / stats.occurrences <= enum_threshold / 100
        else:
            within = stats.unique_values <= enum_threshold
        if within:
            enum_fields.append(path)
    return enum_fields


def detect_patterns(
    field_stats: Dict[str, FieldStatistics],
    enum_threshold: float = DEFAULT_ENUM_THRESHOLD,
    enum_mode: str = DEFAULT_ENUM_MODE,
) -> PatternResult:
    return PatternResult(
        id_fields=detect_id_fields(field_stats),
        enum_fields=detect_enum_fields(field_stats, enum_threshold, enum_mode),
    )


def looks_like_id(value: Any) -> bool:
    """UUIDs, 24-hex ObjectIds, alphanumeric tokens of 8+ chars, or numbers above a million."""
    if isinstance(value, str):
        return bool(UUID_RE.match(value) or OBJECT_ID_RE.match(value) or ALNUM_ID_RE.match(value))
    if is_number(value):
        return value > LARGE_NUMERIC_ID
    return False


def looks_like_coordinate(value: Any, axis: str) -> bool:
    if axis not in _AXIS_BOUNDS:
        raise ValueError(f"axis must be 'lat' or 'lng', got {axis!r}")
    if not is_number(value):
        return False
    bounds = _AXIS_BOUNDS[axis]
    return bounds["min"] <= value <= bounds["max"]
