from __future__ import annotations

from typing import Callable, Dict, Optional

from schema_detection.field_mapping.normalize import leaf_name
from schema_detection.field_mapping.patterns import PatternList, match_index, pattern_confidence
from schema_detection.types import FieldMapping, FieldStatistics

Validator = Callable[[FieldStatistics], bool]


def find_field_by_pattern(
    field_stats: Dict[str, FieldStatistics],
    patterns: PatternList,
    validator: Optional[Validator] = None,
) -> Optional[FieldMapping]:
    """
    Find the column whose leaf name best matches an ordered pattern list.

    Each column is scored by its earliest matching pattern; columns rejected by
    `validator` are skipped. The highest confidence wins, ties keep the first column.
    """
    if not patterns:
        return None

    best: Optional[FieldMapping] = None
    for path, stats in field_stats.items():
        index = match_index(leaf_name(path), patterns)
        if index == -1:
            continue
        if validator is not None and not validator(stats):
            continue

        confidence = pattern_confidence(index, len(patterns))
        if best is None or confidence > best.confidence:
            best = FieldMapping(path=path, confidence=confidence)
    return best


def is_text_field(stats: FieldStatistics) -> bool:
    return stats.type_count("string") > 0


def is_date_field(stats: FieldStatistics) -> bool:
    has_date_format = stats.format_count("date") > 0 or stats.format_count("dateTime") > 0
    return has_date_format or stats.type_count("string") > 0
