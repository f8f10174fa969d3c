from __future__ import annotations

from typing import Dict, Tuple

from schema_detection.field_mapping.geo import detect_geo_fields
from schema_detection.field_mapping.matching import Validator, find_field_by_pattern, is_date_field, is_text_field
from schema_detection.field_mapping.patterns import get_patterns
from schema_detection.types import FieldMappingsResult, FieldStatistics

# (result attribute, pattern bank, validator)
FIELD_RULES: Tuple[Tuple[str, str, Validator], ...] = (
    ("title", "title", is_text_field),
    ("description", "description", is_text_field),
    ("timestamp", "timestamp", is_date_field),
    ("location_name", "locationName", is_text_field),
)


def detect_field_mappings(field_stats: Dict[str, FieldStatistics], language: str) -> FieldMappingsResult:
    """
    Detect the title, description, timestamp, location name and geo columns.

    Args:
        field_stats: Field statistics keyed by column path
        language: ISO 639-3 code; unsupported codes use the English patterns

    Returns:
        FieldMappingsResult with None for every role nothing matched
    """
    result = FieldMappingsResult()
    for attr, field_type, validator in FIELD_RULES:
        setattr(result, attr, find_field_by_pattern(field_stats, get_patterns(field_type, language), validator))
    result.geo = detect_geo_fields(field_stats, language)
    return result
