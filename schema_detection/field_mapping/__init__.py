from .geo import detect_geo_fields, find_combined_coordinate_field, find_coordinate_field, find_location_field
from .mapper import detect_field_mappings
from .matching import find_field_by_pattern, is_date_field, is_text_field
from .patterns import (
    ADDRESS_PATTERNS,
    COMBINED_COORDINATE_PATTERNS,
    COORDINATE_BOUNDS,
    FIELD_PATTERNS,
    LATITUDE_PATTERNS,
    LONGITUDE_PATTERNS,
    get_patterns,
)

__all__ = [
    "ADDRESS_PATTERNS",
    "COMBINED_COORDINATE_PATTERNS",
    "COORDINATE_BOUNDS",
    "FIELD_PATTERNS",
    "LATITUDE_PATTERNS",
    "LONGITUDE_PATTERNS",
    "detect_field_mappings",
    "detect_geo_fields",
    "find_combined_coordinate_field",
    "find_coordinate_field",
    "find_field_by_pattern",
    "find_location_field",
    "get_patterns",
    "is_date_field",
    "is_text_field",
]
