"""
Schema detection for dataset imports.

Given column statistics and a preview of rows, detectors work out the dataset's
language, which columns hold titles, descriptions, timestamps and locations,
where the coordinates are, and which columns are identifiers or enumerations.

Usage:
    from schema_detection import create_detection_service, build_detection_context

    service = create_detection_service()
    result = service.detect(None, build_detection_context(df))
    result.to_dict()
"""
from .detectors import DefaultDetector
from .field_mapping import detect_field_mappings, detect_geo_fields
from .inference import build_detection_context, build_field_statistics
from .language import detect_language
from .service import SchemaDetectionService, create_detection_service
from .structure import detect_patterns
from .types import (
    DetectionContext,
    DetectionResult,
    DetectorConfig,
    FieldMapping,
    FieldMappingsResult,
    FieldStatistics,
    GeoFieldMapping,
    LanguageResult,
    NumericStats,
    PatternResult,
    SchemaDetector,
)

__all__ = [
    "DefaultDetector",
    "DetectionContext",
    "DetectionResult",
    "DetectorConfig",
    "FieldMapping",
    "FieldMappingsResult",
    "FieldStatistics",
    "GeoFieldMapping",
    "LanguageResult",
    "NumericStats",
    "PatternResult",
    "SchemaDetectionService",
    "SchemaDetector",
    "build_detection_context",
    "build_field_statistics",
    "create_detection_service",
    "detect_field_mappings",
    "detect_geo_fields",
    "detect_language",
    "detect_patterns",
]
