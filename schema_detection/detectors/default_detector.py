"""
Default schema detector.

Runs language detection, language-aware field mapping, geo detection and
structural pattern detection. It accepts every input and serves as the fallback
for the detection service.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from schema_detection.config import ENUM_MODES, DetectionSettings
from schema_detection.field_mapping import detect_field_mappings
from schema_detection.language import detect_language
from schema_detection.structure import detect_patterns
from schema_detection.types import DetectionContext, DetectionResult, SchemaDetector
from schema_detection.utils.logger import logger


class DefaultDetector(SchemaDetector):
    name = "default"
    label = "Default Detector"
    description = (
        "Detects language, title/description/timestamp/location columns in seven languages, "
        "coordinates, identifier and enumeration columns."
    )

    def __init__(self, settings: Optional[DetectionSettings] = None) -> None:
        self.settings = settings or DetectionSettings()

    def can_handle(self, context: DetectionContext) -> bool:
        return True

    def detect(self, context: DetectionContext) -> DetectionResult:
        language = detect_language(context.sample_data, context.headers)
        logger.debug(f"Detected language {language.code} (confidence={language.confidence:.2f})")

        field_mappings = detect_field_mappings(context.field_stats, language.code)

        enum_threshold, enum_mode = self._enum_options(context.config.options or {})
        patterns = detect_patterns(context.field_stats, enum_threshold=enum_threshold, enum_mode=enum_mode)

        return DetectionResult(language=language, field_mappings=field_mappings, patterns=patterns)

    def _enum_options(self, options: Mapping[str, Any]) -> Tuple[float, str]:
        """Per-dataset enum options over settings; invalid values fall back to settings."""
        threshold = options.get("enum_threshold", self.settings.enum_threshold)
        try:
            threshold = float(threshold)
        except (TypeError, ValueError):
            threshold = -1.0
        if threshold < 0:
            logger.warning(f"Ignoring invalid enum_threshold {options.get('enum_threshold')!r}")
            threshold = self.settings.enum_threshold

        mode = str(options.get("enum_mode", self.settings.enum_mode)).lower()
        if mode not in ENUM_MODES:
            logger.warning(f"Ignoring invalid enum_mode {options.get('enum_mode')!r}")
            mode = self.settings.enum_mode
        return threshold, mode
