from .detection import (
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
    default_language_result,
    detect_language,
    detect_language_from_text,
    extract_text_for_language_detection,
    is_supported_language,
)

__all__ = [
    "LANGUAGE_NAMES",
    "SUPPORTED_LANGUAGES",
    "default_language_result",
    "detect_language",
    "detect_language_from_text",
    "extract_text_for_language_detection",
    "is_supported_language",
]
