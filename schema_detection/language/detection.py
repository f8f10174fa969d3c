"""
Language detection for dataset previews.

Text is gathered from headers and string cells (skipping emails, URLs, dates,
numbers, coordinates and other non-prose values) and classified with a trigram
rank-order classifier restricted to the supported languages. Detection never
raises: any failure falls back to English with zero confidence.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from schema_detection.field_mapping.values import is_non_text_value
from schema_detection.language.profiles import PROFILES, PROFILE_SIZE, ranked_trigrams
from schema_detection.types import LanguageResult
from schema_detection.utils.logger import logger

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("eng", "deu", "fra", "spa", "ita", "nld", "por")

LANGUAGE_NAMES: Dict[str, str] = {
    "eng": "English",
    "deu": "German",
    "fra": "French",
    "spa": "Spanish",
    "ita": "Italian",
    "nld": "Dutch",
    "por": "Portuguese",
    "und": "Unknown",
}

UNDETERMINED = "und"
MIN_TEXT_LENGTH = 20
MIN_VALUE_LENGTH = 3
RELIABILITY_THRESHOLD = 0.5
# Penalty for a trigram missing from a profile
MAX_DIFFERENCE = PROFILE_SIZE


def default_language_result() -> LanguageResult:
    return LanguageResult(code="eng", name=LANGUAGE_NAMES["eng"], confidence=0.0, is_reliable=False)


def is_supported_language(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES


def _is_useful_for_detection(value: str) -> bool:
    trimmed = value.strip()
    return len(trimmed) >= MIN_VALUE_LENGTH and not is_non_text_value(trimmed)


def extract_text_for_language_detection(
    sample_data: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
) -> str:
    """Join headers and prose-like string cells into a single text."""
    parts: List[str] = [h for h in headers if len(h) > 2 and not is_non_text_value(h)]
    for row in sample_data:
        for value in row.values():
            if isinstance(value, str) and _is_useful_for_detection(value):
                parts.append(value)
    return " ".join(parts)


def score_languages(text: str, languages: Sequence[str] = SUPPORTED_LANGUAGES) -> List[Tuple[str, float]]:
    """
    Score `text` against each language profile, best first.

    The best language scores 1.0 and the others are scaled by how much farther they
    are from the text. Returns [("und", 0.0)] when the text shares no trigram with any profile.
    """
    grams = ranked_trigrams(text)
    if not grams:
        return [(UNDETERMINED, 0.0)]

    distances: List[Tuple[str, int]] = []
    for code in languages:
        profile = PROFILES[code]
        distance = 0
        for gram, rank in grams.items():
            if gram in profile:
                distance += abs(rank - profile[gram])
            else:
                distance += MAX_DIFFERENCE
        distances.append((code, distance))
    distances.sort(key=lambda item: item[1])

    worst_possible = len(grams) * MAX_DIFFERENCE
    best_distance = distances[0][1]
    if best_distance >= worst_possible:
        return [(UNDETERMINED, 0.0)]

    span = worst_possible - best_distance
    return [(code, 1 - (distance - best_distance) / span) for code, distance in distances]


def detect_language_from_text(text: str) -> LanguageResult:
    """Classify a text; short or unclassifiable text yields the English default."""
    if len(text) < MIN_TEXT_LENGTH:
        return default_language_result()

    try:
        scores = score_languages(text)
        if not scores or scores[0][0] == UNDETERMINED:
            return default_language_result()

        code, score = scores[0]
        confidence = score
        if len(scores) > 1:
            gap = score - scores[1][1]
            confidence = min(1.0, score + gap * 0.5)

        return LanguageResult(
            code=code,
            name=LANGUAGE_NAMES.get(code, code),
            confidence=confidence,
            is_reliable=confidence >= RELIABILITY_THRESHOLD,
        )
    except Exception as e:
        logger.warning(f"Language detection failed, defaulting to English: {e}")
        return default_language_result()


def detect_language(
    sample_data: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
) -> LanguageResult:
    """Detect the language of a dataset preview from its rows and headers."""
    try:
        text = extract_text_for_language_detection(sample_data, headers)
    except Exception as e:
        logger.warning(f"Could not extract text for language detection: {e}")
        return default_language_result()
    return detect_language_from_text(text)
