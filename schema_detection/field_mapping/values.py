from __future__ import annotations

import math
import re
from typing import Any, Optional

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[a-z]{2,}$", re.IGNORECASE)
URL_RE = re.compile(r"^https?://", re.IGNORECASE)
ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2})?")
NUMERIC_RE = re.compile(r"^-?\d+(\.\d+)?$")
COORDINATE_PAIR_RE = re.compile(r"^-?\d+\.\d+,\s?-?\d+\.\d+$")
UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
SEPARATED_NUMERIC_RE = re.compile(r"^[\d\s./-]+$")
OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$", re.IGNORECASE)
ALNUM_ID_RE = re.compile(r"^[A-Za-z0-9]{8,}$")

# Leading numeric prefix, as accepted by JavaScript's parseFloat
_FLOAT_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NON_TEXT_PATTERNS = (
    EMAIL_RE,
    URL_RE,
    ISO_DATE_RE,
    NUMERIC_RE,
    COORDINATE_PAIR_RE,
    UUID_RE,
    SEPARATED_NUMERIC_RE,
)


def is_non_text_value(value: str) -> bool:
    """True for emails, URLs, ISO dates, numbers, coordinate pairs, UUIDs and numeric codes."""
    return any(pattern.match(value) for pattern in NON_TEXT_PATTERNS)


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and not math.isnan(value)


def parse_float(value: Any) -> Optional[float]:
    """Parse the leading number of a string (`" 52.52 N"` -> 52.52); None if there is none."""
    if is_number(value):
        return float(value)
    if not isinstance(value, str):
        return None
    m = _FLOAT_PREFIX_RE.match(value.strip())
    if not m:
        return None
    return float(m.group(0))
