from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ENUM_MODES = ("count", "percentage")


@dataclass
class DetectionSettings:
    enum_threshold: float = 50
    enum_mode: str = "count"
    sample_rows: int = 100
    max_unique_samples: int = 100
    default_detector: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _get_number(name: str, default: float, cast=float):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be numeric, got {raw!r}") from None


def load_settings() -> DetectionSettings:
    """Read detection settings from the environment (and a local .env file)."""
    load_dotenv()

    enum_mode = os.getenv("SCHEMA_DETECTION_ENUM_MODE", "count").strip().lower()
    if enum_mode not in ENUM_MODES:
        raise ValueError(f"SCHEMA_DETECTION_ENUM_MODE must be one of {ENUM_MODES}, got {enum_mode!r}")

    return DetectionSettings(
        enum_threshold=_get_number("SCHEMA_DETECTION_ENUM_THRESHOLD", 50, float),
        enum_mode=enum_mode,
        sample_rows=_get_number("SCHEMA_DETECTION_SAMPLE_ROWS", 100, int),
        max_unique_samples=_get_number("SCHEMA_DETECTION_MAX_UNIQUE_SAMPLES", 100, int),
        default_detector=os.getenv("SCHEMA_DETECTION_DETECTOR") or None,
        log_level=os.getenv("SCHEMA_DETECTION_LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("SCHEMA_DETECTION_LOG_FILE") or None,
    )
