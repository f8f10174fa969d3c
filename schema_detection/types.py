"""
Core types for schema detection.

Detectors receive a DetectionContext built from an uploaded dataset preview and
return a DetectionResult with the detected language, semantic field mappings and
structural patterns. Results serialise to the camelCase shape consumed by the
import wizard via `to_dict()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class NumericStats:
    min: float
    max: float
    avg: float
    is_integer: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NumericStats":
        return cls(
            min=float(data["min"]),
            max=float(data["max"]),
            avg=float(data.get("avg", 0.0)),
            is_integer=bool(data.get("isInteger", data.get("is_integer", False))),
        )


@dataclass(frozen=True)
class FieldStatistics:
    """Statistics for one column path, produced by the schema builder."""

    path: str
    occurrences: int = 0
    occurrence_percent: float = 100.0
    null_count: int = 0
    unique_values: int = 0
    unique_samples: List[Any] = field(default_factory=list)
    type_distribution: Dict[str, int] = field(default_factory=dict)
    formats: Dict[str, int] = field(default_factory=dict)
    numeric_stats: Optional[NumericStats] = None
    is_enum_candidate: bool = False
    first_seen: Optional[datetime] = None
    last_seen: Optional[datetime] = None
    depth: int = 0

    def type_count(self, value_type: str) -> int:
        return self.type_distribution.get(value_type, 0) or 0

    def format_count(self, value_format: str) -> int:
        return self.formats.get(value_format, 0) or 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], path: Optional[str] = None) -> "FieldStatistics":
        """Build from the schema builder's JSON shape (camelCase keys)."""

        def pick(camel: str, snake: str, default: Any = None) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        numeric = pick("numericStats", "numeric_stats")
        return cls(
            path=str(data.get("path") or path or ""),
            occurrences=int(data.get("occurrences", 0)),
            occurrence_percent=float(pick("occurrencePercent", "occurrence_percent", 100.0)),
            null_count=int(pick("nullCount", "null_count", 0)),
            unique_values=int(pick("uniqueValues", "unique_values", 0)),
            unique_samples=list(pick("uniqueSamples", "unique_samples", []) or []),
            type_distribution=dict(pick("typeDistribution", "type_distribution", {}) or {}),
            formats=dict(data.get("formats") or {}),
            numeric_stats=NumericStats.from_dict(numeric) if numeric else None,
            is_enum_candidate=bool(pick("isEnumCandidate", "is_enum_candidate", False)),
            first_seen=pick("firstSeen", "first_seen"),
            last_seen=pick("lastSeen", "last_seen"),
            depth=int(data.get("depth", 0)),
        )


@dataclass
class DetectorConfig:
    """Per-detector configuration. Enforcing `enabled`/`priority` is up to the host."""

    enabled: bool = True
    priority: int = 100
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DetectionContext:
    field_stats: Dict[str, FieldStatistics]
    sample_data: List[Dict[str, Any]] = field(default_factory=list)
    headers: List[str] = field(default_factory=list)
    config: DetectorConfig = field(default_factory=DetectorConfig)


@dataclass
class LanguageResult:
    code: str
    name: str
    confidence: float
    is_reliable: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "confidence": self.confidence,
            "isReliable": self.is_reliable,
        }


@dataclass
class FieldMapping:
    path: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "confidence": self.confidence}


@dataclass
class CombinedCoordinate:
    path: str
    format: str  # "lat,lng" | "lng,lat"


@dataclass
class GeoFieldMapping:
    type: str  # "separate" | "combined"
    confidence: float
    latitude: Optional[FieldMapping] = None
    longitude: Optional[FieldMapping] = None
    combined: Optional[CombinedCoordinate] = None
    location_field: Optional[FieldMapping] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "confidence": self.confidence}
        if self.latitude is not None:
            out["latitude"] = self.latitude.to_dict()
        if self.longitude is not None:
            out["longitude"] = self.longitude.to_dict()
        if self.combined is not None:
            out["combined"] = {"path": self.combined.path, "format": self.combined.format}
        if self.location_field is not None:
            out["locationField"] = self.location_field.to_dict()
        return out


@dataclass
class FieldMappingsResult:
    title: Optional[FieldMapping] = None
    description: Optional[FieldMapping] = None
    timestamp: Optional[FieldMapping] = None
    location_name: Optional[FieldMapping] = None
    geo: Optional[GeoFieldMapping] = None

    def to_dict(self) -> Dict[str, Any]:
        def dump(value):
            return value.to_dict() if value is not None else None

        return {
            "title": dump(self.title),
            "description": dump(self.description),
            "timestamp": dump(self.timestamp),
            "locationName": dump(self.location_name),
            "geo": dump(self.geo),
        }


@dataclass
class PatternResult:
    id_fields: List[str] = field(default_factory=list)
    enum_fields: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"idFields": list(self.id_fields), "enumFields": list(self.enum_fields)}


@dataclass
class DetectionResult:
    language: LanguageResult
    field_mappings: FieldMappingsResult
    patterns: PatternResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language.to_dict(),
            "fieldMappings": self.field_mappings.to_dict(),
            "patterns": self.patterns.to_dict(),
        }


def empty_result() -> DetectionResult:
    """Result returned when no detector is available at all."""
    return DetectionResult(
        language=LanguageResult(code="eng", name="English", confidence=0.0, is_reliable=False),
        field_mappings=FieldMappingsResult(),
        patterns=PatternResult(),
    )


class SchemaDetector(ABC):
    """
    A detector handles all detection for one dataset preview.

    Subclasses set `name` (used for selection), `label` and optionally `description`.
    `can_handle` returning False makes the service fall back to the default detector.
    """

    name: str = ""
    label: str = ""
    description: Optional[str] = None

    @abstractmethod
    def can_handle(self, context: DetectionContext) -> bool:
        ...

    @abstractmethod
    def detect(self, context: DetectionContext) -> DetectionResult:
        ...
