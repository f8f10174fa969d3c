"""
Schema detection service.

Keeps a registry of detectors keyed by name and dispatches detection to the
requested detector, falling back to the default detector when the requested one
is unknown or declines the input. Registry mutation is not synchronised: callers
must not register detectors while detections are running.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from schema_detection.config import DetectionSettings
from schema_detection.detectors import DefaultDetector
from schema_detection.types import DetectionContext, DetectionResult, SchemaDetector, empty_result
from schema_detection.utils.logger import logger

DEFAULT_DETECTOR_NAME = "default"


class SchemaDetectionService:
    """
    Registry and dispatcher for schema detectors.

    Parameters
    ----------
    detectors: detectors to register, in order. A detector named "default" becomes
               the fallback; without one, the last detector given is used.
    """

    def __init__(self, detectors: Optional[Sequence[SchemaDetector]] = None) -> None:
        self._detectors: Dict[str, SchemaDetector] = {}
        self._default: Optional[SchemaDetector] = None
        detectors = list(detectors or [])
        for detector in detectors:
            self.register(detector)
        if self._default is None and detectors:
            self._default = detectors[-1]

    @property
    def default_detector(self) -> Optional[SchemaDetector]:
        return self._default

    def register(self, detector: SchemaDetector) -> None:
        """Add or replace a detector by name."""
        name = getattr(detector, "name", None)
        if not name:
            raise ValueError("Detector must have a non-empty name")

        previous = self._detectors.get(name)
        self._detectors[name] = detector
        if name == DEFAULT_DETECTOR_NAME or (previous is not None and previous is self._default):
            self._default = detector

    def get_detector(self, name: str) -> Optional[SchemaDetector]:
        return self._detectors.get(name)

    def get_all_detectors(self) -> List[SchemaDetector]:
        return list(self._detectors.values())

    def detect(self, name: Optional[str], context: DetectionContext) -> DetectionResult:
        """
        Run detection with the named detector, or the default one.

        Never raises for a missing or declining detector; with no detector at all
        the empty result is returned. Exceptions raised by a detector propagate.
        """
        if name:
            detector = self._detectors.get(name)
            if detector is None:
                logger.warning(f"Detector '{name}' not found, using default detector")
            elif self._can_handle(detector, context):
                logger.debug(f"Using detector '{name}'")
                return self._run(detector, context)
            else:
                logger.info(f"Detector '{name}' cannot handle input, using default detector")

        if self._default is not None:
            return self._run(self._default, context)

        logger.warning("No schema detectors registered, returning empty result")
        return empty_result()

    def find_compatible_detector(self, context: DetectionContext) -> Optional[SchemaDetector]:
        """First non-default detector accepting the input, else the default detector."""
        for detector in self._detectors.values():
            if detector is self._default:
                continue
            if self._can_handle(detector, context):
                return detector
        return self._default

    @staticmethod
    def _can_handle(detector: SchemaDetector, context: DetectionContext) -> bool:
        try:
            return bool(detector.can_handle(context))
        except Exception:
            logger.error(f"Detector '{detector.name}' failed in can_handle", exc_info=True)
            raise

    @staticmethod
    def _run(detector: SchemaDetector, context: DetectionContext) -> DetectionResult:
        try:
            return detector.detect(context)
        except Exception:
            logger.error(f"Detector '{detector.name}' failed in detect", exc_info=True)
            raise


def create_detection_service(settings: Optional[DetectionSettings] = None) -> SchemaDetectionService:
    """Service with the built-in default detector registered."""
    return SchemaDetectionService([DefaultDetector(settings)])
