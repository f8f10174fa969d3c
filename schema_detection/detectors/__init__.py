from .default_detector import DefaultDetector

__all__ = ["DefaultDetector"]
