from .statistics import build_detection_context, build_field_statistics, flatten_structs

__all__ = ["build_detection_context", "build_field_statistics", "flatten_structs"]
