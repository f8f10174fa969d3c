from .detection import detect_enum_fields, detect_id_fields, detect_patterns, looks_like_coordinate, looks_like_id

__all__ = ["detect_enum_fields", "detect_id_fields", "detect_patterns", "looks_like_coordinate", "looks_like_id"]
