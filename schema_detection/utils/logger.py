import logging
import os
import sys
from typing import Optional

logger_name = 'schema_detection'

# Create logger
logger = logging.getLogger(logger_name)
logger.setLevel(os.getenv("SCHEMA_DETECTION_LOG_LEVEL", "INFO").upper())

# Formatter
formatter = logging.Formatter("{asctime} - {levelname} - {message}", style="{", datefmt="%Y-%m-%d %H:%M:%S")

# Console Handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(formatter)

# Add handlers
if not logger.handlers:
    logger.addHandler(console_handler)


def configure_logger(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Apply the configured level and attach a file handler for `log_file` once."""
    logger.setLevel(level.upper())
    if log_file:
        path = os.path.abspath(log_file)
        has_file = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path for h in logger.handlers
        )
        if not has_file:
            file_handler = logging.FileHandler(path, encoding="utf-8", mode="a")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
