"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    UIDescriptionValidator,
    validate_json_size,
    validate_json_depth,
    validate_ui_description,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import extract_json, safe_json_dumps, JSONParseError


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "UIDescriptionValidator",
    "validate_json_size",
    "validate_json_depth",
    "validate_ui_description",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
]
