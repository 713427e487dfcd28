"""UI Description Loader - JSON to UIComponent with validation."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from core import get_logger, get_settings, safe_json_dumps, ValidationError, ValidationResult
from core.json import extract_json, JSONParseError
from core.validate import UIDescriptionValidator
from .models import UIComponent

logger = get_logger(__name__)


def _location(loc: tuple[int | str, ...]) -> str:
    parts = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            parts.append(f".{part}" if parts else str(part))
    return "".join(parts) or "root"


def _describe(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    location = _location(tuple(first["loc"]))
    return f"Invalid UI description at {location}: {first['msg']}"


def load_ui_description(data: Any, source_json: str | None = None) -> UIComponent:
    """
    Validate an already-parsed description and build the model tree.

    Args:
        data: Parsed JSON value
        source_json: Raw text the value came from, for the size limit

    Returns:
        Validated root component

    Raises:
        ValidationError: If limits, root shape, or node structure are invalid
    """
    settings = get_settings()
    if source_json is None and isinstance(data, dict):
        source_json = safe_json_dumps(data)

    UIDescriptionValidator.validate(
        data,
        source_json,
        max_size=settings.max_ui_spec_size,
        max_depth=settings.max_json_depth,
    )

    try:
        return UIComponent.model_validate(data)
    except PydanticValidationError as e:
        message = _describe(e)
        logger.error("ui_description_invalid", error=message, errors=e.error_count())
        raise ValidationError(message) from e


def parse_ui_description(text: str) -> UIComponent:
    """
    Parse description text (optionally fenced or slightly malformed JSON).

    Raises:
        ValidationError: If the text holds no usable description
    """
    settings = get_settings()
    try:
        data = extract_json(text, repair=settings.repair_json)
    except JSONParseError as e:
        logger.error("json_parse_failed", error=str(e))
        raise ValidationError(f"Invalid JSON: {e}") from e

    return load_ui_description(data, text)


def check_ui_description(data: Any) -> Result[UIComponent, ValidationResult]:
    """Result variant of ``load_ui_description``."""
    try:
        return Success(load_ui_description(data))
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))


__all__ = ["check_ui_description", "load_ui_description", "parse_ui_description"]
