"""Input validation for backend-supplied UI descriptions."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure


# Validation limits
MAX_UI_SPEC_SIZE = 512 * 1024  # 512KB
MAX_JSON_DEPTH = 200


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size to prevent DoS attacks.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        ValidationError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise ValidationError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = MAX_JSON_DEPTH, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent stack overflow.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        ValidationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise ValidationError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)


class UIDescriptionValidator:
    """Validates the envelope of a UI description before model validation."""

    @staticmethod
    def validate(
        data: Any,
        data_json: str | None = None,
        *,
        max_size: int = MAX_UI_SPEC_SIZE,
        max_depth: int = MAX_JSON_DEPTH,
    ) -> None:
        """
        Validate UI description limits and root shape.

        Args:
            data: Parsed UI description
            data_json: JSON string representation, when available
            max_size: Maximum JSON size in bytes
            max_depth: Maximum JSON nesting depth

        Raises:
            ValidationError: If validation fails
        """
        if data_json is not None:
            validate_json_size(data_json, max_size, "UI description")

        if not isinstance(data, dict):
            raise ValidationError("UI definition must be a non-null object")

        validate_json_depth(data, max_depth)

        component_type = data.get("type")
        if not isinstance(component_type, str) or not component_type:
            raise ValidationError("UI component must have a type property (string)")


def validate_ui_description(
    data: Any, json_str: str | None = None, **limits: int
) -> Result[None, ValidationResult]:
    """
    Validate a UI description envelope (Result pattern version).

    Args:
        data: Parsed UI description
        json_str: JSON string representation
        **limits: max_size / max_depth overrides

    Returns:
        Result indicating success or validation error
    """
    try:
        UIDescriptionValidator.validate(data, json_str, **limits)
        return Success(None)
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
