"""Helpers shared by the built-in widgets."""

from typing import Any

from renderer.elements import Element, el
from renderer.models import ComponentCategory, ComponentMetadata, WidgetRenderer


def component(
    name: str, category: ComponentCategory, description: str, renderer: WidgetRenderer
) -> ComponentMetadata:
    return ComponentMetadata(name=name, category=category, description=description, renderer=renderer)


def normalize_options(raw: Any) -> list[dict[str, Any]]:
    """Options may be plain strings or ``{"value", "label"}`` objects."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError(f"options must be an array, got {type(raw).__name__}")
    options = []
    for option in raw:
        if isinstance(option, dict):
            value = str(option.get("value", option.get("label", "")))
            options.append({**option, "value": value, "label": str(option.get("label", value))})
        else:
            options.append({"value": str(option), "label": str(option)})
    return options


def field_label(props: dict[str, Any]) -> Element | None:
    label = props.get("label")
    if not label:
        return None
    return el("label", text=label, for_=props.get("name"))


def initial_value(props: dict[str, Any], default: Any = "") -> Any:
    """Controlled ``value`` wins over ``defaultValue``."""
    if props.get("value") is not None:
        return props["value"]
    if props.get("defaultValue") is not None:
        return props["defaultValue"]
    return default


def disabled_attr(props: dict[str, Any], *extra: Any) -> bool | None:
    """Attribute value for ``disabled``: True, or None to omit it."""
    return True if props.get("disabled") or any(extra) else None
