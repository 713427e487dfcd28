"""Inline notices rendered in place of unknown, failing, or too-deep nodes.

Every fallback is an alert region that names the offending component type,
so operators can diagnose a bad description from the rendered output alone.
"""

from .elements import Element, el


def unknown_component_fallback(component_type: str) -> Element:
    return el(
        "div",
        el("p", text="Unknown component type: "),
        el("code", text=component_type),
        role="alert",
        class_name="aiui-fallback aiui-fallback--unknown",
        data_component=component_type,
    )


def error_fallback(component_type: str, error: BaseException) -> Element:
    message = str(error) or type(error).__name__
    return el(
        "div",
        el("h4", text=f"Error rendering component: {component_type}"),
        el("p", text=message),
        role="alert",
        class_name="aiui-fallback aiui-fallback--error",
        data_component=component_type,
    )


def depth_exceeded_fallback(component_type: str, max_depth: int) -> Element:
    return el(
        "div",
        el("p", text=f"Component tree too deep at {component_type}: maximum depth is {max_depth}"),
        role="alert",
        class_name="aiui-fallback aiui-fallback--depth",
        data_component=component_type,
    )
