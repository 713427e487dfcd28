"""Layout widgets: containers that arrange their children."""

from typing import Any

from renderer.context import WidgetContext
from renderer.elements import Element, el
from renderer.models import ComponentCategory, ComponentMetadata
from .base import component

ALERT_TYPES = ("info", "success", "warning", "error")


def _collapsed(props: dict[str, Any], ctx: WidgetContext) -> bool:
    if not props.get("collapsible"):
        return False
    return ctx.state.setdefault("collapsed", bool(props.get("collapsed")))


def _toggle_button(ctx: WidgetContext, collapsed: bool) -> Element:
    def toggle() -> None:
        ctx.state["collapsed"] = not ctx.state.get("collapsed", False)

    return el(
        "button",
        text="Expand" if collapsed else "Collapse",
        on_click=toggle,
        aria_expanded=not collapsed,
        class_name="aiui-toggle",
    )


def render_card(props: dict[str, Any], ctx: WidgetContext) -> Element:
    collapsed = _collapsed(props, ctx)
    header = None
    if props.get("title") or props.get("subtitle") or props.get("collapsible"):
        header = el(
            "header",
            el("h3", text=props["title"]) if props.get("title") else None,
            el("p", text=props["subtitle"]) if props.get("subtitle") else None,
            _toggle_button(ctx, collapsed) if props.get("collapsible") else None,
        )
    body = None if collapsed else el("div", *ctx.children, class_name="aiui-card-body")
    footer = el("footer", text=props["footer"]) if props.get("footer") else None
    return el(
        "article",
        header,
        body,
        footer,
        class_name="aiui-card",
        data_border_color=props.get("borderColor"),
    )


def render_section(props: dict[str, Any], ctx: WidgetContext) -> Element:
    level = min(6, max(1, int(props.get("level", 2))))
    collapsed = _collapsed(props, ctx)
    return el(
        "section",
        el(f"h{level}", text=props["heading"]) if props.get("heading") else None,
        el("p", text=props["description"]) if props.get("description") else None,
        _toggle_button(ctx, collapsed) if props.get("collapsible") else None,
        None if collapsed else el("div", *ctx.children, class_name="aiui-section-body"),
        el("hr") if props.get("divider") else None,
        class_name="aiui-section",
    )


def render_columns(props: dict[str, Any], ctx: WidgetContext) -> Element:
    count = max(1, int(props.get("columns", len(ctx.children) or 1)))
    return el(
        "div",
        *[el("div", child, class_name="aiui-column") for child in ctx.children],
        class_name="aiui-columns",
        data_columns=count,
        data_gap=props.get("gap"),
    )


def _section_key(section: dict[str, Any], index: int) -> str:
    return str(section.get("id") or section.get("title") or index)


def render_accordion(props: dict[str, Any], ctx: WidgetContext) -> Element | None:
    sections = props.get("sections") or []
    if props.get("hidden") or not sections:
        return None
    allow_multiple = bool(props.get("allowMultiple"))
    keys = [_section_key(section, index) for index, section in enumerate(sections)]
    expanded = ctx.state.setdefault(
        "expanded", [key for key, section in zip(keys, sections) if section.get("expanded")]
    )

    def toggle(section_id: str) -> None:
        current = ctx.state["expanded"]
        if section_id in current:
            current.remove(section_id)
        elif allow_multiple:
            current.append(section_id)
        else:
            current[:] = [section_id]

    items = []
    for section_id, section in zip(keys, sections):
        is_open = section_id in expanded
        items.append(
            el(
                "div",
                el(
                    "button",
                    text=section.get("title", section_id),
                    on_click=lambda section_id=section_id: toggle(section_id),
                    aria_expanded=is_open,
                ),
                ctx.render_nested(section.get("content"), f"section:{section_id}") if is_open else None,
                class_name="aiui-accordion-section",
                data_section=section_id,
            )
        )
    return el("div", *items, class_name="aiui-accordion", data_variant=props.get("variant") or "default")


def render_alert(props: dict[str, Any], ctx: WidgetContext) -> Element | None:
    if ctx.state.get("dismissed"):
        return None
    kind = props.get("type") if props.get("type") in ALERT_TYPES else "info"

    def dismiss() -> None:
        ctx.state["dismissed"] = True

    buttons = [
        el("button", text=action.get("label", action["id"]),
           on_click=lambda action_id=action["id"]: ctx.emit(action_id),
           data_action=action["id"], disabled=True if ctx.disabled else None)
        for action in props.get("actions") or []
    ]
    if props.get("dismissible"):
        buttons.append(el("button", text="Dismiss", on_click=dismiss, aria_label="Dismiss"))

    return el(
        "div",
        el("strong", text=props["title"]) if props.get("title") else None,
        el("p", text=props["message"]) if props.get("message") else None,
        *ctx.children,
        el("div", *buttons, class_name="aiui-alert-actions") if buttons else None,
        role="alert",
        class_name=f"aiui-alert aiui-alert--{kind}",
    )


def render_divider(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return el(
        "div",
        el("hr"),
        el("span", text=props["label"]) if props.get("label") else None,
        role="separator",
        class_name="aiui-divider",
    )


def layout_components() -> list[ComponentMetadata]:
    category = ComponentCategory.LAYOUT
    return [
        component("Card", category, "Container with title, subtitle, and footer", render_card),
        component("Section", category, "Section with heading and content", render_section),
        component("Columns", category, "Multi-column layout container", render_columns),
        component("Accordion", category, "Collapsible accordion sections", render_accordion),
        component("Alert", category, "Alert/notification component", render_alert),
        component("Divider", category, "Visual separator with optional label", render_divider),
    ]
