"""Embed widgets: references to diagrams and wireframes stored elsewhere."""

from typing import Any

from renderer.context import WidgetContext
from renderer.elements import Element, el
from renderer.models import ComponentCategory, ComponentMetadata
from .base import component


def _embed(props: dict[str, Any], kind: str, **attrs: Any) -> Element:
    diagram_id = props.get("diagramId")
    content = props.get("content")
    if not diagram_id and not content:
        raise ValueError(f"{kind} requires a 'diagramId' or inline 'content'")

    if content:
        body = el("pre", el("code", text=content, data_language="mermaid"))
    else:
        session = props.get("session")
        ref = f"{session}/{diagram_id}" if session else str(diagram_id)
        body = el("p", text=f"Embedded {kind.lower()}: {ref}")

    return el(
        "figure",
        el("figcaption", text=props["title"]) if props.get("title") else None,
        body,
        el("p", text=props["description"]) if props.get("description") else None,
        class_name=f"aiui-embed aiui-embed--{kind.lower()}",
        data_diagram=diagram_id,
        data_session=props.get("session"),
        **attrs,
    )


def render_diagram_embed(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return _embed(
        props,
        "Diagram",
        data_interactive=True if props.get("interactive") else None,
        data_max_height=props.get("maxHeight"),
    )


def render_wireframe_embed(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return _embed(props, "Wireframe", data_scale=props.get("scale"))


def embed_components() -> list[ComponentMetadata]:
    category = ComponentCategory.EMBED
    return [
        component("DiagramEmbed", category, "Inline Mermaid diagram embedding", render_diagram_embed),
        component("WireframeEmbed", category, "Inline wireframe preview embedding", render_wireframe_embed),
    ]
