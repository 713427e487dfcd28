"""Display widgets: read-only presentation of data."""

import difflib
from typing import Any

from core import safe_json_dumps
from renderer.context import WidgetContext
from renderer.elements import Element, el
from renderer.models import ComponentCategory, ComponentMetadata
from .base import component


def _table_columns(props: dict[str, Any], rows: list[dict[str, Any]]) -> list[dict[str, str]]:
    columns = props.get("columns")
    if columns:
        return [
            {"key": str(col["key"]), "label": str(col.get("label", col["key"]))}
            if isinstance(col, dict)
            else {"key": str(col), "label": str(col)}
            for col in columns
        ]
    keys: list[str] = []
    for row in rows:
        for key in row:
            if key not in keys:
                keys.append(key)
    return [{"key": key, "label": key} for key in keys]


def render_table(props: dict[str, Any], ctx: WidgetContext) -> Element:
    rows = props.get("rows") or []
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise TypeError("Table rows must be an array of objects")
    columns = _table_columns(props, rows)

    visible = rows
    pager = None
    if props.get("paginated"):
        page_size = max(1, int(props.get("pageSize", 10)))
        pages = max(1, -(-len(rows) // page_size))
        page = min(ctx.state.get("page", 0), pages - 1)
        visible = rows[page * page_size:(page + 1) * page_size]

        def goto(target: int) -> None:
            ctx.state["page"] = max(0, min(target, pages - 1))

        pager = el(
            "nav",
            el("button", text="Previous", on_click=lambda: goto(page - 1),
               disabled=True if page == 0 else None),
            el("span", text=f"Page {page + 1} of {pages}"),
            el("button", text="Next", on_click=lambda: goto(page + 1),
               disabled=True if page >= pages - 1 else None),
            class_name="aiui-pager",
        )

    head = el("thead", el("tr", *[el("th", text=col["label"]) for col in columns]))
    body = el(
        "tbody",
        *[
            el("tr", *[el("td", text=_cell(row.get(col["key"]))) for col in columns])
            for row in visible
        ],
    )
    table = el(
        "table",
        head,
        body,
        el("caption", text=props["caption"]) if props.get("caption") else None,
        data_striped=True if props.get("striped") else None,
    )
    return el("div", table, pager, class_name="aiui-table") if pager else table


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return safe_json_dumps(value)
    return str(value)


def render_code_block(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return el(
        "pre",
        el("code", text=props.get("code", ""), data_language=props.get("language") or "text"),
        data_title=props.get("title"),
        data_line_numbers=True if props.get("lineNumbers") else None,
        class_name="aiui-code",
    )


def render_diff_view(props: dict[str, Any], ctx: WidgetContext) -> Element:
    before = str(props.get("before", ""))
    after = str(props.get("after", ""))
    file_name = props.get("fileName") or "file"
    context_lines = int(props.get("contextLines", 3))
    diff = difflib.unified_diff(
        before.splitlines(),
        after.splitlines(),
        fromfile=f"a/{file_name}",
        tofile=f"b/{file_name}",
        n=context_lines,
        lineterm="",
    )
    text = "\n".join(diff) or "No changes"
    return el(
        "figure",
        el("figcaption", text=props.get("fileName")) if props.get("fileName") else None,
        el("pre", el("code", text=text, data_language="diff")),
        data_mode=props.get("mode") or "unified",
        class_name="aiui-diff",
    )


def render_json_viewer(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return el(
        "pre",
        el("code", text=safe_json_dumps(props.get("data", {}), indent=2), data_language="json"),
        data_collapsed=True if props.get("collapsed") else None,
        class_name="aiui-json",
    )


def render_markdown(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return el("div", text=props.get("content", ""), data_format="markdown", class_name="aiui-markdown")


def render_image(props: dict[str, Any], ctx: WidgetContext) -> Element:
    src = props.get("src")
    if not src:
        raise ValueError("Image requires a 'src'")
    return el(
        "figure",
        el("img", src=src, alt=props.get("alt", ""), width=props.get("width")),
        el("figcaption", text=props["caption"]) if props.get("caption") else None,
    )


def render_spinner(props: dict[str, Any], ctx: WidgetContext) -> Element:
    return el("div", text=props.get("label") or "Loading...", role="status", data_size=props.get("size"))


def render_badge(props: dict[str, Any], ctx: WidgetContext) -> Element:
    text = props.get("text", props.get("label", ""))
    return el("span", text=text, class_name="aiui-badge", data_variant=props.get("variant") or "default")


def display_components() -> list[ComponentMetadata]:
    category = ComponentCategory.DISPLAY
    return [
        component("Table", category, "Tabular data display component", render_table),
        component("CodeBlock", category, "Code syntax highlighting component", render_code_block),
        component("DiffView", category, "Diff/comparison viewer component", render_diff_view),
        component("JsonViewer", category, "JSON data viewer component", render_json_viewer),
        component("Markdown", category, "Markdown renderer component", render_markdown),
        component("Image", category, "Image display with caption", render_image),
        component("Spinner", category, "Loading spinner indicator", render_spinner),
        component("Badge", category, "Status badge/tag component", render_badge),
    ]
