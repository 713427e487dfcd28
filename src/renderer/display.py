"""Terminal display of rendered element trees."""

from io import StringIO

import orjson
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.markdown import Markdown
from rich.panel import Panel
from rich.pretty import Pretty
from rich.progress_bar import ProgressBar
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .elements import BUTTON_INPUT_TYPES, FIELD_TAGS, Element

FALLBACK_BORDER = {
    "aiui-fallback--error": "red",
    "aiui-fallback--unknown": "yellow",
    "aiui-fallback--depth": "yellow",
}

ALERT_BORDER = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def _classes(element: Element) -> list[str]:
    return str(element.attrs.get("class", "")).split()


def border_for(element: Element) -> str:
    for name in _classes(element):
        if name in FALLBACK_BORDER:
            return FALLBACK_BORDER[name]
        if name.startswith("aiui-alert--"):
            return ALERT_BORDER.get(name.removeprefix("aiui-alert--"), "cyan")
    return "cyan"


def _group(elements: list[Element]) -> RenderableType:
    parts = [to_renderable(child) for child in elements]
    return Group(*[part for part in parts if part is not None])


def _fallback(element: Element) -> Panel:
    title = element.attrs.get("data-component", "component")
    body = " ".join(e.text for e in element.walk() if e.text)
    return Panel(Text(body), title=f"[bold]{title}[/bold]", border_style=border_for(element))


def _titled_panel(element: Element, heading_tags: tuple[str, ...]) -> Panel:
    title = None
    rest = []
    for child in element.children:
        if child.tag == "header":
            heading = next((e for e in child.walk() if e.tag in heading_tags), None)
            title = heading.text if heading else None
            rest.extend(c for c in child.children if c.tag not in heading_tags)
        elif title is None and child.tag in heading_tags:
            title = child.text
        else:
            rest.append(child)
    return Panel(
        _group(rest),
        title=f"[bold]{title}[/bold]" if title else None,
        border_style=border_for(element),
    )


def _table(element: Element) -> Table:
    table = Table(expand=True)
    head = element.find("thead")
    if head is not None:
        for cell in head.find_all("th"):
            table.add_column(cell.text, overflow="fold")
    body = element.find("tbody")
    if body is not None:
        for row in body.children:
            table.add_row(*[cell.text for cell in row.children])
    caption = element.find("caption")
    if caption is not None:
        table.caption = caption.text
    return table


def _code(element: Element) -> RenderableType:
    code = element.find("code") or element
    language = code.attrs.get("data-language", "text")
    if language == "json":
        try:
            return Pretty(orjson.loads(code.text))
        except orjson.JSONDecodeError:
            pass
    return Syntax(code.text, language, word_wrap=True)


def _progress(element: Element) -> RenderableType:
    total = float(element.attrs.get("aria-valuemax", 100))
    completed = float(element.attrs.get("aria-valuenow", 0))
    label = " ".join(child.text for child in element.children if child.text)
    return Group(Text(label), ProgressBar(total=total, completed=completed))


def _field(element: Element) -> Text:
    name = element.attrs.get("name", "")
    kind = element.attrs.get("type") if element.tag == "input" else element.tag
    if kind in ("checkbox", "radio"):
        mark = "x" if element.attrs.get("checked") else " "
        box = f"[{mark}]" if kind == "checkbox" else f"({mark})"
        return Text(f"{box} {element.attrs.get('value', name)}")
    value = element.attrs.get("value", "")
    line = Text(f"{name}: ", style="bold")
    line.append(str(value) or str(element.attrs.get("placeholder", "")), style="underline")
    return line


def _button(element: Element) -> Text:
    classes = _classes(element)
    style = "bold"
    if "aiui-action--destructive" in classes:
        style = "bold red"
    elif "aiui-action--primary" in classes:
        style = "bold cyan"
    if element.disabled:
        style = "dim"
    return Text(f"[ {element.text} ]", style=style)


def to_renderable(element: Element) -> RenderableType | None:
    """Map one element subtree to a rich renderable."""
    classes = _classes(element)
    tag = element.tag

    if "aiui-fallback" in classes:
        return _fallback(element)
    if element.role == "alert" and any(name.startswith("aiui-alert") for name in classes):
        return _titled_panel(element, ("strong",))
    if "aiui-card" in classes:
        return _titled_panel(element, ("h3",))
    if tag == "section":
        return _titled_panel(element, ("h1", "h2", "h3", "h4", "h5", "h6"))
    if tag == "table":
        return _table(element)
    if tag == "pre":
        return _code(element)
    if element.attrs.get("data-format") == "markdown":
        return Markdown(element.text)
    if element.role == "progressbar":
        return _progress(element)
    if tag in FIELD_TAGS and element.attrs.get("type") not in BUTTON_INPUT_TYPES:
        return _field(element)
    if tag in ("button", "a"):
        return _button(element)
    if tag == "option":
        return None
    if element.role in ("group", "tablist") or "aiui-columns" in classes:
        parts = [to_renderable(child) for child in element.children]
        return Columns([part for part in parts if part is not None])
    if tag == "hr":
        return Text("─" * 20, style="dim")

    parts: list[RenderableType] = []
    if element.text:
        style = "bold" if tag in ("h1", "h2", "h3", "h4", "h5", "h6", "legend", "strong") else ""
        parts.append(Text(element.text, style=style))
    for child in element.children:
        rendered = to_renderable(child)
        if rendered is not None:
            parts.append(rendered)
    if not parts:
        return None
    return parts[0] if len(parts) == 1 else Group(*parts)


def render_to_text(element: Element, width: int = 100) -> str:
    """Plain-text export of the rich view."""
    console = Console(file=StringIO(), width=width, record=True, color_system=None)
    renderable = to_renderable(element)
    if renderable is not None:
        console.print(renderable)
    return console.export_text()


__all__ = ["border_for", "render_to_text", "to_renderable"]
