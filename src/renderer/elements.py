"""Rendered element tree.

Widgets and the renderer produce ``Element`` trees rather than terminal or
HTML output directly. The tree is what the action dispatcher scans for named
fields, what tests assert against, and what ``renderer.display`` turns into
rich renderables.
"""

from dataclasses import dataclass, field
from collections.abc import Iterator
from typing import Any, Callable

FIELD_TAGS = frozenset({"input", "select", "textarea"})
BUTTON_INPUT_TYPES = frozenset({"button", "submit", "reset"})


@dataclass
class Element:
    """A single node of rendered output."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    text: str = ""
    children: list["Element"] = field(default_factory=list)
    handler: Callable[[], Any] | None = field(default=None, compare=False, repr=False)

    def walk(self) -> Iterator["Element"]:
        """Depth-first, document-order traversal including self."""
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))

    def find_all(self, tag: str | None = None, **attrs: Any) -> list["Element"]:
        """All descendants (and self) matching tag and attribute values."""
        wanted = {_attr_name(key): value for key, value in attrs.items()}
        return [
            element
            for element in self.walk()
            if (tag is None or element.tag == tag)
            and all(element.attrs.get(key) == value for key, value in wanted.items())
        ]

    def find(self, tag: str | None = None, **attrs: Any) -> "Element | None":
        matches = self.find_all(tag, **attrs)
        return matches[0] if matches else None

    def text_content(self) -> str:
        """All text in the subtree, one fragment per line."""
        return "\n".join(element.text for element in self.walk() if element.text)

    @property
    def role(self) -> str | None:
        return self.attrs.get("role")

    @property
    def disabled(self) -> bool:
        return bool(self.attrs.get("disabled"))

    @property
    def is_field(self) -> bool:
        """Named interactive control that contributes to an action payload."""
        if self.tag not in FIELD_TAGS or not self.attrs.get("name"):
            return False
        return not (self.tag == "input" and self.attrs.get("type") in BUTTON_INPUT_TYPES)

    def click(self) -> bool:
        """Invoke the handler unless disabled. Returns True if it ran."""
        if self.disabled or self.handler is None:
            return False
        self.handler()
        return True

    def set_value(self, value: Any) -> None:
        """Simulate the user typing or selecting a value."""
        self.attrs["value"] = "" if value is None else str(value)

    def set_checked(self, checked: bool = True) -> None:
        """Simulate the user ticking a checkbox. Radios go through ``select_radio``."""
        self.attrs["checked"] = bool(checked)

    def select_radio(self, name: str, value: str) -> None:
        """Check the radio with ``value`` in group ``name`` and clear the rest."""
        for element in self.find_all("input", type="radio", name=name):
            element.attrs["checked"] = element.attrs.get("value") == value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"tag": self.tag}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.text:
            data["text"] = self.text
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def _attr_name(key: str) -> str:
    if key == "class_name":
        return "class"
    return key.rstrip("_").replace("_", "-")


def el(
    tag: str,
    *children: "Element | None",
    text: Any = "",
    on_click: Callable[[], Any] | None = None,
    **attrs: Any,
) -> Element:
    """Build an element; ``aria_label`` becomes ``aria-label``, ``class_name`` becomes ``class``.

    ``None`` children and ``None`` attribute values are dropped so callers can
    pass optional parts inline.
    """
    return Element(
        tag=tag,
        attrs={_attr_name(key): value for key, value in attrs.items() if value is not None},
        text="" if text is None else str(text),
        children=[child for child in children if child is not None],
        handler=on_click,
    )


def action_button(
    action_id: str,
    label: str,
    on_click: Callable[[], Any] | None,
    *,
    primary: bool = False,
    destructive: bool = False,
    alignment: str | None = None,
    disabled: bool = False,
) -> Element:
    """Button for a named action, styled by emphasis."""
    classes = ["aiui-action"]
    if primary:
        classes.append("aiui-action--primary")
    if destructive:
        classes.append("aiui-action--destructive")
    return el(
        "button",
        text=label,
        on_click=on_click,
        type="button",
        class_name=" ".join(classes),
        data_action=action_id,
        data_alignment=alignment,
        disabled=True if disabled else None,
    )
