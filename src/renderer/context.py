"""What a leaf renderer receives besides its merged props."""

from dataclasses import dataclass, field
from typing import Any, Callable

from .elements import Element
from .state import NodePath


@dataclass
class WidgetContext:
    """
    Per-node rendering context handed to every widget.

    Attributes:
        component_type: Registered name the node resolved to
        path: Index path of the node from the root
        disabled: Computed disabled flag (caller flag OR props.disabled)
        children: Already-rendered child elements, in description order
        state: Node-local ephemeral state that survives re-renders
    """

    component_type: str
    path: NodePath
    disabled: bool
    children: list[Element] = field(default_factory=list)
    state: dict[str, Any] = field(default_factory=dict)
    nested_renderer: Callable[[Any, str], Element | None] | None = field(default=None, repr=False)
    emitter: Callable[[str], bool] | None = field(default=None, repr=False)

    def render_nested(self, component: Any, slot: str) -> Element | None:
        """Render a description embedded in props (tab, step, or section content).

        The nested node gets its own failure boundary and a path extended by
        ``slot``, so its state is kept apart from sibling slots.
        """
        if self.nested_renderer is None:
            return None
        return self.nested_renderer(component, slot)

    def emit(self, action_id: str) -> bool:
        """Raise a named action from inside the widget, collecting form data
        from this node's subtree. Returns True if the callback ran."""
        if self.emitter is None:
            return False
        return self.emitter(action_id)
