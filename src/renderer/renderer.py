"""
Recursive UI Renderer
Walks a UI description, resolves each node through the registry, merges
property scopes, recurses into children, renders declared actions, and
contains failures to the smallest enclosing node.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from core import get_logger, get_settings
from .context import WidgetContext
from .dispatch import ActionCallback, ActionDispatcher
from .elements import Element, action_button, el
from .fallbacks import depth_exceeded_fallback, error_fallback, unknown_component_fallback
from .models import UIAction, UIComponent
from .registry import ComponentRegistry, get_registry
from .state import NodePath, StateArena, format_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderFailure:
    """A node whose render step raised."""

    component_type: str
    error: Exception


RenderOutcome = Result[Element, RenderFailure]


def node_type(node: Any) -> str | None:
    """Type name of a node, or None when there is nothing to render."""
    if isinstance(node, UIComponent):
        return node.type or None
    if not isinstance(node, Mapping):
        return None
    component_type = node.get("type")
    if not component_type:
        return None
    return component_type if isinstance(component_type, str) else str(component_type)


def node_body(node: Any) -> tuple[Mapping[str, Any], list[Any], list[Any]]:
    """Props, children and actions of one node, read without touching its subtree."""
    if isinstance(node, UIComponent):
        return node.props, list(node.children), list(node.actions)

    props = node.get("props") or {}
    children = node.get("children") or []
    actions = node.get("actions") or []
    if not isinstance(props, Mapping):
        raise TypeError(f"props must be an object, got {type(props).__name__}")
    if not isinstance(children, list):
        raise TypeError(f"children must be an array, got {type(children).__name__}")
    if not isinstance(actions, list):
        raise TypeError(f"actions must be an array, got {type(actions).__name__}")
    return props, children, actions


def join_class_names(*fragments: Any) -> str:
    """Join non-empty class fragments with a single space."""
    parts = (str(fragment).strip() for fragment in fragments if fragment)
    return " ".join(part for part in parts if part)


def merge_props(
    props: Mapping[str, Any],
    override_props: Mapping[str, Any],
    disabled: bool,
    class_name: str = "",
) -> dict[str, Any]:
    """
    Merge property scopes; later entries win.

    Order: node props, caller overrides, computed ``disabled``, composed
    ``className``.
    """
    merged = {**props, **override_props}
    merged["disabled"] = bool(disabled or props.get("disabled"))
    merged["className"] = join_class_names(
        props.get("className"), override_props.get("className"), class_name
    )
    return merged


class _RenderPass:
    """State shared by every node of one ``render`` call."""

    def __init__(
        self,
        renderer: "Renderer",
        dispatcher: ActionDispatcher,
        override_props: Mapping[str, Any],
    ) -> None:
        self.registry = renderer.registry
        self.state = renderer.state
        self.max_depth = renderer.max_depth
        self.dispatcher = dispatcher
        self.override_props = override_props

    def visit(self, node: Any, path: NodePath, disabled: bool, class_name: str = "") -> Element | None:
        component_type = node_type(node)
        if component_type is None:
            return None

        if len(path) > self.max_depth:
            logger.warning(
                "render_depth_exceeded",
                type=component_type,
                path=format_path(path),
                max_depth=self.max_depth,
            )
            return depth_exceeded_fallback(component_type, self.max_depth)

        if not self.registry.has_component(component_type):
            logger.warning("unknown_component", type=component_type, path=format_path(path))
            return unknown_component_fallback(component_type)

        outcome = self._render_resolved(node, component_type, path, disabled, class_name)
        if is_successful(outcome):
            return outcome.unwrap()
        failure = outcome.failure()
        return error_fallback(failure.component_type, failure.error)

    def _render_resolved(
        self,
        node: Any,
        component_type: str,
        path: NodePath,
        disabled: bool,
        class_name: str,
    ) -> RenderOutcome:
        try:
            widget = self.registry.validate_component(component_type).renderer
            props, children, actions = node_body(node)
            merged = merge_props(props, self.override_props, disabled, class_name)
            node_disabled = merged["disabled"]

            wrapper = el(
                "div",
                class_name=merged["className"] or None,
                data_component=component_type,
                data_path=format_path(path) or None,
            )

            rendered_children = []
            for index, child in enumerate(children):
                rendered = self.visit(child, path + (index,), node_disabled)
                if rendered is not None:
                    rendered_children.append(rendered)

            ctx = WidgetContext(
                component_type=component_type,
                path=path,
                disabled=node_disabled,
                children=rendered_children,
                state=self.state.slot(path, component_type),
                nested_renderer=partial(self._render_nested, path, node_disabled),
                emitter=partial(self.dispatcher.dispatch, scope=wrapper, disabled=node_disabled),
            )
            body = widget(merged, ctx)
            if body is not None:
                wrapper.children.append(body)

            action_bar = self._render_actions(actions, wrapper, node_disabled)
            if action_bar is not None:
                wrapper.children.append(action_bar)
            return Success(wrapper)
        except Exception as error:
            logger.error(
                "component_render_failed",
                type=component_type,
                path=format_path(path),
                error=str(error),
                exc_info=True,
            )
            return Failure(RenderFailure(component_type, error))

    def _render_nested(self, path: NodePath, disabled: bool, component: Any, slot: str) -> Element | None:
        return self.visit(component, path + (slot,), disabled)

    def _render_actions(self, actions: list[Any], scope: Element, disabled: bool) -> Element | None:
        if not actions:
            return None
        buttons = []
        for raw in actions:
            action = raw if isinstance(raw, UIAction) else UIAction.model_validate(raw)
            on_click = partial(self.dispatcher.dispatch, action.id, scope, disabled)
            buttons.append(
                action_button(
                    action.id,
                    action.label,
                    on_click,
                    primary=action.primary,
                    destructive=action.destructive,
                    alignment=action.alignment,
                    disabled=disabled,
                )
            )
        return el("div", *buttons, role="group", class_name="aiui-actions")


class Renderer:
    """
    Turns UI descriptions into element trees.

    A renderer owns the node-local state arena, so re-rendering the same
    description through the same instance keeps expand/collapse and
    selection state. The registry is shared, read-only data.
    """

    def __init__(
        self,
        registry: ComponentRegistry | None = None,
        *,
        max_depth: int | None = None,
        state: StateArena | None = None,
    ) -> None:
        self.registry = registry if registry is not None else get_registry()
        self.max_depth = max_depth if max_depth is not None else get_settings().max_render_depth
        self.state = state if state is not None else StateArena()

    def render(
        self,
        node: Any,
        on_action: ActionCallback | ActionDispatcher | None = None,
        override_props: Mapping[str, Any] | None = None,
        disabled: bool = False,
        class_name: str = "",
    ) -> Element | None:
        """
        Render one UI description.

        Args:
            node: ``UIComponent`` or JSON-like mapping
            on_action: Callback ``(action_id, payload)`` or a dispatcher;
                pass a dispatcher to join asynchronous callbacks later
            override_props: Props applied on top of every node's own props
            disabled: Disable every action in the tree
            class_name: Extra class for the root node

        Returns:
            Root element, or None for an absent/typeless node
        """
        render_pass = _RenderPass(self, _as_dispatcher(on_action), dict(override_props or {}))
        return render_pass.visit(node, (), disabled, class_name)

    def render_components(
        self,
        nodes: Iterable[Any],
        on_action: ActionCallback | ActionDispatcher | None = None,
        override_props: Mapping[str, Any] | None = None,
        disabled: bool = False,
    ) -> list[Element]:
        """Render several roots with one dispatcher; empty results are skipped."""
        render_pass = _RenderPass(self, _as_dispatcher(on_action), dict(override_props or {}))
        rendered = (render_pass.visit(node, (index,), disabled) for index, node in enumerate(nodes))
        return [element for element in rendered if element is not None]


def _as_dispatcher(on_action: ActionCallback | ActionDispatcher | None) -> ActionDispatcher:
    if isinstance(on_action, ActionDispatcher):
        return on_action
    return ActionDispatcher(on_action)


def render(
    node: Any,
    on_action: ActionCallback | ActionDispatcher | None = None,
    override_props: Mapping[str, Any] | None = None,
    disabled: bool = False,
) -> Element | None:
    """
    Render with a fresh renderer over the process-wide registry.

    A plain callback gets a private dispatcher, so asynchronous callbacks
    cannot be joined afterwards. Pass an ``ActionDispatcher`` to keep a
    handle for ``wait()`` or ``drain()``.
    """
    return Renderer().render(node, on_action, override_props, disabled)


def render_components(
    nodes: Iterable[Any],
    on_action: ActionCallback | ActionDispatcher | None = None,
    override_props: Mapping[str, Any] | None = None,
    disabled: bool = False,
) -> list[Element]:
    """Render several roots; see ``render`` for joining asynchronous callbacks."""
    return Renderer().render_components(nodes, on_action, override_props, disabled)
