"""
Renderer package.
Component registry, recursive renderer, and action dispatch.
"""

from .models import ActionPayload, ComponentCategory, ComponentMetadata, UIAction, UIComponent
from .elements import Element, el
from .context import WidgetContext
from .state import StateArena
from .registry import (
    ComponentRegistry,
    DuplicateComponentError,
    UnknownComponentError,
    build_registry,
    get_registry,
)
from .dispatch import ActionDispatcher, collect_form_data
from .renderer import RenderFailure, Renderer, render, render_components
from .loader import check_ui_description, load_ui_description, parse_ui_description

__all__ = [
    # Models
    "ActionPayload",
    "ComponentCategory",
    "ComponentMetadata",
    "UIAction",
    "UIComponent",
    # Output
    "Element",
    "el",
    "WidgetContext",
    "StateArena",
    # Registry
    "ComponentRegistry",
    "DuplicateComponentError",
    "UnknownComponentError",
    "build_registry",
    "get_registry",
    # Rendering
    "ActionDispatcher",
    "collect_form_data",
    "RenderFailure",
    "Renderer",
    "render",
    "render_components",
    # Loading
    "check_ui_description",
    "load_ui_description",
    "parse_ui_description",
]
