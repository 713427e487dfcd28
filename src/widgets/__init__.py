"""
Built-in widgets.
Leaf renderers grouped by category, in registration order.
"""

from renderer.models import ComponentMetadata
from .display import display_components
from .layout import layout_components
from .interactive import interactive_components
from .inputs import input_components
from .embed import embed_components


def builtin_components() -> list[ComponentMetadata]:
    """Every built-in entry: display, layout, interactive, inputs, embed."""
    return [
        *display_components(),
        *layout_components(),
        *interactive_components(),
        *input_components(),
        *embed_components(),
    ]


__all__ = [
    "builtin_components",
    "display_components",
    "layout_components",
    "interactive_components",
    "input_components",
    "embed_components",
]
