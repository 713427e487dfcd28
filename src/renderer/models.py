"""UI Description Models."""

from enum import Enum
from typing import Any, Callable, Literal, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from .context import WidgetContext
    from .elements import Element


WidgetRenderer = Callable[[dict[str, Any], "WidgetContext"], "Element"]


class ComponentCategory(str, Enum):
    """Fixed classification of registered components."""

    DISPLAY = "display"
    LAYOUT = "layout"
    INTERACTIVE = "interactive"
    INPUTS = "inputs"
    EMBED = "embed"


class UIAction(BaseModel):
    """Control declared on a node; invoking it dispatches `id`."""

    id: str = Field(..., min_length=1, description="Dispatch key")
    label: str = Field(..., min_length=1, description="Display text")
    primary: bool = Field(default=False)
    destructive: bool = Field(default=False)
    alignment: Literal["left", "center", "right"] | None = Field(default=None)


class UIComponent(BaseModel):
    """One node of a backend-supplied UI tree."""

    type: str = Field(..., min_length=1, description="Component type")
    props: dict[str, Any] = Field(default_factory=dict)
    children: list["UIComponent"] = Field(default_factory=list)
    actions: list[UIAction] = Field(default_factory=list)


class ComponentMetadata(BaseModel):
    """Registry entry."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    category: ComponentCategory
    description: str
    renderer: Callable[..., Any] = Field(repr=False)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Descriptions surface in diagnostics, so blank ones are rejected."""
        if not v.strip():
            raise ValueError("Component description cannot be empty")
        return v


class ActionPayload(BaseModel):
    """Payload handed to the action callback."""

    action: str
    data: dict[str, str | bool] = Field(default_factory=dict)


UIComponent.model_rebuild()
