"""
Component Registry
Single source of truth mapping component-type names to leaf renderers.
"""

from collections.abc import Iterable, Iterator
from functools import lru_cache
from types import MappingProxyType

from core import get_logger
from .models import ComponentCategory, ComponentMetadata, WidgetRenderer

logger = get_logger(__name__)


class UnknownComponentError(LookupError):
    """Raised by ``validate_component`` for names that are not registered."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f'Component "{name}" is not registered. '
            f"Available components: {', '.join(self.available)}"
        )


class DuplicateComponentError(ValueError):
    """Two entries claimed the same component name."""


class ComponentRegistry:
    """
    Immutable lookup table from component type to renderer and metadata.
    Built once from a fixed set of entries; read-only afterwards.
    """

    def __init__(self, entries: Iterable[ComponentMetadata]) -> None:
        components: dict[str, ComponentMetadata] = {}
        for metadata in entries:
            if metadata.name in components:
                raise DuplicateComponentError(
                    f'Component "{metadata.name}" is registered more than once'
                )
            components[metadata.name] = metadata

        self._components = MappingProxyType(components)
        logger.debug(
            "registry_initialized",
            components=len(components),
            categories=self.get_category_stats(),
        )

    def get_component(self, name: str) -> WidgetRenderer | None:
        """Get the renderer for ``name``; None on miss."""
        metadata = self._components.get(name)
        return metadata.renderer if metadata else None

    def get_component_metadata(self, name: str) -> ComponentMetadata | None:
        return self._components.get(name)

    def has_component(self, name: str) -> bool:
        """Case-sensitive exact match."""
        return name in self._components

    def get_all_component_names(self) -> list[str]:
        """Names in registration order."""
        return list(self._components)

    def get_all_components(self) -> list[ComponentMetadata]:
        return list(self._components.values())

    def get_components_by_category(self, category: ComponentCategory | str) -> list[ComponentMetadata]:
        return [meta for meta in self._components.values() if meta.category == category]

    def validate_component(self, name: str) -> ComponentMetadata:
        """
        Look up ``name`` for callers doing deliberate validation.

        Raises:
            UnknownComponentError: listing every registered name
        """
        metadata = self._components.get(name)
        if metadata is None:
            raise UnknownComponentError(name, self._components)
        return metadata

    def get_component_count(self) -> int:
        return len(self._components)

    def get_category_stats(self) -> dict[str, int]:
        """Count per category; every category is present, even at zero."""
        stats = {category.value: 0 for category in ComponentCategory}
        for metadata in self._components.values():
            stats[metadata.category.value] += 1
        return stats

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)


def build_registry() -> ComponentRegistry:
    """Fresh registry over the built-in widgets."""
    from widgets import builtin_components

    return ComponentRegistry(builtin_components())


@lru_cache
def get_registry() -> ComponentRegistry:
    """Process-wide registry, built on first use."""
    return build_registry()


__all__ = [
    "ComponentRegistry",
    "DuplicateComponentError",
    "UnknownComponentError",
    "build_registry",
    "get_registry",
]
