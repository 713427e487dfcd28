"""Node-local ephemeral UI state.

State such as "which accordion sections are open" must survive re-renders of
the same logical node even though the description is deserialized fresh for
every message, so it is keyed by the node's position in the tree rather than
by object identity.
"""

from typing import Any

NodePath = tuple[int | str, ...]
StateKey = tuple[NodePath, str]


def format_path(path: NodePath) -> str:
    """Dot-joined path used in ``data-path`` attributes and logs."""
    return ".".join(str(part) for part in path)


class StateArena:
    """Per-renderer store of node-local state, keyed by (path, type)."""

    def __init__(self) -> None:
        self._slots: dict[StateKey, dict[str, Any]] = {}

    def slot(self, path: NodePath, component_type: str) -> dict[str, Any]:
        """Mutable state mapping owned by the node at ``path``.

        The component type is part of the key so a different component
        appearing at the same position starts from a clean slate.
        """
        return self._slots.setdefault((tuple(path), component_type), {})

    def get(self, path: NodePath, component_type: str) -> dict[str, Any] | None:
        return self._slots.get((tuple(path), component_type))

    def clear(self) -> None:
        self._slots.clear()

    def __len__(self) -> int:
        return len(self._slots)
