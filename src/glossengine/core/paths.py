"""Dotted-path lookup into nested mappings.

Resolves keys such as ``"user.notifications"`` or ``"menu.items.0.label"``
against a tree of mappings and sequences. Absence is a normal result: a
missing segment, an out-of-range index, or a leaf in the middle of the path
all yield None instead of raising.

Thread Safety:
    Pure function with no shared state.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from glossengine.constants import KEY_SEPARATOR

__all__ = ["resolve_path"]


def _child(node: Any, segment: str) -> tuple[bool, Any]:
    """Return (found, child) for one traversal step."""
    if isinstance(node, Mapping):
        if segment in node:
            return True, node[segment]
        return False, None
    # Strings are sequences too, but never containers of translations
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if segment.isdecimal() and segment.isascii() and int(segment) < len(node):
            return True, node[int(segment)]
    return False, None


def resolve_path(root: Any, path: str, separator: str = KEY_SEPARATOR) -> Any | None:
    """Resolve a separated path into a nested value.

    Args:
        root: Mapping (or sequence) to descend into
        path: Path made of segments joined by ``separator``
        separator: Segment separator (default: ".")

    Returns:
        The value at the path, or None if any segment is missing

    Examples:
        >>> tree = {"a": {"b": [{"c": 42}]}}
        >>> resolve_path(tree, "a.b.0.c")
        42
        >>> resolve_path(tree, "a.x") is None
        True
        >>> resolve_path(tree, "a.b.0.c.d") is None
        True
    """
    node = root
    for segment in path.split(separator):
        found, node = _child(node, segment)
        if not found:
            return None
    return node
