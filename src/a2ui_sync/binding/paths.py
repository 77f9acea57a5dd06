"""Slash-delimited path resolution over JSON-like trees.

Paths look like ``/user/name`` (absolute) or ``name`` / ``./name`` (relative
to a base path). Arrays are indexed by decimal segments: ``/items/0/title``.
Lookups never raise; a missing node reads as ``None``.
"""

import re
from typing import Any

_SEPARATORS = re.compile(r"/{2,}")


def resolve_path(path: str, base_path: str | None = None) -> str:
    """
    Resolve a path to absolute form.

    Examples:
        >>> resolve_path("/user/name", "/other")
        '/user/name'
        >>> resolve_path("name", "/user")
        '/user/name'
        >>> resolve_path("./name", "/user")
        '/user/name'
        >>> resolve_path("count")
        '/count'
    """
    if path.startswith("/"):
        return path

    if path == ".":
        path = ""
    elif path.startswith("./"):
        path = path[2:]

    joined = _SEPARATORS.sub("/", f"/{base_path or ''}/{path}")
    if len(joined) > 1:
        joined = joined.rstrip("/")
    return joined


def split_path(path: str) -> list[str]:
    """Path segments, ignoring empty ones (leading, trailing or doubled '/')."""
    return [segment for segment in path.split("/") if segment]


def _list_index(segment: str) -> int | None:
    return int(segment) if segment.isdigit() else None


def get_value_by_path(tree: Any, path: str) -> Any:
    """Return the node at path, or None as soon as any segment is missing."""
    current = tree
    for segment in split_path(path):
        if isinstance(current, dict):
            if segment not in current:
                return None
            current = current[segment]
        elif isinstance(current, list):
            index = _list_index(segment)
            if index is None or index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def set_value_by_path(tree: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """
    Assign value at path in place, creating empty objects for missing
    intermediate segments. Non-container intermediates are replaced. The
    tree is left untouched when the write fails.

    Returns:
        The tree (a new one only when path addresses the root)

    Raises:
        ValueError: Root assignment of a non-object, or an unusable list index
    """
    segments = split_path(path)
    if not segments:
        if not isinstance(value, dict):
            raise ValueError("data model root must be an object")
        return value

    _check_assignable(tree, segments)
    current: Any = tree
    for segment in segments[:-1]:
        child = _child(current, segment)
        if not isinstance(child, (dict, list)):
            child = {}
            _assign(current, segment, child)
        current = child

    _assign(current, segments[-1], value)
    return tree


def _check_assignable(tree: Any, segments: list[str]) -> None:
    """Raise the ValueError _assign would raise, before anything is created."""
    current = tree
    for segment in segments:
        if isinstance(current, dict):
            current = current.get(segment)
        elif isinstance(current, list):
            index = _list_index(segment)
            if index is None:
                raise ValueError(f"'{segment}' is not a list index")
            if index > len(current):
                raise ValueError(f"list index {index} out of range (length {len(current)})")
            current = current[index] if index < len(current) else None
        else:
            # everything below is created fresh as objects
            return


def _child(container: dict[str, Any] | list[Any], segment: str) -> Any:
    if isinstance(container, dict):
        return container.get(segment)
    index = _list_index(segment)
    if index is None or index >= len(container):
        return None
    return container[index]


def _assign(container: dict[str, Any] | list[Any], segment: str, value: Any) -> None:
    if isinstance(container, dict):
        container[segment] = value
        return

    index = _list_index(segment)
    if index is None:
        raise ValueError(f"'{segment}' is not a list index")
    if index < len(container):
        container[index] = value
    elif index == len(container):
        container.append(value)
    else:
        raise ValueError(f"list index {index} out of range (length {len(container)})")


def is_related(dependency: str, changed: str) -> bool:
    """True when a change at ``changed`` can alter what ``dependency`` reads."""
    dep = split_path(dependency)
    chg = split_path(changed)
    shared = min(len(dep), len(chg))
    return dep[:shared] == chg[:shared]
