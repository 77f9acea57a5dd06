"""Surface-scoped invalidation index: which bound templates read which paths."""

import threading
from collections import defaultdict
from typing import Hashable, Iterable

from ..binding.paths import is_related, resolve_path


class DependencyIndex:
    """
    Maps dependents (any hashable key, e.g. a component id) to the absolute
    paths they read, per surface.

    Writes mark every related dependent dirty; the renderer collects them
    with pop_invalidated(). A dependent is related to a changed path when its
    own path is equal to it, above it or below it.
    """

    def __init__(self) -> None:
        self._paths: dict[str, dict[Hashable, tuple[str, ...]]] = defaultdict(dict)
        self._dirty: dict[str, set[Hashable]] = defaultdict(set)
        self._lock = threading.Lock()

    def register(self, surface_id: str, key: Hashable, paths: Iterable[str]) -> None:
        """Record (or replace) the paths key depends on."""
        resolved = tuple(dict.fromkeys(resolve_path(path) for path in paths))
        with self._lock:
            self._paths[surface_id][key] = resolved

    def unregister(self, surface_id: str, key: Hashable) -> None:
        with self._lock:
            self._paths.get(surface_id, {}).pop(key, None)
            self._dirty.get(surface_id, set()).discard(key)

    def dependencies(self, surface_id: str, key: Hashable) -> tuple[str, ...]:
        with self._lock:
            return self._paths.get(surface_id, {}).get(key, ())

    def affected(self, surface_id: str, changed_path: str) -> set[Hashable]:
        """Dependents whose output can change when changed_path is written."""
        with self._lock:
            entries = list(self._paths.get(surface_id, {}).items())
        return {
            key
            for key, paths in entries
            if any(is_related(path, changed_path) for path in paths)
        }

    def on_change(self, surface_id: str, changed_paths: list[str]) -> None:
        """DataModelStore listener: mark related dependents dirty."""
        marked: set[Hashable] = set()
        for path in changed_paths:
            marked |= self.affected(surface_id, path)
        if marked:
            with self._lock:
                self._dirty[surface_id] |= marked

    def pop_invalidated(self, surface_id: str) -> set[Hashable]:
        """Dirty dependents of a surface; clears the set."""
        with self._lock:
            return self._dirty.pop(surface_id, set())

    def clear_surface(self, surface_id: str) -> None:
        with self._lock:
            self._paths.pop(surface_id, None)
            self._dirty.pop(surface_id, None)
