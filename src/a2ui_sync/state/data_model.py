"""
Data Model Store
One JSON-like tree per surface, read and written by slash-delimited path.
"""

import copy
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator

from ..binding.paths import get_value_by_path, resolve_path, set_value_by_path, split_path
from ..core import ValidationError, get_logger
from ..models import DataEntry
from ..monitoring import metrics_collector

logger = get_logger(__name__)

ChangeListener = Callable[[str, list[str]], None]
"""Called with (surface_id, changed absolute paths) after every write."""


def _detach(value: Any) -> Any:
    return copy.deepcopy(value) if isinstance(value, (dict, list)) else value


class DataModelStore:
    """
    Owns every surface's data model.

    All access goes through one re-entrant lock, so a reader never sees a
    half-applied write. Values are copied on the way in and on the way out;
    no caller (and no other surface) ever holds a reference into a tree.
    """

    def __init__(self) -> None:
        self._models: dict[str, dict[str, Any]] = {}
        self._lock = threading.RLock()
        self._listeners: list[ChangeListener] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def ensure_surface(self, surface_id: str) -> None:
        """Create an empty root for surface_id if it has none yet."""
        with self._lock:
            if surface_id not in self._models:
                self._models[surface_id] = {}
                logger.debug("data_model_created", surface_id=surface_id)

    def delete_surface(self, surface_id: str) -> bool:
        """Drop a surface's data model. Returns False if there was none."""
        with self._lock:
            return self._models.pop(surface_id, None) is not None

    def has_surface(self, surface_id: str) -> bool:
        with self._lock:
            return surface_id in self._models

    @property
    def surface_ids(self) -> list[str]:
        with self._lock:
            return list(self._models)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_data_value(self, surface_id: str, path: str) -> Any:
        """
        Value at path, or None for an unknown surface or path.

        Never creates state.
        """
        with self._lock:
            model = self._models.get(surface_id)
            if model is None:
                return None
            return _detach(get_value_by_path(model, resolve_path(path)))

    def get_data_model(self, surface_id: str) -> dict[str, Any] | None:
        """Snapshot of a surface's whole tree (a copy)."""
        with self._lock:
            model = self._models.get(surface_id)
            return copy.deepcopy(model) if model is not None else None

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        """Hold the store still for a multi-read consistent snapshot."""
        with self._lock:
            yield

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set_data_value(self, surface_id: str, path: str, value: Any) -> None:
        """
        Write one value, creating the surface root and intermediate objects.

        Raises:
            ValueError: Root write of a non-object, or unusable list index
        """
        absolute = resolve_path(path)
        with self._lock:
            model = self._models.setdefault(surface_id, {})
            self._models[surface_id] = set_value_by_path(model, absolute, _detach(value))

        metrics_collector.record_data_write("set")
        self._notify(surface_id, [absolute])

    def apply_data_model_update(
        self,
        surface_id: str,
        target_path: str | None,
        entries: Iterable[DataEntry],
    ) -> None:
        """
        Merge entries into the object at target_path (default: root).

        The target object is created if absent and never replaced; keys not
        named by an entry keep their values. The merge is all or nothing: if
        any entry cannot be written the model is left untouched.

        Raises:
            ValidationError: An entry key that addresses the target itself
            ValueError: An entry path with an unusable list index
        """
        target = resolve_path(target_path or "/")
        entries = list(entries)
        changed: list[str] = []

        for entry in entries:
            entry_path = resolve_path(entry.key.lstrip("/"), target)
            if entry_path == target:
                raise ValidationError(
                    f"dataModelUpdate entry key {entry.key!r} addresses the target {target} itself"
                )
            changed.append(entry_path)

        with self._lock:
            working = copy.deepcopy(self._models.get(surface_id, {}))
            if split_path(target) and not isinstance(get_value_by_path(working, target), dict):
                set_value_by_path(working, target, {})

            for entry, entry_path in zip(entries, changed):
                set_value_by_path(working, entry_path, entry.value)

            self._models[surface_id] = working

        metrics_collector.record_data_write("update", len(changed))
        logger.debug(
            "data_model_updated",
            surface_id=surface_id,
            path=target,
            keys=[entry.key for entry in entries],
        )
        if changed:
            self._notify(surface_id, changed)

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def add_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, surface_id: str, paths: list[str]) -> None:
        for listener in list(self._listeners):
            listener(surface_id, paths)
