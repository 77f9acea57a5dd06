"""
Surface Registry
Component map, root pointer and styles per surface.
"""

import threading
from typing import Any, Iterable, Iterator, Mapping

from ..core import get_logger
from ..models import ComponentNode, Surface
from ..monitoring import metrics_collector

logger = get_logger(__name__)


class SurfaceRegistry:
    """
    Owns every surface's component tree.

    Components are upserted, never implicitly removed. Returned surfaces are
    copies; the registry's own state changes only through its methods.
    """

    def __init__(self) -> None:
        self._surfaces: dict[str, Surface] = {}
        self._lock = threading.RLock()

    def _get_or_create(self, surface_id: str) -> Surface:
        surface = self._surfaces.get(surface_id)
        if surface is None:
            surface = Surface(surface_id=surface_id)
            self._surfaces[surface_id] = surface
            metrics_collector.surface_created()
            logger.info("surface_created", surface_id=surface_id)
        return surface

    def init_surface(
        self,
        surface_id: str,
        root: str,
        styles: Mapping[str, str] | None = None,
    ) -> None:
        """
        Create the surface if needed and point it at root.

        On an existing surface the root is overwritten, styles are merged key
        by key and components are kept.
        """
        with self._lock:
            surface = self._get_or_create(surface_id)
            surface.root = root
            if styles:
                surface.styles.update(styles)

    def update_surface(
        self,
        surface_id: str,
        components: Iterable[ComponentNode | Mapping[str, Any]],
    ) -> None:
        """Upsert components by id; all other entries stay as they are."""
        nodes = [
            node if isinstance(node, ComponentNode) else ComponentNode.model_validate(node)
            for node in components
        ]
        with self._lock:
            surface = self._get_or_create(surface_id)
            for node in nodes:
                surface.components[node.id] = node

        logger.debug("surface_updated", surface_id=surface_id, components=len(nodes))

    def delete_surface(self, surface_id: str) -> bool:
        """Remove a surface. Returns False if it did not exist."""
        with self._lock:
            removed = self._surfaces.pop(surface_id, None) is not None
        if removed:
            metrics_collector.surface_deleted()
            logger.info("surface_deleted", surface_id=surface_id)
        return removed

    def get_surface(self, surface_id: str) -> Surface | None:
        with self._lock:
            surface = self._surfaces.get(surface_id)
            return surface.model_copy(deep=True) if surface is not None else None

    def get_component(self, surface_id: str, component_id: str) -> ComponentNode | None:
        """Component by id; unknown surfaces and dangling ids give None."""
        with self._lock:
            surface = self._surfaces.get(surface_id)
            if surface is None:
                return None
            return surface.components.get(component_id)

    def renderable(self) -> Iterator[Surface]:
        """Surfaces that have a root, in creation order."""
        with self._lock:
            surfaces = [s.model_copy(deep=True) for s in self._surfaces.values() if s.root]
        yield from surfaces

    @property
    def surface_ids(self) -> list[str]:
        with self._lock:
            return list(self._surfaces)

    def __contains__(self, surface_id: str) -> bool:
        with self._lock:
            return surface_id in self._surfaces

    def __len__(self) -> int:
        return len(self._surfaces)
