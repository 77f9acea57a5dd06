"""Per-surface engine state."""

from .data_model import DataModelStore
from .dependencies import DependencyIndex
from .surfaces import SurfaceRegistry

__all__ = ["DataModelStore", "DependencyIndex", "SurfaceRegistry"]
