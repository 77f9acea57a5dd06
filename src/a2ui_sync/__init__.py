"""
a2ui-sync
Reactive data model, binding and action engine for A2UI surfaces.
"""

from .models import (
    Action,
    ActionPayload,
    BoundValue,
    ComponentNode,
    ContextEntry,
    DataEntry,
    LiteralValue,
    Surface,
    ValueSource,
    value_source_from_wire,
)
from .binding import (
    get_interpolation_dependencies,
    get_value_by_path,
    has_interpolation,
    interpolate,
    parse_interpolation,
    resolve_path,
    set_value_by_path,
)
from .runtime import A2UIProvider, ProviderError

__version__ = "0.8.0"

__all__ = [
    "A2UIProvider",
    "Action",
    "ActionPayload",
    "BoundValue",
    "ComponentNode",
    "ContextEntry",
    "DataEntry",
    "LiteralValue",
    "ProviderError",
    "Surface",
    "ValueSource",
    "get_interpolation_dependencies",
    "get_value_by_path",
    "has_interpolation",
    "interpolate",
    "parse_interpolation",
    "resolve_path",
    "set_value_by_path",
    "value_source_from_wire",
]
