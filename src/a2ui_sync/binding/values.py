"""Value-Source Resolver: literal vs. bound values."""

from typing import Any

from ..models import BoundValue, LiteralValue
from ..state.data_model import DataModelStore


class ValueResolver:
    """Resolves ValueSources against the current data model; nothing is cached."""

    def __init__(self, store: DataModelStore) -> None:
        self.store = store

    def resolve(self, surface_id: str, source: LiteralValue | BoundValue) -> Any:
        """
        Literal: the embedded value. Bound: the value at its path right now,
        None when the path is absent (callers pick their own default).
        """
        if isinstance(source, LiteralValue):
            return source.value
        if isinstance(source, BoundValue):
            return self.store.get_data_value(surface_id, source.path)
        raise TypeError(f"Unknown value source: {type(source).__name__}")
