"""
Read and two-way bindings used by renderers.

A renderer creates one binding per bound property. Bindings hold no data of
their own (except FormBinding over a literal); every read goes back to the
store, and every FormBinding write is visible to every other reader of the
same path immediately.
"""

from typing import Any, Generic, TypeVar

from ..models import BoundValue, LiteralValue
from ..state.data_model import DataModelStore
from .interpolation import TemplateCompiler, stringify
from .paths import resolve_path

T = TypeVar("T")


class StringBinding:
    """Text for a property: literals (with ``${...}`` templates) or a bound path."""

    def __init__(
        self,
        store: DataModelStore,
        compiler: TemplateCompiler,
        surface_id: str,
        source: LiteralValue | BoundValue | None,
        default: str = "",
        base_path: str | None = None,
    ) -> None:
        self.store = store
        self.compiler = compiler
        self.surface_id = surface_id
        self.source = source
        self.default = default
        self.base_path = base_path

    @property
    def value(self) -> str:
        source = self.source
        if source is None:
            return self.default

        if isinstance(source, LiteralValue):
            if source.value is None:
                return self.default
            if isinstance(source.value, str):
                template = self.compiler.compile(source.value)
                if template.has_expressions:
                    model = self.store.get_data_model(self.surface_id) or {}
                    return template.render(model, self.base_path)
                return source.value
            return stringify(source.value)

        if isinstance(source, BoundValue):
            value = self.store.get_data_value(
                self.surface_id, resolve_path(source.path, self.base_path)
            )
            return self.default if value is None else stringify(value)

        raise TypeError(f"Unknown value source: {type(source).__name__}")

    @property
    def dependencies(self) -> list[str]:
        """Absolute paths this binding reads."""
        source = self.source
        if isinstance(source, BoundValue):
            return [resolve_path(source.path, self.base_path)]
        if isinstance(source, LiteralValue) and isinstance(source.value, str):
            return self.compiler.compile(source.value).dependencies(self.base_path)
        return []

    def __str__(self) -> str:
        return self.value


class FormBinding(Generic[T]):
    """
    Two-way binding for interactive components (text fields, checkboxes).

    Bound sources read and write the data model path. Literal sources start
    from the literal and keep edits locally.
    """

    def __init__(
        self,
        store: DataModelStore,
        surface_id: str,
        source: LiteralValue | BoundValue | None,
        default: T,
        base_path: str | None = None,
    ) -> None:
        self.store = store
        self.surface_id = surface_id
        self.source = source
        self.default = default
        self.path = (
            resolve_path(source.path, base_path) if isinstance(source, BoundValue) else None
        )
        self._local: Any = source.value if isinstance(source, LiteralValue) else None

    def get(self) -> T:
        if self.path is not None:
            value = self.store.get_data_value(self.surface_id, self.path)
        else:
            value = self._local
        return self.default if value is None else value

    def set(self, value: T) -> None:
        if self.path is not None:
            self.store.set_data_value(self.surface_id, self.path, value)
        else:
            self._local = value

    @property
    def dependencies(self) -> list[str]:
        return [self.path] if self.path is not None else []
