"""Engine Data Models."""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .core.validate import ValidationError

Scalar = Union[str, int, float, bool, None]

_LITERAL_KEYS = ("literalString", "literalNumber", "literalBoolean")


class LiteralValue(BaseModel):
    """A value embedded directly in a component or action definition."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: Scalar = None


class BoundValue(BaseModel):
    """A reference to a data model path, resolved at read time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bound"] = "bound"
    path: str


ValueSource = Annotated[Union[LiteralValue, BoundValue], Field(discriminator="kind")]

_value_source_adapter: TypeAdapter[LiteralValue | BoundValue] = TypeAdapter(ValueSource)


def _coerce_value_source(obj: Any) -> LiteralValue | BoundValue:
    if isinstance(obj, (LiteralValue, BoundValue)):
        return obj
    if not isinstance(obj, Mapping):
        raise ValueError(f"value source must be an object, got {type(obj).__name__}")
    if "kind" in obj:
        return _value_source_adapter.validate_python(dict(obj))

    # A path wins over a literal sitting next to it
    path = obj.get("path")
    if path is not None:
        if not isinstance(path, str):
            raise ValueError("value source 'path' must be a string")
        return BoundValue(path=path)

    for key in _LITERAL_KEYS:
        if key in obj:
            return LiteralValue(value=obj[key])

    raise ValueError(f"value source needs 'path' or one of {', '.join(_LITERAL_KEYS)}")


def value_source_from_wire(obj: Any) -> LiteralValue | BoundValue:
    """
    Build a ValueSource from its wire shape.

    Accepts ``{"path": ...}``, ``{"literalString": ...}``, ``{"literalNumber": ...}``,
    ``{"literalBoolean": ...}`` or an already-built variant.

    Raises:
        ValidationError: If obj is not a recognizable value source
    """
    try:
        return _coerce_value_source(obj)
    except ValueError as e:
        raise ValidationError(str(e)) from e


class ContextEntry(BaseModel):
    """One key of an action's context."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: ValueSource

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v: Any) -> LiteralValue | BoundValue:
        return _coerce_value_source(v)


class Action(BaseModel):
    """A named event; its context is resolved fresh at dispatch time."""

    model_config = ConfigDict(frozen=True)

    name: str
    context: list[ContextEntry] = Field(default_factory=list)

    @field_validator("context", mode="before")
    @classmethod
    def default_context(cls, v: Any) -> Any:
        return [] if v is None else v


class ActionPayload(BaseModel):
    """Resolved action handed to the host callback."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    surface_id: str = Field(alias="surfaceId")
    name: str
    context: dict[str, Any] = Field(default_factory=dict)
    source_component_id: str = Field(alias="sourceComponentId")

    def to_wire(self) -> dict[str, Any]:
        """Export with protocol (camelCase) keys."""
        return self.model_dump(by_alias=True)


class DataEntry(BaseModel):
    """One ``{key, value*}`` entry of a dataModelUpdate."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str = Field(min_length=1)
    value_string: str | None = Field(default=None, alias="valueString")
    value_number: int | float | None = Field(default=None, alias="valueNumber")
    value_boolean: bool | None = Field(default=None, alias="valueBoolean")
    value_map: list["DataEntry"] | None = Field(default=None, alias="valueMap")

    @property
    def kind(self) -> str | None:
        """Which value field is set, or None for an entry without a value."""
        if self.value_string is not None:
            return "string"
        if self.value_number is not None:
            return "number"
        if self.value_boolean is not None:
            return "boolean"
        if self.value_map is not None:
            return "map"
        return None

    @property
    def value(self) -> Any:
        """Materialized value; valueMap becomes an object."""
        kind = self.kind
        if kind == "string":
            return self.value_string
        if kind == "number":
            return self.value_number
        if kind == "boolean":
            return self.value_boolean
        if kind == "map":
            return {entry.key: entry.value for entry in self.value_map or []}
        return None

    @classmethod
    def of(cls, key: str, value: Any) -> "DataEntry":
        """Build an entry from a plain Python value."""
        if isinstance(value, bool):
            return cls(key=key, value_boolean=value)
        if isinstance(value, (int, float)):
            return cls(key=key, value_number=value)
        if isinstance(value, str):
            return cls(key=key, value_string=value)
        if isinstance(value, Mapping):
            return cls(key=key, value_map=[cls.of(str(k), v) for k, v in value.items()])
        if value is None:
            return cls(key=key)
        raise TypeError(f"Unsupported data entry value: {type(value).__name__}")


class ComponentNode(BaseModel):
    """One component in a surface's flat component map."""

    model_config = ConfigDict(frozen=True)

    id: str
    component: dict[str, Any] = Field(default_factory=dict)
    weight: float | None = None

    @property
    def component_type(self) -> str | None:
        """Component kind, e.g. ``Text`` for ``{"Text": {...}}``."""
        return next(iter(self.component), None)

    @property
    def properties(self) -> dict[str, Any]:
        kind = self.component_type
        if kind is None:
            return {}
        props = self.component[kind]
        return props if isinstance(props, dict) else {}


class Surface(BaseModel):
    """One independently addressable UI instance."""

    surface_id: str
    root: str | None = None
    components: dict[str, ComponentNode] = Field(default_factory=dict)
    styles: dict[str, str] = Field(default_factory=dict)


DataEntry.model_rebuild()
