"""
A2UI v0.8 inbound messages.

Each message is a JSON object with exactly one of these keys:

  beginRendering   -- set the root component (and styles) of a surface
  surfaceUpdate    -- upsert components into a surface's flat component map
  dataModelUpdate  -- merge key/value entries into a surface's data model
  deleteSurface    -- remove a surface and its data model
"""

from typing import Any, ClassVar, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from ..core.validate import ValidationResult
from ..models import ComponentNode, DataEntry


class ProtocolMessage(BaseModel):
    """Base for inbound messages."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message_type: ClassVar[str] = ""

    surface_id: str = Field(alias="surfaceId", min_length=1)


class BeginRendering(ProtocolMessage):
    message_type: ClassVar[str] = "beginRendering"

    root: str = Field(min_length=1)
    styles: dict[str, str] = Field(default_factory=dict)


class SurfaceUpdate(ProtocolMessage):
    message_type: ClassVar[str] = "surfaceUpdate"

    components: list[ComponentNode] = Field(default_factory=list)


class DataModelUpdate(ProtocolMessage):
    message_type: ClassVar[str] = "dataModelUpdate"

    path: str | None = None
    contents: list[DataEntry] = Field(default_factory=list)


class DeleteSurface(ProtocolMessage):
    message_type: ClassVar[str] = "deleteSurface"


A2UIMessage = Union[BeginRendering, SurfaceUpdate, DataModelUpdate, DeleteSurface]

MESSAGE_TYPES: dict[str, type[ProtocolMessage]] = {
    cls.message_type: cls
    for cls in (BeginRendering, SurfaceUpdate, DataModelUpdate, DeleteSurface)
}


def validate_message(raw: Any) -> Result[A2UIMessage, ValidationResult]:
    """
    Parse one inbound message (Result pattern).

    Args:
        raw: Decoded JSON object or an already-built message

    Returns:
        Success(message) or Failure(ValidationResult)
    """
    if isinstance(raw, ProtocolMessage):
        return Success(raw)

    if not isinstance(raw, Mapping):
        return Failure(ValidationResult("message must be a JSON object", value=type(raw).__name__))

    if "createSurface" in raw:
        return Failure(
            ValidationResult("createSurface (v0.9) is not supported, use beginRendering", field="createSurface")
        )

    kinds = [key for key in raw if key in MESSAGE_TYPES]
    if len(kinds) != 1:
        return Failure(
            ValidationResult(
                f"message must contain exactly one of {', '.join(MESSAGE_TYPES)}",
                value=sorted(raw),
            )
        )

    kind = kinds[0]
    try:
        return Success(MESSAGE_TYPES[kind].model_validate(raw[kind]))
    except PydanticValidationError as e:
        return Failure(ValidationResult(f"invalid {kind}: {e.error_count()} error(s): {e}", field=kind))


__all__ = [
    "A2UIMessage",
    "BeginRendering",
    "DataModelUpdate",
    "DeleteSurface",
    "MESSAGE_TYPES",
    "ProtocolMessage",
    "SurfaceUpdate",
    "validate_message",
]
