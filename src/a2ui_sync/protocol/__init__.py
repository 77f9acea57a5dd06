"""
A2UI Protocol
Inbound message models and the processor that applies them
"""

from .messages import (
    A2UIMessage,
    BeginRendering,
    DataModelUpdate,
    DeleteSurface,
    SurfaceUpdate,
    validate_message,
)
from .processor import MessageProcessor

__all__ = [
    "A2UIMessage",
    "BeginRendering",
    "DataModelUpdate",
    "DeleteSurface",
    "MessageProcessor",
    "SurfaceUpdate",
    "validate_message",
]
