"""Message Processor - applies inbound protocol messages to the engine state."""

import time
from typing import Any, Iterable

from returns.pipeline import is_successful

from ..core import (
    JSONParseError,
    LogContext,
    Settings,
    ValidationError,
    ValidationResult,
    decode_json,
    get_logger,
    validate_json_depth,
    validate_json_size,
)
from ..monitoring import metrics_collector, trace_operation
from ..state.data_model import DataModelStore
from ..state.dependencies import DependencyIndex
from ..state.surfaces import SurfaceRegistry
from .messages import (
    A2UIMessage,
    BeginRendering,
    DataModelUpdate,
    DeleteSurface,
    SurfaceUpdate,
    validate_message,
)

logger = get_logger(__name__)


class MessageProcessor:
    """
    Routes beginRendering / surfaceUpdate / dataModelUpdate / deleteSurface
    to the Surface Registry and Data Model Store, in arrival order.

    Invalid messages are logged and skipped, or raised as ValidationError
    when ``settings.strict_messages`` is set.
    """

    def __init__(
        self,
        registry: SurfaceRegistry,
        store: DataModelStore,
        dependencies: DependencyIndex,
        settings: Settings,
    ) -> None:
        self.registry = registry
        self.store = store
        self.dependencies = dependencies
        self.settings = settings

    def process(self, raw: Any) -> A2UIMessage | None:
        """
        Validate and apply one message.

        Returns:
            The applied message, or None if it was rejected
        """
        if isinstance(raw, dict):
            try:
                validate_json_depth(raw, self.settings.max_json_depth)
            except ValidationError as e:
                return self._reject(ValidationResult(str(e)))

        result = validate_message(raw)
        if not is_successful(result):
            return self._reject(result.failure())

        message = result.unwrap()
        start = time.perf_counter()
        with LogContext(surface_id=message.surface_id):
            with trace_operation("process_message", type=message.message_type):
                try:
                    self._apply(message)
                except (ValidationError, ValueError) as e:
                    metrics_collector.record_error(type(e).__name__, "processor")
                    return self._reject(
                        ValidationResult(f"{message.message_type} not applied: {e}", field=message.message_type)
                    )
                except Exception as e:
                    metrics_collector.record_error(type(e).__name__, "processor")
                    raise
        metrics_collector.record_message(message.message_type, "applied", time.perf_counter() - start)
        return message

    def process_all(self, messages: Iterable[Any]) -> int:
        """Apply messages in order. Returns how many were applied."""
        return sum(1 for raw in messages if self.process(raw) is not None)

    def process_jsonl(self, text: str) -> int:
        """Apply newline-delimited JSON messages. Returns how many were applied."""
        applied = 0
        for number, line in enumerate(text.splitlines(), 1):
            line = line.strip()
            if not line:
                continue
            try:
                validate_json_size(line, self.settings.max_message_size, name=f"Line {number}")
                raw = decode_json(line)
            except (ValidationError, JSONParseError) as e:
                self._reject(ValidationResult(f"Line {number}: {e}"))
                continue
            if self.process(raw) is not None:
                applied += 1
        return applied

    def _apply(self, message: A2UIMessage) -> None:
        surface_id = message.surface_id

        if isinstance(message, BeginRendering):
            self.registry.init_surface(surface_id, message.root, message.styles)
            self.store.ensure_surface(surface_id)
        elif isinstance(message, SurfaceUpdate):
            self.registry.update_surface(surface_id, message.components)
        elif isinstance(message, DataModelUpdate):
            self.store.apply_data_model_update(surface_id, message.path, message.contents)
        elif isinstance(message, DeleteSurface):
            self.registry.delete_surface(surface_id)
            self.store.delete_surface(surface_id)
            self.dependencies.clear_surface(surface_id)
        else:
            raise TypeError(f"Unhandled message type: {type(message).__name__}")

    def _reject(self, error: ValidationResult) -> None:
        metrics_collector.record_message("invalid", "rejected", 0.0)
        if self.settings.strict_messages:
            raise ValidationError(error.message)
        logger.warning("message_rejected", reason=error.message, field=error.field)
        return None
