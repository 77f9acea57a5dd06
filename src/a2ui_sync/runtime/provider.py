"""
A2UIProvider - one engine instance.

Owns a Surface Registry, a Data Model Store, an invalidation index, a
template cache and an Action Dispatcher. Two providers share nothing.

    provider = A2UIProvider(on_action=handle_action, messages=initial_messages)
    with provider:
        render(provider)
"""

from contextvars import Token
from typing import Any, Hashable, Iterable, Mapping, Union

from ..actions.dispatcher import ActionDispatcher, ActionHandler
from ..binding.bindings import FormBinding, StringBinding
from ..binding.interpolation import TemplateCompiler
from ..core import Settings, create_container, get_settings
from ..models import (
    Action,
    ActionPayload,
    BoundValue,
    ComponentNode,
    DataEntry,
    LiteralValue,
    Surface,
    value_source_from_wire,
)
from ..protocol.messages import A2UIMessage
from ..protocol.processor import MessageProcessor
from ..state.data_model import DataModelStore
from ..state.dependencies import DependencyIndex
from ..state.surfaces import SurfaceRegistry
from .context import _active_provider


SourceLike = Union[LiteralValue, BoundValue, Mapping[str, Any], None]


class A2UIProvider:
    """Explicit state container for every surface of one host."""

    def __init__(
        self,
        on_action: ActionHandler | None = None,
        messages: Iterable[Any] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            on_action: Host callback receiving every ActionPayload
            messages: Protocol messages to apply immediately, in order
            settings: Engine settings (defaults to environment)
        """
        self.settings = settings or get_settings()

        container = create_container(self.settings, on_action)
        self.surfaces: SurfaceRegistry = container.get(SurfaceRegistry)
        self.data_models: DataModelStore = container.get(DataModelStore)
        self.dependencies: DependencyIndex = container.get(DependencyIndex)
        self.templates: TemplateCompiler = container.get(TemplateCompiler)
        self.actions: ActionDispatcher = container.get(ActionDispatcher)
        self.processor: MessageProcessor = container.get(MessageProcessor)

        self._tokens: list[Token] = []

        if messages is not None:
            self.process_messages(messages)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> "A2UIProvider":
        self._tokens.append(_active_provider.set(self))
        return self

    def __exit__(self, *args: Any) -> None:
        _active_provider.reset(self._tokens.pop())

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def process_message(self, message: Any) -> A2UIMessage | None:
        return self.processor.process(message)

    def process_messages(self, messages: Iterable[Any]) -> int:
        return self.processor.process_all(messages)

    def process_jsonl(self, text: str) -> int:
        return self.processor.process_jsonl(text)

    # ------------------------------------------------------------------
    # Surfaces
    # ------------------------------------------------------------------

    def init_surface(self, surface_id: str, root: str, styles: Mapping[str, str] | None = None) -> None:
        """Create or re-root a surface; its data model root is created empty."""
        self.surfaces.init_surface(surface_id, root, styles)
        self.data_models.ensure_surface(surface_id)

    def update_surface(
        self, surface_id: str, components: Iterable[ComponentNode | Mapping[str, Any]]
    ) -> None:
        self.surfaces.update_surface(surface_id, components)

    def get_surface(self, surface_id: str) -> Surface | None:
        return self.surfaces.get_surface(surface_id)

    def delete_surface(self, surface_id: str) -> None:
        self.surfaces.delete_surface(surface_id)
        self.data_models.delete_surface(surface_id)
        self.dependencies.clear_surface(surface_id)

    # ------------------------------------------------------------------
    # Data model
    # ------------------------------------------------------------------

    def get_data_value(self, surface_id: str, path: str) -> Any:
        return self.data_models.get_data_value(surface_id, path)

    def set_data_value(self, surface_id: str, path: str, value: Any) -> None:
        self.data_models.set_data_value(surface_id, path, value)

    def apply_data_model_update(
        self,
        surface_id: str,
        target_path: str | None,
        entries: Iterable[DataEntry | Mapping[str, Any]],
    ) -> None:
        self.data_models.apply_data_model_update(
            surface_id,
            target_path,
            [e if isinstance(e, DataEntry) else DataEntry.model_validate(e) for e in entries],
        )

    def get_data_model(self, surface_id: str) -> dict[str, Any] | None:
        return self.data_models.get_data_model(surface_id)

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def interpolate(self, surface_id: str, template: str, base_path: str | None = None) -> str:
        """Render a template against the surface's current data model."""
        compiled = self.templates.compile(template)
        model = self.data_models.get_data_model(surface_id) if compiled.has_expressions else None
        return compiled.render(model or {}, base_path)

    def string_binding(
        self,
        surface_id: str,
        source: SourceLike,
        default: str = "",
        base_path: str | None = None,
    ) -> StringBinding:
        return StringBinding(
            self.data_models,
            self.templates,
            surface_id,
            None if source is None else value_source_from_wire(source),
            default=default,
            base_path=base_path,
        )

    def form_binding(
        self,
        surface_id: str,
        source: SourceLike,
        default: Any,
        base_path: str | None = None,
    ) -> FormBinding:
        return FormBinding(
            self.data_models,
            surface_id,
            None if source is None else value_source_from_wire(source),
            default,
            base_path=base_path,
        )

    def track(self, surface_id: str, key: Hashable, paths: Iterable[str]) -> None:
        """Register what a dependent (e.g. a component id) reads."""
        self.dependencies.register(surface_id, key, paths)

    def untrack(self, surface_id: str, key: Hashable) -> None:
        self.dependencies.unregister(surface_id, key)

    def pop_invalidated(self, surface_id: str) -> set[Hashable]:
        """Dependents needing re-evaluation since the last call."""
        return self.dependencies.pop_invalidated(surface_id)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    @property
    def on_action(self) -> ActionHandler | None:
        return self.actions.on_action

    @on_action.setter
    def on_action(self, handler: ActionHandler | None) -> None:
        """Replace the single host callback (None unregisters it)."""
        self.actions.on_action = handler

    def dispatch_action(
        self,
        surface_id: str,
        component_id: str,
        action: Action | Mapping[str, Any],
    ) -> ActionPayload:
        return self.actions.dispatch_action(surface_id, component_id, action)
