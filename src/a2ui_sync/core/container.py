"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..actions.dispatcher import ActionDispatcher, ActionHandler
from ..binding.interpolation import TemplateCompiler
from ..protocol.processor import MessageProcessor
from ..state.data_model import DataModelStore
from ..state.dependencies import DependencyIndex
from ..state.surfaces import SurfaceRegistry
from .config import Settings, get_settings


class EngineModule(Module):
    """Engine dependencies; one instance of each per injector."""

    def __init__(
        self,
        settings: Settings | None = None,
        on_action: ActionHandler | None = None,
    ) -> None:
        self.settings = settings
        self.on_action = on_action

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide explicit settings, falling back to the environment."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_data_model_store(self) -> DataModelStore:
        return DataModelStore()

    @singleton
    @provider
    def provide_surface_registry(self) -> SurfaceRegistry:
        return SurfaceRegistry()

    @singleton
    @provider
    def provide_dependency_index(self, store: DataModelStore) -> DependencyIndex:
        """Provide invalidation index subscribed to data model writes."""
        index = DependencyIndex()
        store.add_listener(index.on_change)
        return index

    @singleton
    @provider
    def provide_template_compiler(self, settings: Settings) -> TemplateCompiler:
        return TemplateCompiler(
            max_size=settings.template_cache_size,
            ttl_seconds=settings.template_cache_ttl,
        )

    @singleton
    @provider
    def provide_action_dispatcher(self, store: DataModelStore, settings: Settings) -> ActionDispatcher:
        return ActionDispatcher(
            store,
            on_action=self.on_action,
            warn_on_missing_handler=settings.warn_on_missing_handler,
        )

    @singleton
    @provider
    def provide_message_processor(
        self,
        registry: SurfaceRegistry,
        store: DataModelStore,
        dependencies: DependencyIndex,
        settings: Settings,
    ) -> MessageProcessor:
        return MessageProcessor(registry, store, dependencies, settings)


def create_container(
    settings: Settings | None = None,
    on_action: ActionHandler | None = None,
) -> Injector:
    """Create configured injector."""
    return Injector([EngineModule(settings, on_action)])
