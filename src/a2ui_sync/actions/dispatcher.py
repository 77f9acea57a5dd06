"""
Action Dispatcher
Resolves an action's context against the data model and hands the payload
to the host.
"""

import time
from typing import Any, Callable, Mapping

from ..binding.values import ValueResolver
from ..core import get_logger
from ..models import Action, ActionPayload
from ..monitoring import metrics_collector
from ..state.data_model import DataModelStore

logger = get_logger(__name__)

ActionHandler = Callable[[ActionPayload], None]
"""Host callback; its return value is ignored."""


class ActionDispatcher:
    """
    Builds one ActionPayload per dispatch and delivers it synchronously.

    At most one handler is registered per dispatcher. Without a handler a
    dispatch logs a warning and returns normally.
    """

    def __init__(
        self,
        store: DataModelStore,
        on_action: ActionHandler | None = None,
        warn_on_missing_handler: bool = True,
    ) -> None:
        self.store = store
        self.resolver = ValueResolver(store)
        self.on_action = on_action
        self.warn_on_missing_handler = warn_on_missing_handler

    def resolve_context(self, surface_id: str, action: Action) -> dict[str, Any]:
        """
        Context entries resolved in order under one store read lock; a
        repeated key keeps its last value.
        """
        resolved: dict[str, Any] = {}
        with self.store.read_lock():
            for entry in action.context:
                resolved[entry.key] = self.resolver.resolve(surface_id, entry.value)
        return resolved

    def dispatch_action(
        self,
        surface_id: str,
        component_id: str,
        action: Action | Mapping[str, Any],
    ) -> ActionPayload:
        """
        Resolve and deliver an action.

        Args:
            surface_id: Surface the interaction happened on
            component_id: Component that triggered it
            action: Action model or its wire form ``{"name", "context"?}``

        Returns:
            The payload that was (or would have been) delivered
        """
        if not isinstance(action, Action):
            action = Action.model_validate(action)

        start = time.perf_counter()
        payload = ActionPayload(
            surface_id=surface_id,
            name=action.name,
            context=self.resolve_context(surface_id, action),
            source_component_id=component_id,
        )

        handler = self.on_action
        if handler is None:
            if self.warn_on_missing_handler:
                logger.warning(
                    "action_handler_missing",
                    surface_id=surface_id,
                    component_id=component_id,
                    action=action.name,
                )
            metrics_collector.record_action("no_handler", time.perf_counter() - start)
            return payload

        try:
            handler(payload)
        except Exception as e:
            metrics_collector.record_error(type(e).__name__, "action_handler")
            raise
        metrics_collector.record_action("delivered", time.perf_counter() - start)
        logger.debug(
            "action_dispatched",
            surface_id=surface_id,
            component_id=component_id,
            action=action.name,
        )
        return payload

    def bind(self, surface_id: str, component_id: str) -> Callable[[Action | Mapping[str, Any]], ActionPayload]:
        """Dispatch function with surface and component fixed."""

        def dispatch(action: Action | Mapping[str, Any]) -> ActionPayload:
            return self.dispatch_action(surface_id, component_id, action)

        return dispatch
