"""
Scoped access to the active provider.

Renderer code running inside ``with provider:`` reaches the engine through
these functions instead of threading the provider through every call.
Outside such a block they fail fast with ProviderError: that is a wiring
defect, not a runtime condition to recover from.
"""

from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Callable, Mapping

from ..actions.dispatcher import ActionDispatcher
from ..models import Action, ActionPayload, Surface
from ..state.data_model import DataModelStore
from ..state.surfaces import SurfaceRegistry

if TYPE_CHECKING:
    from ..binding.bindings import FormBinding, StringBinding
    from .provider import A2UIProvider, SourceLike

_active_provider: ContextVar["A2UIProvider | None"] = ContextVar("a2ui_provider", default=None)


class ProviderError(RuntimeError):
    """Engine API used outside an active A2UIProvider."""

    pass


def _require(hook: str) -> "A2UIProvider":
    provider = _active_provider.get()
    if provider is None:
        raise ProviderError(f"{hook} must be used within an A2UIProvider")
    return provider


def use_provider() -> "A2UIProvider":
    return _require("use_provider")


def use_surface_context() -> SurfaceRegistry:
    return _require("use_surface_context").surfaces


def use_data_model_context() -> DataModelStore:
    return _require("use_data_model_context").data_models


def use_action_context() -> ActionDispatcher:
    return _require("use_action_context").actions


def use_surface(surface_id: str) -> Surface | None:
    """Surface by id, or None if it does not exist."""
    return _require("use_surface").surfaces.get_surface(surface_id)


def use_dispatch_action() -> Callable[[str, str, Action | Mapping[str, Any]], ActionPayload]:
    return _require("use_dispatch_action").actions.dispatch_action


def use_bound_dispatch_action(
    surface_id: str, component_id: str
) -> Callable[[Action | Mapping[str, Any]], ActionPayload]:
    """Dispatch function for one component; useful for components with several actions."""
    return _require("use_bound_dispatch_action").actions.bind(surface_id, component_id)


def use_string_binding(
    surface_id: str,
    source: "SourceLike",
    default: str = "",
    base_path: str | None = None,
) -> "StringBinding":
    return _require("use_string_binding").string_binding(surface_id, source, default, base_path)


def use_form_binding(
    surface_id: str,
    source: "SourceLike",
    default: Any,
    base_path: str | None = None,
) -> "FormBinding":
    return _require("use_form_binding").form_binding(surface_id, source, default, base_path)
