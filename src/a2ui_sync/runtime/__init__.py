"""Provider lifecycle and scoped engine access."""

from .context import (
    ProviderError,
    use_action_context,
    use_bound_dispatch_action,
    use_data_model_context,
    use_dispatch_action,
    use_form_binding,
    use_provider,
    use_string_binding,
    use_surface,
    use_surface_context,
)
from .provider import A2UIProvider

__all__ = [
    "A2UIProvider",
    "ProviderError",
    "use_action_context",
    "use_bound_dispatch_action",
    "use_data_model_context",
    "use_dispatch_action",
    "use_form_binding",
    "use_provider",
    "use_string_binding",
    "use_surface",
    "use_surface_context",
]
