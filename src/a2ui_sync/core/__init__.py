"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    validate_json_size,
    validate_json_depth,
)
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import (
    decode_json,
    safe_json_dumps,
    canonical_json,
    JSONParseError,
)
from .hash import Algorithm, hash_string
from .cache import LRUCache, Stats


def create_container(settings: Settings | None = None, on_action=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings, on_action)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "validate_json_size",
    "validate_json_depth",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json",
    "safe_json_dumps",
    "canonical_json",
    "JSONParseError",
    # DI
    "create_container",
    # Hashing
    "Algorithm",
    "hash_string",
    # Caching
    "LRUCache",
    "Stats",
]
