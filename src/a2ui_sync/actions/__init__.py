"""Action dispatch to the host."""

from .dispatcher import ActionDispatcher, ActionHandler

__all__ = ["ActionDispatcher", "ActionHandler"]
