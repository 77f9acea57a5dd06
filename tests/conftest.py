"""Pytest configuration and fixtures."""

import os
import pytest

from a2ui_sync.actions.dispatcher import ActionDispatcher
from a2ui_sync.binding.interpolation import TemplateCompiler
from a2ui_sync.core.config import Settings
from a2ui_sync.models import ActionPayload
from a2ui_sync.runtime import A2UIProvider
from a2ui_sync.state import DataModelStore, DependencyIndex, SurfaceRegistry


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['A2UI_LOG_LEVEL'] = 'DEBUG'
    os.environ['A2UI_STRICT_MESSAGES'] = 'false'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Explicit test settings (independent of the environment cache)."""
    return Settings(strict_messages=False, template_cache_size=32)


@pytest.fixture
def strict_settings():
    """Settings that raise on invalid messages."""
    return Settings(strict_messages=True)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def store():
    """Empty data model store."""
    return DataModelStore()


@pytest.fixture
def registry():
    """Empty surface registry."""
    return SurfaceRegistry()


@pytest.fixture
def dependency_index(store):
    """Invalidation index subscribed to the store."""
    index = DependencyIndex()
    store.add_listener(index.on_change)
    return index


@pytest.fixture
def compiler():
    """Small template compiler."""
    return TemplateCompiler(max_size=16)


@pytest.fixture
def received():
    """List collecting delivered action payloads."""
    return []


@pytest.fixture
def on_action(received):
    """Host callback appending to `received`."""

    def handler(payload: ActionPayload) -> None:
        received.append(payload)

    return handler


@pytest.fixture
def dispatcher(store, on_action):
    """Dispatcher with a registered handler."""
    return ActionDispatcher(store, on_action=on_action)


@pytest.fixture
def provider(settings, on_action):
    """Provider with a registered handler."""
    return A2UIProvider(on_action=on_action, settings=settings)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def user_model():
    """Sample data model."""
    return {
        "user": {"name": "John", "age": 30, "active": True, "tags": ["a", "b"]},
        "stats": {"count": 42, "ratio": 0.5},
        "items": [{"title": "first"}, {"title": "second"}],
        "nothing": None,
    }


@pytest.fixture
def form_messages():
    """A form surface: begin, components, then data."""
    return [
        {"beginRendering": {"surfaceId": "main", "root": "root"}},
        {
            "surfaceUpdate": {
                "surfaceId": "main",
                "components": [
                    {
                        "id": "root",
                        "component": {
                            "Column": {"children": {"explicitList": ["name", "subscribe", "submit"]}}
                        },
                    },
                    {
                        "id": "name",
                        "component": {
                            "TextField": {
                                "label": {"literalString": "Name"},
                                "text": {"path": "form/name"},
                            }
                        },
                    },
                    {
                        "id": "subscribe",
                        "component": {
                            "CheckBox": {
                                "label": {"literalString": "Subscribe to newsletter"},
                                "value": {"path": "form/subscribe"},
                            }
                        },
                    },
                    {
                        "id": "submit",
                        "component": {
                            "Button": {
                                "child": "submit-text",
                                "action": {
                                    "name": "submit",
                                    "context": [
                                        {"key": "name", "value": {"path": "/form/name"}},
                                        {"key": "subscribe", "value": {"path": "/form/subscribe"}},
                                        {"key": "source", "value": {"literalString": "form"}},
                                    ],
                                },
                            }
                        },
                    },
                ],
            }
        },
        {
            "dataModelUpdate": {
                "surfaceId": "main",
                "path": "form",
                "contents": [
                    {"key": "name", "valueString": ""},
                    {"key": "email", "valueString": ""},
                    {"key": "subscribe", "valueBoolean": False},
                ],
            }
        },
    ]
