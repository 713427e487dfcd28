"""Pytest configuration and fixtures."""

import os
from typing import Any

import pytest
import structlog

from core import get_settings
from renderer import ComponentMetadata, ComponentRegistry, ComponentCategory, Renderer, get_registry
from renderer.elements import el


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['AIUI_JSON_LOGS'] = 'false'
    os.environ.pop('AIUI_MAX_RENDER_DEPTH', None)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def registry():
    """Process-wide built-in registry."""
    return get_registry()


@pytest.fixture
def renderer(registry):
    """Renderer with a fresh state arena."""
    return Renderer(registry)


# ============================================================================
# Custom Registry Fixtures
# ============================================================================

def _boom(props: dict[str, Any], ctx) -> Any:
    raise RuntimeError("boom")


def _echo(props: dict[str, Any], ctx) -> Any:
    return el("p", *ctx.children, text=props.get("text", ""), data_disabled=props["disabled"])


def _field(props: dict[str, Any], ctx) -> Any:
    return el("input", type=props.get("type", "text"), name=props.get("name"), value=props.get("value", ""))


@pytest.fixture
def test_entries():
    """Minimal entries for isolated registries."""
    return [
        ComponentMetadata(name="Echo", category=ComponentCategory.DISPLAY,
                          description="Paragraph echoing its text", renderer=_echo),
        ComponentMetadata(name="Boom", category=ComponentCategory.DISPLAY,
                          description="Always raises", renderer=_boom),
        ComponentMetadata(name="Field", category=ComponentCategory.INPUTS,
                          description="Single input", renderer=_field),
    ]


@pytest.fixture
def test_registry(test_entries):
    """Isolated registry with Echo, Boom and Field."""
    return ComponentRegistry(test_entries)


@pytest.fixture
def test_renderer(test_registry):
    return Renderer(test_registry)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_ui_description():
    """Card with a form and a submit action."""
    return {
        "type": "Card",
        "props": {"title": "Shipping"},
        "children": [
            {"type": "TextInput", "props": {"name": "city", "label": "City", "value": "Oslo"}},
            {
                "type": "RadioGroup",
                "props": {"name": "country", "value": "us", "options": ["us", "no"]},
            },
            {"type": "Toggle", "props": {"name": "express", "label": "Express"}},
        ],
        "actions": [{"id": "submit", "label": "Submit", "primary": True}],
    }


@pytest.fixture
def sample_ui_json():
    """Description text as an agent would send it."""
    return """```json
{
  "type": "Section",
  "props": {"heading": "Review"},
  "children": [
    {"type": "Markdown", "props": {"content": "Ready to ship?"}}
  ],
  "actions": [{"id": "approve", "label": "Approve", "primary": true}]
}
```"""


# ============================================================================
# Cleanup Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Clear bound log context after each test."""
    yield
    structlog.contextvars.clear_contextvars()
