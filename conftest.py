"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and linear_triggers/domains/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any linear_triggers module import
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_cursor_store():
    """Fake cursor store that records reads and writes."""
    from linear_triggers.adapters.cursor_store.fake import FakeCursorStore

    return FakeCursorStore()


@pytest.fixture
def fake_dynamic_field_provider():
    """Fake dynamic field provider with no seeded choices."""
    from linear_triggers.adapters.dynamic_fields.fake import FakeDynamicFieldProvider

    return FakeDynamicFieldProvider()
