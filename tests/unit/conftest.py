"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Settings cache reset so environment overrides take effect
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.shared.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Drop the cached Settings before and after every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def call_counter() -> dict[str, int]:
    """Mutable counter shared with supplier closures."""
    return {"calls": 0}
