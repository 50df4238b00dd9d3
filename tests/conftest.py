"""Shared fixtures for cxs settings tests.

Every test gets a fresh, isolated registry; the process-wide context is
reset after each test so module-level helpers never leak state.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cxs_settings.config.manager import SettingsRegistry
from cxs_settings.core.context import reset_settings_context

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def registry():
    """Creates an empty SettingsRegistry."""
    return SettingsRegistry()


@pytest.fixture
def defaulted_registry(registry):
    """Creates a SettingsRegistry seeded with the defaults."""
    registry.set_defaults()
    return registry


@pytest.fixture
def write_config(tmp_path) -> Callable[..., Path]:
    """Returns a helper writing a settings file into tmp_path.

    Dicts are dumped as JSON; strings are written verbatim.
    """
    def _write(content: Any, name: str = "settings.json") -> Path:
        path = tmp_path / name
        if isinstance(content, dict):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_settings() -> Dict[str, str]:
    """The mixed sample used throughout: two free keys and one bad pool name."""
    return {"a": "a", "b": "b", "pool_name": "*98*"}


@pytest.fixture(autouse=True)
def reset_context():
    """Reset the global settings context between tests."""
    reset_settings_context()
    yield
    reset_settings_context()
