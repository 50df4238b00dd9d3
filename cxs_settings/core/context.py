from __future__ import annotations

"""Application-wide access to the shared settings registry.

The hosting application builds one :class:`SettingsContext` at start-up and
installs it with :func:`set_settings_context`. Components that cannot be
handed the registry directly call :func:`get_settings`.
"""

import logging
from threading import Lock
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..config.manager import SettingsRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "SettingsContext",
    "get_settings_context",
    "set_settings_context",
    "reset_settings_context",
    "get_settings",
]


class SettingsContext:
    """Owner of the process-wide :class:`SettingsRegistry`."""

    def __init__(self, registry: Optional[SettingsRegistry] = None) -> None:
        if registry is None:
            from ..config.manager import SettingsRegistry

            registry = SettingsRegistry()
            registry.set_defaults()
        self._registry = registry
        self._logger = logging.getLogger(f"{__name__}.SettingsContext")
        self._logger.debug("SettingsContext initialized with %r", registry)

    @property
    def registry(self) -> SettingsRegistry:
        return self._registry

    def get_context_stats(self) -> Dict[str, Any]:
        """Get context statistics for debugging."""
        return {
            "setting_count": len(self._registry),
            "unknown_keys": self._registry.unknown_keys.value,
            "transactional": self._registry.transactional,
        }


# -------------------------------------------------------------------------
# Global Context Accessor
# -------------------------------------------------------------------------

_global_context: Optional[SettingsContext] = None
_global_lock = Lock()


def set_settings_context(context: SettingsContext) -> None:
    """Install *context* as the process-wide settings context."""
    global _global_context
    with _global_lock:
        _global_context = context
    logger.info("Global SettingsContext set")


def get_settings_context() -> Optional[SettingsContext]:
    """Return the installed context, or None before start-up."""
    return _global_context


def reset_settings_context() -> None:
    """Drop the installed context (tests)."""
    global _global_context
    with _global_lock:
        _global_context = None


def get_settings() -> SettingsRegistry:
    """Return the shared registry, installing a defaulted one on first use."""
    global _global_context
    with _global_lock:
        if _global_context is None:
            _global_context = SettingsContext()
            logger.info("Created default SettingsContext")
        return _global_context.registry
