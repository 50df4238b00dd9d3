"""Settings registry, file loading and validation rules."""

from .keys import (
    CONFIG_AGENT_ENDPOINT,
    CONFIG_POOL_CONFIG_NAME,
    CONFIG_POOL_NAME,
    CONFIG_WALLET_NAME,
    CONFIG_WALLET_TYPE,
    DEFAULTS,
    KNOWN_KEYS,
)
from .manager import SettingsRegistry
from .validation import UnknownKeyPolicy

__all__ = [
    "CONFIG_AGENT_ENDPOINT",
    "CONFIG_POOL_CONFIG_NAME",
    "CONFIG_POOL_NAME",
    "CONFIG_WALLET_NAME",
    "CONFIG_WALLET_TYPE",
    "DEFAULTS",
    "KNOWN_KEYS",
    "SettingsRegistry",
    "UnknownKeyPolicy",
]
