"""Top-level package for the cxs settings registry.

Callers normally use the module-level helpers below, which act on the
process-wide registry held by :mod:`cxs_settings.core.context`. Code that
prefers explicit wiring can build its own :class:`SettingsRegistry`.
"""

from __future__ import annotations

import os

from .config import (
    CONFIG_AGENT_ENDPOINT,
    CONFIG_POOL_CONFIG_NAME,
    CONFIG_POOL_NAME,
    CONFIG_WALLET_NAME,
    CONFIG_WALLET_TYPE,
    SettingsRegistry,
    UnknownKeyPolicy,
)
from .core import (
    ConfigurationFileNotFound,
    ConfigurationParseFailure,
    ErrorCode,
    InvalidConfiguration,
    InvalidConfigurationValue,
    SettingsError,
    SettingsLockPoisoned,
    get_settings,
)


def set_defaults() -> int:
    return get_settings().set_defaults()


def process_config_file(path: str | os.PathLike) -> int:
    return get_settings().process_config_file(path)


def get_config_value(key: str) -> str:
    return get_settings().get_config_value(key)


__all__: list[str] = [
    "CONFIG_AGENT_ENDPOINT",
    "CONFIG_POOL_CONFIG_NAME",
    "CONFIG_POOL_NAME",
    "CONFIG_WALLET_NAME",
    "CONFIG_WALLET_TYPE",
    "SettingsRegistry",
    "UnknownKeyPolicy",
    "ConfigurationFileNotFound",
    "ConfigurationParseFailure",
    "ErrorCode",
    "InvalidConfiguration",
    "InvalidConfigurationValue",
    "SettingsError",
    "SettingsLockPoisoned",
    "get_settings",
    "set_defaults",
    "process_config_file",
    "get_config_value",
]
