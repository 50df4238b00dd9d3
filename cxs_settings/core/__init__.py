"""Core building blocks: error taxonomy, status codes, locking and context."""

from .context import (
    SettingsContext,
    get_settings,
    get_settings_context,
    reset_settings_context,
    set_settings_context,
)
from .error_codes import ErrorCode, check_result, error_message
from .exceptions import (
    ConfigurationFileNotFound,
    ConfigurationParseFailure,
    InvalidConfiguration,
    InvalidConfigurationValue,
    SettingsError,
    SettingsLockPoisoned,
    UnknownSettingsError,
)
from .rwlock import ReadWriteLock

__all__ = [
    "SettingsContext",
    "get_settings",
    "get_settings_context",
    "reset_settings_context",
    "set_settings_context",
    "ErrorCode",
    "check_result",
    "error_message",
    "ConfigurationFileNotFound",
    "ConfigurationParseFailure",
    "InvalidConfiguration",
    "InvalidConfigurationValue",
    "SettingsError",
    "SettingsLockPoisoned",
    "UnknownSettingsError",
    "ReadWriteLock",
]
