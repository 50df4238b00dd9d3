from __future__ import annotations

"""Settings exception classes.

Every recoverable settings failure derives from :class:`SettingsError` and
carries the numeric status code reported to bindings, so callers can either
catch the exception or forward ``code_num`` unchanged.

:class:`SettingsLockPoisoned` is intentionally *not* a ``SettingsError``: it
signals that shared state was corrupted by an earlier crash and the process
should not continue.
"""

from typing import Optional

from .error_codes import ErrorCode


class SettingsError(Exception):
    """Base exception for all recoverable settings errors."""

    code_num: int = ErrorCode.INVALID_CONFIGURATION

    def __init__(self, message: str, key: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.key = key
        self.cause = cause

    def __str__(self) -> str:
        if self.key:
            return f"[Setting: {self.key}] {super().__str__()}"
        return super().__str__()


class ConfigurationFileNotFound(SettingsError):
    """Raised when a configuration path does not name an existing file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"could not find configuration file: {path}")


class ConfigurationParseFailure(SettingsError):
    """Raised when a configuration file exists but is not a key/value document."""

    def __init__(self, message: str, path: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class InvalidConfigurationValue(SettingsError):
    """Raised when merged settings fail validation.

    ``validation_errors`` holds one entry per offending key, in key order.
    """

    def __init__(self, validation_errors: list[str]) -> None:
        self.validation_errors = list(validation_errors)
        super().__init__("; ".join(self.validation_errors))


class InvalidConfiguration(SettingsError):
    """Raised when a looked-up key is absent or its value is not text."""


class UnknownSettingsError(SettingsError):
    """Raised for status codes without a dedicated exception."""

    code_num = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str, code_num: int = ErrorCode.UNKNOWN_ERROR) -> None:
        super().__init__(message)
        self.code_num = code_num


class SettingsLockPoisoned(RuntimeError):
    """Raised on any use of the settings lock after a writer failed mid-update."""
