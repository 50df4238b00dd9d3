from __future__ import annotations

"""Numeric status codes shared with language bindings.

Bindings receive plain integers; :func:`check_result` turns a non-success
code back into the matching :mod:`~cxs_settings.core.exceptions` class.
"""

from enum import IntEnum

__all__ = ["ErrorCode", "error_message", "check_result"]


class ErrorCode(IntEnum):
    SUCCESS = 0
    UNKNOWN_ERROR = 1001
    CONNECTION_ERROR = 1002
    INVALID_CONNECTION_HANDLE = 1003
    INVALID_CONFIGURATION = 1004


_MESSAGES = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.UNKNOWN_ERROR: "Unknown Error",
    ErrorCode.CONNECTION_ERROR: "Error with Connection",
    ErrorCode.INVALID_CONNECTION_HANDLE: "Invalid Connection Handle",
    ErrorCode.INVALID_CONFIGURATION: "Invalid Configuration",
}


def error_message(code: int) -> str:
    """Return the human readable text for *code* (unknown codes map to UNKNOWN_ERROR)."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except ValueError:
        return _MESSAGES[ErrorCode.UNKNOWN_ERROR]


def check_result(code: int) -> None:
    """Raise the exception matching *code* unless it is ``SUCCESS``."""
    from .exceptions import InvalidConfiguration, UnknownSettingsError

    if code == ErrorCode.SUCCESS:
        return
    if code == ErrorCode.INVALID_CONFIGURATION:
        raise InvalidConfiguration(error_message(code))
    try:
        known = ErrorCode(code)
    except ValueError:
        raise UnknownSettingsError(f"{error_message(code)} (code {code})", code_num=code)
    raise UnknownSettingsError(error_message(known), code_num=int(known))
