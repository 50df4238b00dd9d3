from __future__ import annotations

"""Validation rules for merged settings.

Only the name-like known keys are checked: every character must be
alphanumeric or ``_``. ``wallet_type`` and ``agent_endpoint`` are accepted
as-is; endpoint URL checking is not implemented.
"""

import datetime
import logging
from enum import Enum
from typing import Any, List, Mapping

from .keys import (
    CONFIG_POOL_CONFIG_NAME,
    CONFIG_POOL_NAME,
    CONFIG_WALLET_NAME,
    KNOWN_KEYS,
)

logger = logging.getLogger(__name__)

__all__ = ["UnknownKeyPolicy", "NAME_KEYS", "as_text", "is_valid_name", "collect_errors"]

NAME_KEYS = frozenset({CONFIG_POOL_NAME, CONFIG_POOL_CONFIG_NAME, CONFIG_WALLET_NAME})


class UnknownKeyPolicy(str, Enum):
    """What validation does with keys outside the known set."""

    IGNORE = "ignore"
    REJECT = "reject"


def as_text(value: Any) -> str:
    """Render a scalar setting as text, raising TypeError for anything else.

    Booleans render as ``true``/``false``; dates and times parsed from
    YAML or TOML render in ISO 8601 form.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # datetime.datetime is a date subclass
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    raise TypeError(f"{type(value).__name__} value is not text")


def is_valid_name(value: str) -> bool:
    """Return True if *value* holds only alphanumerics and underscores."""
    return all(c.isalnum() or c == "_" for c in value)


def collect_errors(settings: Mapping[str, Any],
                   policy: UnknownKeyPolicy = UnknownKeyPolicy.IGNORE) -> List[str]:
    """Return one message per offending entry of *settings*, sorted by key.

    Name keys are checked on their text form, so ``2024`` or ``true`` pass.
    A name key whose value has no text form (mapping, list, null) is
    reported as invalid.
    """
    errors: List[str] = []
    for key in sorted(settings):
        value = settings[key]
        if key in NAME_KEYS:
            try:
                valid = is_valid_name(as_text(value))
            except TypeError:
                valid = False
            if not valid:
                errors.append(f"{key} has invalid setting: {value}")
        elif key in KNOWN_KEYS:
            continue
        elif policy is UnknownKeyPolicy.REJECT:
            errors.append(f"{key} is not a recognised setting")
    if errors:
        logger.debug("Validation found %d problem(s)", len(errors))
    return errors
