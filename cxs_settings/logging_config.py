from __future__ import annotations

"""Central logging configuration for cxs settings consumers.

Import and call :func:`setup_logging` at application start-up. The library
itself only creates module loggers and never configures handlers.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional

__all__ = ["setup_logging"]

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> None:
    """Configure console logging, plus a file handler when a log dir is given.

    ``CXS_LOG_LEVEL`` and ``CXS_LOG_DIR`` supply the defaults for *level*
    and *log_dir*.
    """
    level = (level or os.environ.get("CXS_LOG_LEVEL", "INFO")).upper()
    log_dir = log_dir or os.environ.get("CXS_LOG_DIR")

    config = _build_config(level, log_dir)
    logging.config.dictConfig(config)
    logging.getLogger("cxs_settings").debug("Logging initialised at %s", level)

    _apply_debug_overrides()


def _build_config(level: str, log_dir: Optional[str]) -> Dict[str, Any]:
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
            "level": level,
        },
    }
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "simple",
            "level": level,
            "filename": os.path.join(log_dir, "cxs_settings.log"),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": _FORMAT},
        },
        "handlers": handlers,
        "root": {
            "level": level,
            "handlers": list(handlers),
        },
    }


def _apply_debug_overrides() -> None:
    """Apply ``CXS_DEBUG_MODULES=comma,separated,logger,names`` overrides."""
    extra_modules = os.environ.get("CXS_DEBUG_MODULES", "").strip()
    targets = [m.strip() for m in extra_modules.split(",") if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Root handlers filter at their own level; give the logger one that emits DEBUG
        if not any(h.level <= logging.DEBUG for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
        logger.info("Debug override active for logger '%s'", name)
