"""Logging utilities for sphaera.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All sphaera code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'sphaera'


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'sphaera' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'sphaera' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # Replace the NullHandler added by the package __init__ with a StreamHandler
    if not any(not isinstance(h, logging.NullHandler) for h in pkg_root.handlers):
        for h in list(pkg_root.handlers):
            pkg_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'sphaera' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    pkg_root = _ensure_package_root()
    lvl = _to_level(level)
    pkg_root.setLevel(lvl)
    # matplotlib is chatty at DEBUG (font manager)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'sphaera' namespace.

    If a level is provided, it sets the logger's level; otherwise the logger
    is left at NOTSET so it inherits from the 'sphaera' parent configured via
    configure_logging().
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f"{_ROOT_NAME}.{name}"
    _ensure_package_root()
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
