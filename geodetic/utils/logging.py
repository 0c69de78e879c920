"""Logging utility for geodetic"""

__all__ = ['LOGGER', 'log_rejected', 'warn_once']

import logging
from typing import Any

LOGGER = logging.getLogger('geodetic')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)


def log_rejected(operation: str, value: Any, reason: str):
    """Records (at DEBUG) an input that a converter answered with None"""
    LOGGER.debug('%s rejected %r: %s', operation, value, reason)
