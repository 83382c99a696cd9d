"""
Global configuration for numvec.

Provides:
- Rendering threshold used by ``str()``/``repr()`` of vectors
- Environment overrides read lazily on first access

Environment:
    NUMVEC_REPR_THRESHOLD: vectors shorter than this are listed in full,
        longer ones render as ``"{length}x1"`` (default: 50)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ._errors import VectorError, NUMVEC_ERROR_INVALID_ARGUMENT

logger = logging.getLogger("numvec.config")

__all__ = [
    'DEFAULT_REPR_THRESHOLD',
    'get_config',
    'set_repr_threshold',
    'reset_config',
]

DEFAULT_REPR_THRESHOLD = 50

_ENV_REPR_THRESHOLD = 'NUMVEC_REPR_THRESHOLD'


def _threshold_from_env() -> Optional[int]:
    """Parse the threshold override, ignoring malformed values."""
    raw = os.environ.get(_ENV_REPR_THRESHOLD, '').strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {_ENV_REPR_THRESHOLD}={raw!r}: not an integer")
        return None
    if value < 0:
        logger.warning(f"Ignoring {_ENV_REPR_THRESHOLD}={raw!r}: must be >= 0")
        return None
    return value


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    The environment is consulted once, the first time a setting is read,
    so importing numvec never touches ``os.environ``.
    """

    def __init__(self):
        self._repr_threshold: Optional[int] = None

    @property
    def repr_threshold(self) -> int:
        """Vectors with fewer cells than this are rendered element by element."""
        if self._repr_threshold is None:
            env_value = _threshold_from_env()
            if env_value is not None:
                logger.debug(f"repr_threshold={env_value} (from {_ENV_REPR_THRESHOLD})")
                self._repr_threshold = env_value
            else:
                self._repr_threshold = DEFAULT_REPR_THRESHOLD
        return self._repr_threshold

    @repr_threshold.setter
    def repr_threshold(self, value: int):
        value = int(value)
        if value < 0:
            raise VectorError(
                NUMVEC_ERROR_INVALID_ARGUMENT,
                f"repr_threshold must be non-negative, got {value}",
            )
        logger.debug(f"repr_threshold set to {value}")
        self._repr_threshold = value

    def reset(self) -> None:
        """Drop overrides; the environment is re-read on next access."""
        self._repr_threshold = None

    def __repr__(self) -> str:
        return f"<numvec config repr_threshold={self.repr_threshold}>"


_config = _Config()


def get_config() -> _Config:
    """Return the process-wide configuration object."""
    return _config


def set_repr_threshold(value: int) -> None:
    """
    Set the rendering threshold.

    Args:
        value: Non-negative cell count

    Raises:
        VectorError: If value is negative
    """
    _config.repr_threshold = value


def reset_config() -> None:
    """Restore defaults (environment overrides apply again)."""
    _config.reset()
