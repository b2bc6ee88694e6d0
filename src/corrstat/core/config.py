"""
Runtime configuration for corrstat.

A single ``StatsConfig`` instance holds the package-wide defaults.  Functions
read it at call time, so ``configure`` takes effect immediately; explicit
keyword arguments (``rng=``, ``tuning_constant=``) always win.

Example
-------
>>> from corrstat.core.config import configure, get_config
>>> configure(seed=42)
>>> get_config().seed
42
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from .exceptions import InvalidArgumentError


@dataclass(frozen=True)
class StatsConfig:
    """Package-wide defaults.

    Parameters
    ----------
    seed : int or None
        Seed for the quickselect pivot generator.  A fixed seed makes
        ``median`` reproducible across calls.  ``None`` draws fresh
        entropy on every call.  Default 0.
    bicor_tuning_constant : float
        Multiple of the MAD beyond which an observation gets zero weight
        in the biweighted midcorrelation.  Default 9.0.
    console_level : int
        Level of the console handler attached by ``get_logger``.  Changing
        it through ``configure`` updates loggers that already exist.
        Default ``logging.WARNING``.
    """

    seed: Optional[int] = 0
    bicor_tuning_constant: float = 9.0
    console_level: int = logging.WARNING


_DEFAULT = StatsConfig()
_ACTIVE = _DEFAULT


def _apply_console_level(level: int) -> None:
    # Loggers are created at import time; push the new level to their handlers.
    from ..utils.logging import set_console_level
    set_console_level(level)


def get_config() -> StatsConfig:
    """Return the active configuration."""
    return _ACTIVE


def configure(**overrides) -> StatsConfig:
    """Replace fields of the active configuration.

    Raises
    ------
    InvalidArgumentError
        If an override names a field that does not exist, or the
        tuning constant is not positive.
    """
    global _ACTIVE

    known = {f.name for f in fields(StatsConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidArgumentError(
            f"Unknown configuration field(s) {unknown}. Choose from {sorted(known)}."
        )
    if "bicor_tuning_constant" in overrides and not overrides["bicor_tuning_constant"] > 0:
        raise InvalidArgumentError("bicor_tuning_constant must be positive.")

    previous_level = _ACTIVE.console_level
    _ACTIVE = replace(_ACTIVE, **overrides)
    if _ACTIVE.console_level != previous_level:
        _apply_console_level(_ACTIVE.console_level)
    return _ACTIVE


def reset_config() -> StatsConfig:
    """Restore the default configuration."""
    global _ACTIVE
    previous_level = _ACTIVE.console_level
    _ACTIVE = _DEFAULT
    if _ACTIVE.console_level != previous_level:
        _apply_console_level(_ACTIVE.console_level)
    return _ACTIVE
