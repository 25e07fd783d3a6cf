"""Resolved options for the public expansion entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class ExpandConfig:
    """Options shared by ``expand``, ``expand_cartesian`` and ``expand_angular``.

    ``check_preconditions`` enables the eager checks on dimension counts and
    latitude ranges; they are skipped automatically on traced values.
    ``log_level`` is the level used for the per-call expansion event.
    """

    check_preconditions: bool = True
    log_level: int = logging.DEBUG


DEFAULT_EXPAND_CONFIG = ExpandConfig()

__all__ = ["DEFAULT_EXPAND_CONFIG", "ExpandConfig"]
