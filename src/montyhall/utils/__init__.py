"""Utility subpackage for the Monty Hall simulator.

Small helpers shared by the game engine and the batch runner live here,
split into focused modules (:mod:`random`, :mod:`parallel`, :mod:`logging`,
:mod:`stats`) so the game logic itself stays free of side effects like
multiprocessing or logging configuration.

The most commonly used helpers are re-exported here for convenience.
"""

from __future__ import annotations

from .logging import configure_logging, setup_info_logging, setup_warning_logging
from .random import MAX_UINT32, make_rng, resolve_rng, spawn_seeds
from .stats import wilson_ci

__all__ = [
    "configure_logging",
    "setup_info_logging",
    "setup_warning_logging",
    "MAX_UINT32",
    "make_rng",
    "resolve_rng",
    "spawn_seeds",
    "wilson_ci",
]
