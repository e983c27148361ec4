# src/montyhall/__init__.py
"""Monty Hall simulator - stay vs switch, one shared game per trial.

The friendly surface below is loaded lazily so ``import montyhall`` does not
pull in pandas or scipy until a simulation helper is actually used.
"""

from __future__ import annotations

import tomllib
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _v
from pathlib import Path

# Path to the project's pyproject.toml for local version fallback
PYPROJECT_TOML = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

__all__ = [  # loads lazily, that's why reportUnsupportedDunderAll is triggered
    "GameInstance",  # pyright: ignore[reportUnsupportedDunderAll]
    "Prize",  # pyright: ignore[reportUnsupportedDunderAll]
    "Outcome",  # pyright: ignore[reportUnsupportedDunderAll]
    "Strategy",  # pyright: ignore[reportUnsupportedDunderAll]
    "TrialResult",  # pyright: ignore[reportUnsupportedDunderAll]
    "BatchResult",  # pyright: ignore[reportUnsupportedDunderAll]
    "create_game",  # pyright: ignore[reportUnsupportedDunderAll]
    "select_door",  # pyright: ignore[reportUnsupportedDunderAll]
    "open_goat_door",  # pyright: ignore[reportUnsupportedDunderAll]
    "change_door",  # pyright: ignore[reportUnsupportedDunderAll]
    "determine_winner",  # pyright: ignore[reportUnsupportedDunderAll]
    "play_game",  # pyright: ignore[reportUnsupportedDunderAll]
    "play_n_games",  # pyright: ignore[reportUnsupportedDunderAll]
    "PreconditionViolation",  # pyright: ignore[reportUnsupportedDunderAll]
    "InvalidInput",  # pyright: ignore[reportUnsupportedDunderAll]
]

_LAZY_IMPORTS = {
    "GameInstance": "montyhall.game.engine",
    "Prize": "montyhall.game.engine",
    "Outcome": "montyhall.game.engine",
    "create_game": "montyhall.game.engine",
    "select_door": "montyhall.game.engine",
    "open_goat_door": "montyhall.game.engine",
    "determine_winner": "montyhall.game.engine",
    "Strategy": "montyhall.simulation.strategies",
    "change_door": "montyhall.simulation.strategies",
    "TrialResult": "montyhall.simulation.simulation",
    "BatchResult": "montyhall.simulation.simulation",
    "play_game": "montyhall.simulation.simulation",
    "play_n_games": "montyhall.simulation.simulation",
    "PreconditionViolation": "montyhall.errors",
    "InvalidInput": "montyhall.errors",
}


def __getattr__(name: str):  # pragma: no cover - simple dynamic loader
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    attr = getattr(import_module(module_name), name)
    globals()[name] = attr
    return attr


def _read_version_from_toml() -> str:
    """Return the package version declared in ``pyproject.toml``."""
    with PYPROJECT_TOML.open("rb") as fh:
        data = tomllib.load(fh)
    return data["project"]["version"]


try:
    __version__ = _v("montyhall")
except PackageNotFoundError:
    __version__ = _read_version_from_toml()
