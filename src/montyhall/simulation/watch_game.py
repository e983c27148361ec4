# src/montyhall/simulation/watch_game.py
"""
watch_game.py - run a *single* Monty Hall game with chatty logging.

It
 • logs the hidden layout,
 • logs the contestant's first pick and the door the host opens, and
 • finishes with the final pick and result for both strategies.

No game logic is duplicated - we only narrate a :class:`GameRecord`.
"""

from __future__ import annotations

import logging

from montyhall.simulation.simulation import GameRecord, simulate_one_game
from montyhall.utils.random import make_rng

LOGGER = logging.getLogger(__name__)


def describe_game(record: GameRecord) -> list[str]:
    """Return the narration lines for *record*, one per step."""
    return [
        f"Behind the doors: {record.game}",
        f"Contestant picks door {record.first_pick}",
        f"Host opens door {record.opened_door} to reveal a goat",
        f"stay   -> door {record.stay_pick}: {record.stay_outcome.value}",
        f"switch -> door {record.switch_pick}: {record.switch_outcome.value}",
    ]


def watch_game(seed: int | None = None) -> GameRecord:
    """Play one game, log every step and return the record."""
    record = simulate_one_game(make_rng(seed))
    for line in describe_game(record):
        LOGGER.info(line, extra={"stage": "watch", "seed": seed})
    return record


__all__ = ["describe_game", "watch_game"]
