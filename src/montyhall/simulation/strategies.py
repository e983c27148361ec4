# src/montyhall/simulation/strategies.py
"""Contestant strategies for the Monty Hall simulator.

Provides the :class:`Strategy` enum and :func:`change_door`, which turns the
host's reveal and the contestant's first pick into a final pick.
"""
from __future__ import annotations

from enum import Enum

from montyhall.errors import PreconditionViolation
from montyhall.game.engine import DOORS, DoorIndex, check_door

__all__: list[str] = [
    "Strategy",
    "STRATEGY_ORDER",
    "change_door",
]


class Strategy(Enum):
    """What the contestant does once the host has opened a goat door."""

    STAY = "stay"
    SWITCH = "switch"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value

    @classmethod
    def parse(cls, value: "Strategy | str") -> "Strategy":
        """Return *value* as a :class:`Strategy`, accepting ``"stay"``/``"switch"``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise PreconditionViolation(f"Unknown strategy {value!r}; expected 'stay' or 'switch'")


# Order in which each trial reports its two results.
STRATEGY_ORDER: tuple[Strategy, ...] = (Strategy.STAY, Strategy.SWITCH)


def change_door(
    strategy: Strategy | str,
    opened_door: DoorIndex,
    a_pick: DoorIndex,
) -> DoorIndex:
    """Return the contestant's final pick under *strategy*.

    Parameters
    ----------
    strategy
        :attr:`Strategy.STAY` keeps ``a_pick``; :attr:`Strategy.SWITCH`
        moves to the one door that is neither ``a_pick`` nor
        ``opened_door``.
    opened_door
        Door the host opened.
    a_pick
        Contestant's first pick.

    Raises
    ------
    PreconditionViolation
        If either door is outside 1-3, if both are the same door, or if the
        strategy name is unknown.
    """
    strategy = Strategy.parse(strategy)
    opened_door = check_door(opened_door, name="opened_door")
    a_pick = check_door(a_pick, name="a_pick")
    if opened_door == a_pick:
        raise PreconditionViolation(
            f"opened_door and a_pick must differ, both are {a_pick}"
        )

    if strategy is Strategy.STAY:
        return a_pick
    (final_pick,) = (d for d in DOORS if d not in (opened_door, a_pick))
    return final_pick
