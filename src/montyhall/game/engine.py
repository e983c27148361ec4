# src/montyhall/game/engine.py
"""engine.py
============
Door layout, contestant pick, host reveal and outcome rules for one
Monty Hall game.

High-level flow
---------------
* :func:`create_game` hides one car and two goats behind doors 1-3.
* :func:`select_door` makes the contestant's first pick.
* :func:`open_goat_door` lets the host open a goat door other than the pick.
* :func:`determine_winner` checks what is behind the contestant's final door.

The module keeps no global state; every random draw goes through the
``numpy.random.Generator`` handed in by the caller.  Door numbers are
1-based, matching how the game is described on the show.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TypeAlias

import numpy as np

from montyhall.errors import PreconditionViolation
from montyhall.utils.random import resolve_rng

__all__ = [
    "DOORS",
    "DoorIndex",
    "Prize",
    "Outcome",
    "GameInstance",
    "check_door",
    "create_game",
    "select_door",
    "open_goat_door",
    "determine_winner",
]

DoorIndex: TypeAlias = int

DOORS: tuple[DoorIndex, ...] = (1, 2, 3)


class Prize(Enum):
    """What sits behind a door."""

    CAR = "car"
    GOAT = "goat"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Outcome(Enum):
    """Result of a contestant's final pick."""

    WIN = "WIN"
    LOSE = "LOSE"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


# One car, two goats; shuffled fresh for every game.
_PRIZE_POOL: tuple[Prize, ...] = (Prize.GOAT, Prize.GOAT, Prize.CAR)


def check_door(door: object, *, name: str = "door") -> DoorIndex:
    """Return *door* as a plain ``int`` or raise if it is not one of :data:`DOORS`."""
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)):
        raise PreconditionViolation(f"{name} must be an integer door number, got {door!r}")
    if int(door) not in DOORS:
        raise PreconditionViolation(f"{name} must be one of {DOORS}, got {door!r}")
    return int(door)


@dataclass(frozen=True, slots=True)
class GameInstance:
    """Immutable arrangement of prizes behind the three doors.

    ``doors[0]`` is door 1.  Construction validates that there are exactly
    three slots holding exactly one :attr:`Prize.CAR`.
    """

    doors: tuple[Prize, ...]

    def __post_init__(self) -> None:
        if len(self.doors) != len(DOORS):
            raise PreconditionViolation(
                f"a game has exactly {len(DOORS)} doors, got {len(self.doors)}"
            )
        if not all(isinstance(p, Prize) for p in self.doors):
            raise PreconditionViolation(f"doors must hold Prize values, got {self.doors!r}")
        counts = Counter(self.doors)
        if counts[Prize.CAR] != 1:
            raise PreconditionViolation(
                f"a game hides exactly one car, got {counts[Prize.CAR]}"
            )

    @classmethod
    def from_labels(cls, labels: Iterable[str | Prize]) -> "GameInstance":
        """Build a game from labels such as ``["goat", "car", "goat"]``."""
        prizes: list[Prize] = []
        for label in labels:
            if isinstance(label, Prize):
                prizes.append(label)
                continue
            try:
                prizes.append(Prize(str(label).lower()))
            except ValueError as exc:
                raise PreconditionViolation(f"unknown prize label {label!r}") from exc
        return cls(tuple(prizes))

    def prize_at(self, door: DoorIndex) -> Prize:
        """Return the prize behind 1-based *door*."""
        return self.doors[check_door(door) - 1]

    @property
    def car_door(self) -> DoorIndex:
        return self.doors.index(Prize.CAR) + 1

    @property
    def goat_doors(self) -> tuple[DoorIndex, ...]:
        return tuple(d for d in DOORS if self.doors[d - 1] is Prize.GOAT)

    def __str__(self) -> str:
        return "[" + ", ".join(p.value for p in self.doors) + "]"


# ---------------------------------------------------------------------------
# Game steps
# ---------------------------------------------------------------------------


def create_game(rng: np.random.Generator | None = None) -> GameInstance:
    """Return a new game with the car behind a uniformly random door.

    The three prizes are shuffled with ``rng.permutation`` so each of the
    three distinct layouts (car behind door 1, 2 or 3) has probability 1/3.
    """
    rng = resolve_rng(rng)
    order = rng.permutation(len(_PRIZE_POOL))
    return GameInstance(tuple(_PRIZE_POOL[int(i)] for i in order))


def select_door(rng: np.random.Generator | None = None) -> DoorIndex:
    """Return the contestant's first pick, uniform over :data:`DOORS`."""
    rng = resolve_rng(rng)
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))


def open_goat_door(
    game: GameInstance,
    a_pick: DoorIndex,
    rng: np.random.Generator | None = None,
) -> DoorIndex:
    """Return the door the host opens after the contestant picks *a_pick*.

    Parameters
    ----------
    game
        Arrangement produced by :func:`create_game`.
    a_pick
        Contestant's first pick (1-3).
    rng
        Generator used only when the contestant picked the car.

    Returns
    -------
    DoorIndex
        A goat door different from ``a_pick``.  If the contestant holds the
        car the host chooses between the two goats with probability 1/2
        each; otherwise the only remaining goat is opened and no random
        number is drawn.

    Raises
    ------
    PreconditionViolation
        If ``a_pick`` is not a valid door.
    """
    a_pick = check_door(a_pick, name="a_pick")
    goat_doors = game.goat_doors
    if game.prize_at(a_pick) is Prize.CAR:
        # Drawn on every car pick; seeded replays depend on it.
        rng = resolve_rng(rng)
        return int(goat_doors[int(rng.integers(len(goat_doors)))])
    return next(d for d in goat_doors if d != a_pick)


def determine_winner(final_pick: DoorIndex, game: GameInstance) -> Outcome:
    """Return :attr:`Outcome.WIN` if the car is behind *final_pick*."""
    if game.prize_at(check_door(final_pick, name="final_pick")) is Prize.CAR:
        return Outcome.WIN
    return Outcome.LOSE
