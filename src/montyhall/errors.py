# src/montyhall/errors.py
"""Exception types raised by the Monty Hall simulator.

Both concrete errors subclass :class:`ValueError` so callers that only care
about "bad argument" failures can keep catching the builtin.
"""

from __future__ import annotations


class MontyHallError(Exception):
    """Base class for all simulator errors."""


class PreconditionViolation(MontyHallError, ValueError):
    """A caller passed a door, game or strategy that breaks the game rules."""


class InvalidInput(MontyHallError, ValueError):
    """A batch was requested with an unusable trial count."""


__all__ = ["MontyHallError", "PreconditionViolation", "InvalidInput"]
