"""Rules of a single Monty Hall game (doors, picks, host reveal)."""
