"""Strategies, single-trial and batch runners for the Monty Hall game."""
