# src/montyhall/simulation/simulation.py
"""Single-trial and batch runners for the Monty Hall simulation.

Key entry points include:

* ``play_game`` for one trial, returning the stay and switch results that
  share a single game and a single host reveal.
* ``simulate_many_games`` for executing a batch of trials, with optional
  parallelism, as a tidy ``DataFrame``.
* ``play_n_games`` for running a batch, printing the win/lose proportion
  table and returning both as a :class:`BatchResult`.
* ``aggregate_metrics`` for per-strategy win rates with Wilson intervals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np
import pandas as pd

from montyhall.errors import InvalidInput
from montyhall.game.engine import (
    DoorIndex,
    GameInstance,
    Outcome,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)
from montyhall.simulation.strategies import STRATEGY_ORDER, Strategy, change_door
from montyhall.utils.parallel import process_map
from montyhall.utils.random import make_rng, resolve_rng, spawn_seeds
from montyhall.utils.stats import wilson_ci

__all__: list[str] = [
    "TrialResult",
    "GameRecord",
    "BatchResult",
    "RESULT_COLUMNS",
    "simulate_one_game",
    "play_game",
    "simulate_many_games",
    "proportion_table",
    "aggregate_metrics",
    "play_n_games",
]

LOGGER = logging.getLogger(__name__)

RESULT_COLUMNS: list[str] = ["trial", "strategy", "outcome"]
_OUTCOME_COLUMNS: list[str] = [Outcome.LOSE.value, Outcome.WIN.value]
_STRATEGY_ROWS: list[str] = [s.value for s in STRATEGY_ORDER]


@dataclass(frozen=True, slots=True)
class TrialResult:
    """One strategy's outcome in one trial."""

    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Everything that happened in one trial, for both strategies."""

    game: GameInstance
    first_pick: DoorIndex
    opened_door: DoorIndex
    stay_pick: DoorIndex
    switch_pick: DoorIndex
    stay_outcome: Outcome
    switch_outcome: Outcome

    @property
    def results(self) -> tuple[TrialResult, TrialResult]:
        """Stay result first, then switch."""
        return (
            TrialResult(Strategy.STAY, self.stay_outcome),
            TrialResult(Strategy.SWITCH, self.switch_outcome),
        )


@dataclass
class BatchResult:
    """Rows of a batch run plus the derived proportion table.

    Attributes
    ----------
    results
        ``2 * n`` rows with columns ``trial``, ``strategy`` and ``outcome``
        in generation order (stay then switch within each trial).
    table
        Win/lose proportions per strategy, rows summing to one.
    """

    results: pd.DataFrame
    table: pd.DataFrame

    def __len__(self) -> int:
        return len(self.results)

    @property
    def n_games(self) -> int:
        return len(self.results) // len(STRATEGY_ORDER)

    def trial_results(self) -> list[TrialResult]:
        """Return the rows as :class:`TrialResult` objects, in order."""
        return [
            TrialResult(Strategy(s), Outcome(o))
            for s, o in zip(self.results["strategy"], self.results["outcome"], strict=True)
        ]


# ---------------------------------------------------------------------------
# Single trial
# ---------------------------------------------------------------------------


def simulate_one_game(
    rng: np.random.Generator | None = None,
    *,
    seed: int | None = None,
) -> GameRecord:
    """Play one trial and keep every intermediate step.

    Parameters
    ----------
    rng
        Generator used for the setup, the first pick and (when the first pick
        is the car) the host's choice, drawn in that order.
    seed
        Used to build a generator when ``rng`` is not given.

    Returns
    -------
    GameRecord
        The game, both picks, the opened door and both outcomes.  The host
        opens exactly one door and both strategies are resolved against it.
    """
    rng = resolve_rng(rng, seed)
    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    stay_pick = change_door(Strategy.STAY, opened_door, first_pick)
    switch_pick = change_door(Strategy.SWITCH, opened_door, first_pick)

    return GameRecord(
        game=game,
        first_pick=first_pick,
        opened_door=opened_door,
        stay_pick=stay_pick,
        switch_pick=switch_pick,
        stay_outcome=determine_winner(stay_pick, game),
        switch_outcome=determine_winner(switch_pick, game),
    )


def play_game(
    rng: np.random.Generator | None = None,
    *,
    seed: int | None = None,
) -> tuple[TrialResult, TrialResult]:
    """Play one trial and return the ``(stay, switch)`` results."""
    return simulate_one_game(rng, seed=seed).results


def _play_trial(job: tuple[int, int]) -> list[dict[str, Any]]:
    """Run trial ``job = (trial, seed)`` and return its two result rows."""
    trial, seed = job
    record = simulate_one_game(make_rng(seed))
    return [
        {"trial": trial, "strategy": r.strategy.value, "outcome": r.outcome.value}
        for r in record.results
    ]


# ---------------------------------------------------------------------------
# Batch simulation helpers
# ---------------------------------------------------------------------------


def _validate_n_games(n_games: object) -> int:
    if isinstance(n_games, bool) or not isinstance(n_games, (int, np.integer)):
        raise InvalidInput(f"n_games must be a positive integer, got {n_games!r}")
    if n_games <= 0:
        raise InvalidInput(f"n_games must be a positive integer, got {n_games}")
    return int(n_games)


def simulate_many_games(
    *,
    n_games: int,
    seed: int | None = None,
    n_jobs: int = 1,
) -> pd.DataFrame:
    """Run many independent trials and return a tidy ``DataFrame``.

    Parameters
    ----------
    n_games
        Number of trials to simulate; must be positive.
    seed
        Optional seed for determinism across runs.  Each trial gets its own
        generator seeded from :func:`spawn_seeds`, so the rows do not depend
        on ``n_jobs``.
    n_jobs
        Number of worker processes to spawn; ``1`` runs serially.

    Returns
    -------
    pandas.DataFrame
        ``2 * n_games`` rows with columns :data:`RESULT_COLUMNS`, ordered by
        trial with the stay row before the switch row.

    Raises
    ------
    InvalidInput
        If ``n_games`` is not a positive integer.
    """
    n_games = _validate_n_games(n_games)
    seeds = spawn_seeds(n_games, seed=seed)
    jobs = [(trial, int(s)) for trial, s in enumerate(seeds, start=1)]

    chunks = list(process_map(_play_trial, jobs, n_jobs=n_jobs))
    if n_jobs not in (None, 0, 1):
        # worker results arrive in completion order
        chunks.sort(key=lambda rows: rows[0]["trial"])

    rows = [row for chunk in chunks for row in chunk]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def proportion_table(df: pd.DataFrame, digits: int = 2) -> pd.DataFrame:
    """Return per-strategy win/lose proportions from *df*.

    The table is indexed by strategy (``stay``, ``switch``) with columns
    ``LOSE`` and ``WIN``; each row sums to one before rounding to *digits*.
    """
    if df.empty:
        raise InvalidInput("cannot build a proportion table from an empty result set")
    table = pd.crosstab(df["strategy"], df["outcome"], normalize="index")
    table = table.reindex(index=_STRATEGY_ROWS, columns=_OUTCOME_COLUMNS, fill_value=0.0)
    return table.round(digits).rename_axis(index="strategy", columns="outcome")


# ---------------------------------------------------------------------------
# Aggregation helper
# ---------------------------------------------------------------------------


def aggregate_metrics(df: pd.DataFrame, alpha: float = 0.05) -> Mapping[str, Any]:
    """Summarize a DataFrame of trial results.

    Parameters
    ----------
    df
        DataFrame produced by :func:`simulate_many_games`.
    alpha
        Significance level for the Wilson score intervals.

    Returns
    -------
    Mapping[str, Any]
        ``{"games": n, "strategies": {name: {...}}}`` where each strategy
        entry carries ``wins``, ``games``, ``win_rate``, ``ci_low`` and
        ``ci_high``.
    """
    per_strategy: dict[str, dict[str, Any]] = {}
    for name in _STRATEGY_ROWS:
        outcomes = df.loc[df["strategy"] == name, "outcome"]
        games = int(len(outcomes))
        wins = int((outcomes == Outcome.WIN.value).sum())
        lo, hi = wilson_ci(wins, games, alpha=alpha)
        per_strategy[name] = {
            "games": games,
            "wins": wins,
            "win_rate": wins / games,
            "ci_low": lo,
            "ci_high": hi,
        }
    return {"games": int(df["trial"].nunique()), "strategies": per_strategy}


def play_n_games(
    n: int = 100,
    *,
    seed: int | None = None,
    n_jobs: int = 1,
    digits: int = 2,
    show: bool = True,
) -> BatchResult:
    """Play *n* trials, print the proportion table and return everything.

    Parameters
    ----------
    n
        Number of trials; defaults to 100.  Zero or negative counts raise
        :class:`~montyhall.errors.InvalidInput`.
    seed, n_jobs
        Forwarded to :func:`simulate_many_games`.
    digits
        Rounding applied to the proportion table.
    show
        Print the table to stdout when true.

    Returns
    -------
    BatchResult
        All ``2 * n`` results in trial order and the proportion table.
    """
    n = _validate_n_games(n)
    LOGGER.info(
        "Batch simulation start",
        extra={"stage": "simulation", "n_games": n, "seed": seed, "n_jobs": n_jobs},
    )
    df = simulate_many_games(n_games=n, seed=seed, n_jobs=n_jobs)
    table = proportion_table(df, digits=digits)
    LOGGER.info(
        "Batch simulation complete",
        extra={
            "stage": "simulation",
            "n_games": n,
            "rows": len(df),
            "win_rates": table[Outcome.WIN.value].to_dict(),
        },
    )
    if show:
        print(table)
    return BatchResult(results=df, table=table)
