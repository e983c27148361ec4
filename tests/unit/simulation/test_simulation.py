import numpy as np
import pandas as pd
import pytest

import montyhall.simulation.simulation as sim_mod
from montyhall.errors import InvalidInput
from montyhall.game.engine import GameInstance, Outcome, Prize
from montyhall.simulation.simulation import (
    RESULT_COLUMNS,
    BatchResult,
    TrialResult,
    aggregate_metrics,
    play_game,
    play_n_games,
    proportion_table,
    simulate_many_games,
    simulate_one_game,
)
from montyhall.simulation.strategies import Strategy


def _fixed_game(monkeypatch, labels, pick):
    """Pin the setup and the first pick so the host reveal is the only draw."""
    game = GameInstance.from_labels(labels)
    monkeypatch.setattr(sim_mod, "create_game", lambda rng: game)
    monkeypatch.setattr(sim_mod, "select_door", lambda rng: pick)
    return game


# ---------------------------------------------------------------------------
# Single trial
# ---------------------------------------------------------------------------


def test_play_game_returns_stay_then_switch(rng):
    stay, switch = play_game(rng)
    assert isinstance(stay, TrialResult)
    assert stay.strategy is Strategy.STAY
    assert switch.strategy is Strategy.SWITCH


def test_exactly_one_strategy_wins(rng):
    for _ in range(500):
        record = simulate_one_game(rng)
        outcomes = {record.stay_outcome, record.switch_outcome}
        assert outcomes == {Outcome.WIN, Outcome.LOSE}
        first_is_car = record.game.prize_at(record.first_pick) is Prize.CAR
        assert (record.stay_outcome is Outcome.WIN) == first_is_car
        assert (record.switch_outcome is Outcome.WIN) == (not first_is_car)


def test_record_shares_one_reveal(rng):
    for _ in range(200):
        r = simulate_one_game(rng)
        assert r.opened_door not in (r.first_pick, r.switch_pick)
        assert r.stay_pick == r.first_pick
        assert r.game.prize_at(r.opened_door) is Prize.GOAT


def test_scenario_goat_pick_switch_wins(monkeypatch):
    _fixed_game(monkeypatch, ["goat", "car", "goat"], 1)
    record = simulate_one_game(np.random.default_rng(0))
    assert record.opened_door == 3
    assert record.switch_pick == 2
    assert record.switch_outcome is Outcome.WIN
    assert record.stay_outcome is Outcome.LOSE


def test_scenario_car_pick_stay_wins(monkeypatch):
    _fixed_game(monkeypatch, ["car", "goat", "goat"], 1)
    opened = set()
    for seed in range(40):
        record = simulate_one_game(np.random.default_rng(seed))
        opened.add(record.opened_door)
        assert {record.opened_door, record.switch_pick} == {2, 3}
        assert record.stay_outcome is Outcome.WIN
        assert record.switch_outcome is Outcome.LOSE
    assert opened == {2, 3}


def test_play_game_seed_reproducible():
    assert play_game(seed=42) == play_game(seed=42)
    assert simulate_one_game(seed=42) == simulate_one_game(np.random.default_rng(42))


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------


def test_simulate_many_games_shape_and_order():
    df = simulate_many_games(n_games=25, seed=3)
    assert list(df.columns) == RESULT_COLUMNS
    assert len(df) == 50
    assert df["trial"].tolist() == [t for t in range(1, 26) for _ in range(2)]
    assert df["strategy"].tolist() == ["stay", "switch"] * 25
    # one winner per trial
    wins = df[df["outcome"] == "WIN"].groupby("trial").size()
    assert (wins == 1).all() and len(wins) == 25


def test_simulate_many_games_seeded_is_reproducible():
    a = simulate_many_games(n_games=30, seed=123)
    b = simulate_many_games(n_games=30, seed=123)
    pd.testing.assert_frame_equal(a, b)


def test_simulate_many_games_parallel_matches_serial():
    serial = simulate_many_games(n_games=40, seed=7, n_jobs=1)
    parallel = simulate_many_games(n_games=40, seed=7, n_jobs=2)
    pd.testing.assert_frame_equal(serial, parallel)


@pytest.mark.parametrize("n", [0, -5, 2.5, "10", True])
def test_invalid_trial_counts_raise(n):
    with pytest.raises(InvalidInput):
        simulate_many_games(n_games=n)
    with pytest.raises(InvalidInput):
        play_n_games(n, show=False)


def test_proportion_table_known_counts():
    df = pd.DataFrame(
        {
            "trial": [1, 1, 2, 2, 3, 3],
            "strategy": ["stay", "switch"] * 3,
            "outcome": ["WIN", "LOSE", "LOSE", "WIN", "LOSE", "WIN"],
        }
    )
    table = proportion_table(df)
    assert list(table.index) == ["stay", "switch"]
    assert list(table.columns) == ["LOSE", "WIN"]
    assert table.loc["stay", "WIN"] == pytest.approx(0.33)
    assert table.loc["stay", "LOSE"] == pytest.approx(0.67)
    assert table.loc["switch", "WIN"] == pytest.approx(0.67)
    assert table.index.name == "strategy"
    assert table.columns.name == "outcome"


def test_proportion_table_fills_missing_outcome():
    df = pd.DataFrame(
        {"trial": [1, 1], "strategy": ["stay", "switch"], "outcome": ["WIN", "LOSE"]}
    )
    table = proportion_table(df, digits=3)
    assert table.loc["stay"].tolist() == [0.0, 1.0]
    assert table.loc["switch"].tolist() == [1.0, 0.0]


def test_proportion_table_empty_raises():
    with pytest.raises(InvalidInput):
        proportion_table(pd.DataFrame(columns=RESULT_COLUMNS))


def test_aggregate_metrics_counts_and_intervals():
    df = simulate_many_games(n_games=200, seed=1)
    metrics = aggregate_metrics(df)
    assert metrics["games"] == 200
    stay = metrics["strategies"]["stay"]
    switch = metrics["strategies"]["switch"]
    assert stay["games"] == switch["games"] == 200
    assert stay["wins"] + switch["wins"] == 200
    for m in (stay, switch):
        assert 0.0 <= m["ci_low"] <= m["win_rate"] <= m["ci_high"] <= 1.0


def test_play_n_games_prints_table_and_returns_batch(capsys):
    batch = play_n_games(50, seed=5)
    out = capsys.readouterr().out
    assert "stay" in out and "switch" in out and "WIN" in out
    assert isinstance(batch, BatchResult)
    assert len(batch) == 100
    assert batch.n_games == 50
    rows = batch.table.sum(axis=1)
    assert rows.tolist() == pytest.approx([1.0, 1.0], abs=0.011)


def test_play_n_games_default_is_100(capsys):
    batch = play_n_games()
    capsys.readouterr()
    assert batch.n_games == 100


def test_play_n_games_quiet(capsys):
    play_n_games(10, seed=1, show=False)
    assert capsys.readouterr().out == ""


def test_trial_results_follow_generation_order():
    batch = play_n_games(5, seed=9, show=False)
    results = batch.trial_results()
    assert [r.strategy for r in results] == [Strategy.STAY, Strategy.SWITCH] * 5
    assert all(isinstance(r.outcome, Outcome) for r in results)


def test_repeated_batches_are_independent():
    first = play_n_games(10, seed=4, show=False)
    second = play_n_games(10, seed=4, show=False)
    assert len(first) == len(second) == 20
    pd.testing.assert_frame_equal(first.results, second.results)
