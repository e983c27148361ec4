from montyhall.game.engine import Outcome
from montyhall.simulation.simulation import simulate_one_game
from montyhall.simulation.watch_game import describe_game, watch_game


def test_describe_game_lines():
    record = simulate_one_game(seed=8)
    lines = describe_game(record)
    assert len(lines) == 5
    assert lines[0] == f"Behind the doors: {record.game}"
    assert f"door {record.first_pick}" in lines[1]
    assert f"door {record.opened_door}" in lines[2]
    assert lines[3].startswith("stay") and record.stay_outcome.value in lines[3]
    assert lines[4].startswith("switch") and record.switch_outcome.value in lines[4]


def test_watch_game_logs_every_step(capinfo):
    record = watch_game(seed=8)
    messages = [r.getMessage() for r in capinfo.records if r.name.endswith("watch_game")]
    assert messages == describe_game(record)
    assert all(getattr(r, "stage", None) == "watch" for r in capinfo.records if r.name.endswith("watch_game"))


def test_watch_game_is_seeded():
    a = watch_game(seed=3)
    b = watch_game(seed=3)
    assert a == b
    assert {a.stay_outcome, a.switch_outcome} == {Outcome.WIN, Outcome.LOSE}
