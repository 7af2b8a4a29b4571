import pytest

from astar_grid.core.node import PathStep
from astar_grid.utils.replay import PathReplay


def _steps(*coords):
    return [PathStep(r, c, g) for g, (r, c) in enumerate(coords)]


def test_replay_advances_to_end():
    replay = PathReplay(interval=0)
    replay.restart_from(_steps((0, 0), (0, 1), (1, 1)))
    assert replay.current.coord == (0, 0)
    assert replay.advance().coord == (0, 1)
    assert replay.advance().coord == (1, 1)
    assert replay.finished
    assert replay.advance() is None


def test_replay_resumes_from_coord_on_new_path():
    replay = PathReplay(interval=0)
    replay.restart_from(_steps((0, 0), (1, 0), (2, 0), (2, 1)), coord=(2, 0))
    assert replay.index == 2


def test_replay_starts_over_when_coord_left_the_path():
    replay = PathReplay(interval=0)
    replay.restart_from(_steps((0, 0), (0, 1)), coord=(5, 5))
    assert replay.index == 0


def test_empty_replay():
    replay = PathReplay(interval=0)
    replay.restart_from(())
    assert replay.current is None
    assert replay.finished
    assert replay.advance() is None


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        PathReplay(interval=-1)


def test_wait_for_next_step_sleeps_remaining(monkeypatch):
    from astar_grid.utils import replay as replay_mod

    slept: list[float] = []
    monkeypatch.setattr(replay_mod.time, "perf_counter", lambda: 10.0)
    monkeypatch.setattr(replay_mod.time, "sleep", slept.append)
    replay = PathReplay(interval=0.5)
    replay.wait_for_next_step()
    assert slept == [pytest.approx(0.5)]
