import pytest

from astar_grid.core.errors import FailureReason, InvalidGridError
from astar_grid.utils.session import PathSession


def _session():
    return PathSession([[0, 0, 0], [0, 0, 0], [0, 0, 0]], (0, 0), (2, 2), replay_interval=0)


def test_session_searches_on_creation():
    session = _session()
    assert session.result.ok
    assert session.result.cost == 4
    assert session.replay.current.coord == (0, 0)


def test_session_copies_grid():
    grid = [[0, 0], [0, 0]]
    session = PathSession(grid, (0, 0), (1, 1))
    session.toggle(0, 1)
    assert grid == [[0, 0], [0, 0]]
    assert session.grid == [[0, 1], [0, 0]]


def test_toggle_reroutes_and_resumes_replay():
    session = _session()
    session.replay.advance()  # (1, 0)
    assert session.replay.current.coord == (1, 0)

    session.toggle(2, 0)
    assert session.grid[2][0] == 1
    assert (2, 0) not in session.result.coords
    assert session.result.cost == 4
    # (1, 0) is still on the new path, so the replay stays there
    assert session.replay.current.coord == (1, 0)

    session.toggle(2, 0)
    assert session.grid[2][0] == 0


def test_toggle_out_of_bounds_raises():
    with pytest.raises(ValueError):
        _session().toggle(3, 0)


def test_toggle_target_reports_blocked_endpoint():
    session = _session()
    result = session.toggle(2, 2)
    assert result.reason is FailureReason.BLOCKED_ENDPOINT
    assert session.replay.current is None


def test_move_start_and_target():
    session = _session()
    session.set_target(0, 2)
    assert session.result.coords[-1] == (0, 2)
    session.set_start(2, 2)
    assert session.result.coords[0] == (2, 2)
    assert session.replay.current.coord == (2, 2)


def test_load_replaces_grid():
    session = _session()
    session.load([[0, 1, 0], [0, 1, 0], [0, 0, 0]])
    assert session.result.cost == 4
    assert session.width == 3 and session.height == 3


def test_load_rejects_bad_grid():
    session = _session()
    with pytest.raises(InvalidGridError):
        session.load([[0, 0], [0]])
    assert session.grid == [[0, 0, 0], [0, 0, 0], [0, 0, 0]]


def test_toggle_with_zero_obstacle_value_restores_free_cell():
    session = PathSession([[1, 2], [1, 1]], (0, 0), (1, 1), obstacle_value=0, replay_interval=0)
    assert session.free_value == 1

    session.toggle(0, 1)
    assert session.grid[0][1] == 0
    session.toggle(0, 1)
    assert session.grid[0][1] == 2

    # a cell that started blocked is freed with the default free value
    session.load([[1, 0], [1, 1]])
    session.toggle(0, 1)
    assert session.grid[0][1] == 1
    session.toggle(0, 1)
    assert session.grid[0][1] == 0
