import dataclasses

import numpy as np
import pytest

from game.direction import Direction
from game.session import Session, SessionController, handle_move, init_session
from game.tile_spawner import TileSpawner

# 오른쪽으로 밀면 (3, 0) 한 칸만 비는 보드
NEARLY_BLOCKED = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [8, 16, 0, 32],
]


def test_init_session_spawns_two_tiles(scripted):
    session = init_session(scripted(floats=[0.5, 0.95], indices=[0, 0]))
    assert session.grid.shape == (4, 4)
    assert session.grid[0, 0] == 2
    assert session.grid[0, 1] == 4
    assert np.count_nonzero(session.grid) == 2
    assert session.score == 0
    assert not session.won
    assert not session.over
    assert session.status == "playing"


def test_effective_move_spawns_and_scores(scripted, grid):
    session = Session(grid([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
    spawner = scripted(floats=[0.1], indices=[0])
    after = handle_move(session, Direction.RIGHT, spawner)
    assert after.grid.tolist()[0] == [2, 0, 0, 4]
    assert after.score == 4
    assert after.moves == 1
    assert session.score == 0
    assert session.grid.tolist()[0] == [2, 2, 0, 0]


def test_ineffective_move_returns_same_session(scripted, grid):
    session = Session(grid([[2, 4, 8, 16], [0] * 4, [0] * 4, [0] * 4]), score=12)
    # 난수를 소비하면 ScriptedRandom이 실패
    after = handle_move(session, "left", scripted())
    assert after is session
    assert after.same_as(Session(grid([[2, 4, 8, 16], [0] * 4, [0] * 4, [0] * 4]), score=12))
    assert after.score == 12


def test_game_over_detected_after_spawn(scripted, grid):
    session = Session(grid(NEARLY_BLOCKED), score=100)
    after = handle_move(session, Direction.RIGHT, scripted(floats=[0.95], indices=[0]))
    assert after.grid.tolist()[3] == [4, 8, 16, 32]
    assert after.over
    assert after.status == "over"
    assert after.score == 100


def test_spawn_that_leaves_a_pair_is_not_over(scripted, grid):
    session = Session(grid(NEARLY_BLOCKED))
    after = handle_move(session, Direction.RIGHT, scripted(floats=[0.5], indices=[0]))
    assert after.grid.tolist()[3] == [2, 8, 16, 32]
    assert not after.over


def test_moves_after_game_over_are_ignored(scripted, grid):
    blocked = Session(grid(NEARLY_BLOCKED), over=True)
    for direction in Direction:
        assert handle_move(blocked, direction, scripted()) is blocked


def test_win_flag_latches(scripted, grid):
    session = Session(grid([[1024, 1024, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
    won = handle_move(session, Direction.LEFT, scripted(floats=[0.5], indices=[0]))
    assert won.won
    assert won.score == 2048
    assert won.status == "won"

    later = handle_move(won, Direction.RIGHT, scripted(floats=[0.5], indices=[0]))
    assert later.won


def test_full_grid_scenario_reaches_game_over(grid):
    session = Session(grid([
        [2, 2, 2, 2],
        [4, 4, 4, 4],
        [8, 8, 8, 8],
        [16, 16, 16, 16],
    ]))
    spawner = TileSpawner(seed=3)
    for _ in range(100000):
        if session.over:
            break
        for direction in Direction:
            after = handle_move(session, direction, spawner)
            if after is not session:
                session = after
                break
    assert session.over
    assert not np.any(session.grid == 0)


def test_session_is_immutable():
    session = Session(np.zeros((4, 4), dtype=int))
    with pytest.raises(ValueError):
        session.grid[0, 0] = 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.score = 10


def test_session_copies_caller_grid():
    board = np.zeros((4, 4), dtype=int)
    session = Session(board)
    board[0, 0] = 2
    assert session.grid[0, 0] == 0


def test_session_copies_read_only_view():
    board = np.zeros((4, 4), dtype=int)
    view = board.view()
    view.flags.writeable = False
    session = Session(view)
    board[0, 0] = 2
    assert session.grid[0, 0] == 0
    assert not np.shares_memory(session.grid, board)


def test_session_accepts_list_grid():
    session = Session([[0] * 4 for _ in range(4)])
    assert isinstance(session.grid, np.ndarray)
    assert session.grid.shape == (4, 4)
    assert not session.grid.flags.writeable


def test_snapshots_do_not_share_grids(scripted, grid):
    session = Session(grid([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]))
    after = handle_move(session, Direction.LEFT, scripted(floats=[0.5], indices=[0]))
    assert not np.shares_memory(session.grid, after.grid)
    assert not after.grid.flags.writeable


def test_controller_tracks_session(scripted):
    spawner = scripted(floats=[0.5, 0.5, 0.5], indices=[0, 0, 0])
    controller = SessionController(spawner)
    start = controller.session
    assert start.grid.tolist()[0] == [2, 2, 0, 0]

    after = controller.move("left")
    assert after is controller.session
    assert after.grid.tolist()[0] == [4, 2, 0, 0]
    assert after.score == 4
    assert controller.share_text().startswith("I scored 4 in 2048!")


def test_controller_restart():
    controller = SessionController(TileSpawner(seed=11))
    controller.move(Direction.LEFT)
    controller.move(Direction.UP)
    session = controller.restart()
    assert session.score == 0
    assert session.moves == 0
    assert np.count_nonzero(session.grid) == 2
