import logging
from dataclasses import dataclass, replace

import numpy as np

import config
from .direction import Direction
from .grid_engine import apply_move, new_grid
from .share import share_text
from .terminal import has_empty, has_moves, reached
from .tile_spawner import TileSpawner

logger = logging.getLogger(__name__)


def _freeze(grid):
    board = np.array(grid, dtype=int, copy=True)
    board.flags.writeable = False
    return board


@dataclass(frozen=True, eq=False)
class Session:
    """
    한 판의 게임 상태. 이동할 때마다 새 Session이 만들어지며 기존 값은 바뀌지 않습니다.

    Attributes:
        grid (np.ndarray): 읽기 전용 보드.
        score (int): 누적 점수.
        won (bool): 2048 타일에 한 번이라도 도달했는지 여부.
        over (bool): 더 이상 움직일 수 없는지 여부.
        moves (int): 보드를 실제로 바꾼 이동 횟수.
    """
    grid: np.ndarray
    score: int = 0
    won: bool = False
    over: bool = False
    moves: int = 0

    def __post_init__(self):
        # 호출자의 배열과 공유하지 않도록 항상 복사
        object.__setattr__(self, "grid", _freeze(self.grid))

    @property
    def status(self):
        if self.over:
            return "over"
        if self.won:
            return "won"
        return "playing"

    def same_as(self, other):
        """보드와 점수, 플래그가 모두 같은지 비교합니다."""
        return (
            np.array_equal(self.grid, other.grid)
            and self.score == other.score
            and self.won == other.won
            and self.over == other.over
            and self.moves == other.moves
        )


def init_session(spawner=None, size=config.BOARD_SIZE):
    """빈 보드에 타일 두 개를 놓아 새 게임을 시작합니다."""
    spawner = spawner or TileSpawner()
    board = new_grid(size)
    for _ in range(config.START_TILES):
        board, _pos = spawner.spawn(board)
    return Session(board)


def handle_move(session, direction, spawner=None):
    """
    이동 명령 하나를 처리하고 다음 Session을 반환합니다.
    게임이 끝났거나 보드가 바뀌지 않으면 입력 session을 그대로 돌려줍니다.
    """
    if session.over:
        return session

    direction = Direction.parse(direction)
    board, moved, gained = apply_move(session.grid, direction)
    if not moved:
        return session

    spawner = spawner or TileSpawner()
    board, _pos = spawner.spawn(board)
    won = session.won or reached(board, config.WIN_TILE)
    over = not has_empty(board) and not has_moves(board)
    logger.debug("%s 이동: +%d점", direction.name, gained)

    return replace(
        session,
        grid=board,
        score=session.score + gained,
        won=won,
        over=over,
        moves=session.moves + 1,
    )


class SessionController:
    """현재 Session 하나를 보관하고 이동 명령을 발행 순서대로 하나씩 적용합니다."""
    def __init__(self, spawner=None, size=config.BOARD_SIZE):
        self.spawner = spawner or TileSpawner()
        self.size = size
        self.session = None
        self.restart()

    def restart(self):
        self.session = init_session(self.spawner, self.size)
        logger.info("새 게임을 시작합니다.")
        return self.session

    def move(self, direction):
        previous = self.session
        self.session = handle_move(previous, direction, self.spawner)
        if self.session.won and not previous.won:
            logger.info("%d 타일 달성! 점수: %d", config.WIN_TILE, self.session.score)
        if self.session.over and not previous.over:
            logger.info("게임 오버. 최종 점수: %d (이동 %d회)", self.session.score, self.session.moves)
        return self.session

    def share_text(self):
        return share_text(self.session.score)
