from collections import namedtuple

import numpy as np

import config
from .direction import Direction, line_positions

MoveResult = namedtuple("MoveResult", ["grid", "moved", "gained"])


def new_grid(size=config.BOARD_SIZE):
    """비어있는 size x size 보드를 만듭니다."""
    return np.zeros((size, size), dtype=int)


def merge_line(line):
    """
    한 라인을 앞쪽으로 밀고 합칩니다.
    한 번 합쳐진 타일은 같은 이동에서 다시 합쳐지지 않습니다.

    Returns:
        list: 길이가 유지된 결과 라인.
        int: 합쳐지면서 얻은 점수.
    """
    tiles = [int(v) for v in line if v != 0]
    merged = []
    gained = 0
    j = 0
    while j < len(tiles):
        if j + 1 < len(tiles) and tiles[j] == tiles[j + 1]:
            new_value = tiles[j] * 2
            merged.append(new_value)
            gained += new_value
            j += 2
        else:
            merged.append(tiles[j])
            j += 1
    merged += [0] * (len(line) - len(merged))
    return merged, gained


def apply_move(grid, direction):
    """
    주어진 방향으로 보드를 움직인 결과를 반환합니다. 입력 보드는 변경하지 않습니다.

    Returns:
        MoveResult: (새 보드, 변화 여부, 획득 점수)
    """
    direction = Direction.parse(direction)
    size = grid.shape[0]
    new_board = np.array(grid, dtype=int, copy=True)
    gained = 0

    for idx in range(size):
        positions = line_positions(idx, direction, size)
        line = [new_board[pos] for pos in positions]
        merged, line_score = merge_line(line)
        gained += line_score
        for pos, value in zip(positions, merged):
            new_board[pos] = value

    moved = not np.array_equal(grid, new_board)
    return MoveResult(new_board, moved, gained)
