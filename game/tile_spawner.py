import logging
import random

import numpy as np

import config

logger = logging.getLogger(__name__)


def empty_cells(grid):
    """비어있는 타일의 위치를 (행, 열) 튜플 리스트로 반환합니다."""
    return [(int(r), int(c)) for r, c in zip(*np.where(grid == 0))]


class TileSpawner:
    """
    빈 칸 하나를 골라 새 타일(2 또는 4)을 놓습니다.

    rng는 random()과 randrange(n)을 제공하는 객체면 됩니다.
    기본값은 random.Random이며, 테스트에서는 정해진 값을 돌려주는 객체를 주입합니다.
    """
    def __init__(self, rng=None, seed=None,
                 values=config.TILE_VALUES, probabilities=config.TILE_PROBABILITIES):
        self.rng = rng if rng is not None else random.Random(seed)
        self.values = tuple(values)
        self.probabilities = tuple(probabilities)

    def pick_value(self):
        """한 번의 난수를 누적 확률 [0.9, 1.0]과 비교해 타일 값을 정합니다."""
        draw = self.rng.random()
        cumulative = 0.0
        for value, probability in zip(self.values, self.probabilities):
            cumulative += probability
            if draw < cumulative:
                return value
        return self.values[0]

    def spawn(self, grid):
        """
        새 타일을 놓은 보드 사본과 그 위치를 반환합니다.
        빈 칸이 없으면 보드를 그대로 복사하고 위치는 None입니다.
        """
        new_board = np.array(grid, dtype=int, copy=True)
        empties = empty_cells(new_board)
        if not empties:
            return new_board, None

        pos = empties[self.rng.randrange(len(empties))]
        value = self.pick_value()
        new_board[pos] = value
        logger.debug("새 타일 %d 배치: %s", value, pos)
        return new_board, pos
