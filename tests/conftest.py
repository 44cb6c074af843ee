import numpy as np
import pytest

from game.tile_spawner import TileSpawner


class ScriptedRandom:
    """정해진 순서대로 값을 돌려주는 난수원. 값이 떨어지면 테스트가 실패합니다."""
    def __init__(self, floats=(), indices=()):
        self.floats = list(floats)
        self.indices = list(indices)

    def random(self):
        assert self.floats, "unexpected random() draw"
        return self.floats.pop(0)

    def randrange(self, n):
        assert self.indices, "unexpected randrange() draw"
        index = self.indices.pop(0)
        assert 0 <= index < n
        return index


@pytest.fixture
def scripted():
    def make(floats=(), indices=()):
        return TileSpawner(rng=ScriptedRandom(floats, indices))
    return make


@pytest.fixture
def grid():
    """중첩 리스트로 보드를 만드는 함수를 돌려줍니다."""
    def make(rows):
        return np.array(rows, dtype=int)
    return make
