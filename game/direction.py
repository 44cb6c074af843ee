import numbers
from enum import IntEnum


class Direction(IntEnum):
    """이동 방향. 0:상, 1:하, 2:좌, 3:우"""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @classmethod
    def parse(cls, value):
        """Direction, 정수 코드, 또는 이름("up", "Left" 등)을 Direction으로 변환합니다."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"알 수 없는 방향입니다: {value!r}") from None
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            return cls(int(value))
        raise ValueError(f"알 수 없는 방향입니다: {value!r}")


def line_positions(idx, direction, size):
    """
    idx번째 라인의 좌표를 이동 방향의 진행 순서대로 반환합니다.
    타일이 모이는 가장자리가 항상 리스트의 앞쪽에 옵니다.
    """
    if direction == Direction.UP:  # Up: top->bottom
        return [(r, idx) for r in range(size)]
    elif direction == Direction.DOWN:  # Down: bottom->top
        return [(r, idx) for r in reversed(range(size))]
    elif direction == Direction.LEFT:  # Left: left->right
        return [(idx, c) for c in range(size)]
    else:  # Right: right->left
        return [(idx, c) for c in reversed(range(size))]
