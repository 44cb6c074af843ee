import numpy as np


def has_empty(grid):
    return bool(np.any(grid == 0))


def has_moves(grid):
    """현재 보드에서 가능한 움직임이 있는지 확인합니다."""
    if has_empty(grid):
        return True

    rows, cols = grid.shape
    for i in range(rows):
        for j in range(cols - 1):
            if grid[i, j] == grid[i, j + 1]:
                return True

    for i in range(rows - 1):
        for j in range(cols):
            if grid[i, j] == grid[i + 1, j]:
                return True

    return False


def max_tile(grid):
    return int(np.max(grid))


def reached(grid, tile):
    """보드에 tile 이상의 타일이 있는지 확인합니다."""
    return max_tile(grid) >= tile
