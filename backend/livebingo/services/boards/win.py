from typing import Iterable, List

from .errors import InvalidBoardShape

BOARD_SIZE = 5
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def grid_from_cells(cells: Iterable) -> List[List[bool]]:
    """Rebuild the row-major 5x5 checked grid from a board's cells.

    Raises InvalidBoardShape unless there are exactly 25 cells whose
    positions are a permutation of 0..24.
    """
    cells = list(cells)
    if len(cells) != CELL_COUNT:
        raise InvalidBoardShape(f'Board has {len(cells)} cells; expected {CELL_COUNT}')
    positions = sorted(c.position for c in cells if c.position is not None)
    if positions != list(range(CELL_COUNT)):
        raise InvalidBoardShape(f'Board positions are not a permutation of 0..{CELL_COUNT - 1}')

    grid = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for cell in cells:
        row, col = divmod(cell.position, BOARD_SIZE)
        grid[row][col] = bool(cell.checked)
    return grid


def has_bingo(cells: Iterable) -> bool:
    """True if any row, column or diagonal of the board is fully checked."""
    grid = grid_from_cells(cells)
    n = BOARD_SIZE

    # Rows
    if any(all(row) for row in grid):
        return True

    # Columns
    if any(all(grid[r][c] for r in range(n)) for c in range(n)):
        return True

    # Diagonals
    if all(grid[i][i] for i in range(n)):
        return True
    return all(grid[i][n - 1 - i] for i in range(n))
