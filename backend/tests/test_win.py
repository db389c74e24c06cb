from types import SimpleNamespace

import pytest

from livebingo.services.boards.errors import InvalidBoardShape
from livebingo.services.boards.win import grid_from_cells, has_bingo

ROWS = [[r * 5 + c for c in range(5)] for r in range(5)]
COLUMNS = [[r * 5 + c for r in range(5)] for c in range(5)]
DIAGONALS = [[0, 6, 12, 18, 24], [4, 8, 12, 16, 20]]
WINNING_LINES = ROWS + COLUMNS + DIAGONALS


def board(checked_positions=(), order=None):
    positions = order if order is not None else list(range(25))
    return [SimpleNamespace(position=p, checked=p in set(checked_positions)) for p in positions]


def test_there_are_twelve_winning_lines():
    assert len(WINNING_LINES) == 12
    assert len({tuple(line) for line in WINNING_LINES}) == 12


@pytest.mark.parametrize('line', WINNING_LINES)
def test_each_winning_line_is_a_bingo(line):
    assert has_bingo(board(line)) is True


@pytest.mark.parametrize('line', WINNING_LINES)
def test_line_missing_one_cell_is_not_a_bingo(line):
    for missing in line:
        partial = [p for p in line if p != missing]
        assert has_bingo(board(partial)) is False


def test_empty_board_has_no_bingo():
    assert has_bingo(board()) is False


def test_dense_board_without_a_full_line():
    # The anti-diagonal breaks every row, every column and both diagonals
    anti = set(DIAGONALS[1])
    checked = [p for p in range(25) if p not in anti]
    assert len(checked) == 20
    assert has_bingo(board(checked)) is False


def test_cell_order_does_not_matter():
    shuffled = [7, 3, 24, 0, 12, 18, 5, 1, 9, 22, 14, 2, 20, 16, 4, 11, 23, 6, 19, 10, 13, 8, 21, 15, 17]
    assert has_bingo(board(ROWS[3], order=shuffled)) is True
    assert has_bingo(board(ROWS[3][:4], order=shuffled)) is False


def test_grid_is_row_major():
    grid = grid_from_cells(board([7]))
    assert grid[1][2] is True
    assert sum(v for row in grid for v in row) == 1


@pytest.mark.parametrize('order', [
    list(range(24)),
    list(range(26)),
    list(range(24)) + [23],
    list(range(1, 26)),
    list(range(24)) + [None],
])
def test_malformed_boards_are_rejected(order):
    with pytest.raises(InvalidBoardShape):
        has_bingo(board(order=order))
