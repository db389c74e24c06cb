from collections import OrderedDict
from typing import Dict, List, Tuple

from flask import current_app
from sqlalchemy import func, not_
from sqlalchemy.exc import SQLAlchemyError

from livebingo import db
from livebingo.models import Cell, User
from .errors import CellNotFound, InvalidBoardShape, StorageUnavailable, UserNotFound
from .win import grid_from_cells, has_bingo

# Position first; identity order only for legacy rows without a position
_DISPLAY_ORDER = (func.coalesce(Cell.position, Cell.id), Cell.id)


def user_or_raise(username: str) -> User:
    user = User.query.filter_by(username=username).first()
    if user is None:
        raise UserNotFound(username)
    return user


def get_board(username: str) -> List[Cell]:
    """All of the user's cells, ordered for display."""
    try:
        user = user_or_raise(username)
        return Cell.query.filter_by(user_id=user.id).order_by(*_DISPLAY_ORDER).all()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[storage-error] op=get_board user={username}")
        raise StorageUnavailable('get_board', username)


def all_boards() -> Dict[str, List[Cell]]:
    """Every user's board keyed by username, users in signup order.

    Users without cells (e.g. after a maintenance reset) map to an empty list.
    """
    try:
        users = User.query.order_by(User.id).all()
        cells = Cell.query.order_by(Cell.user_id, *_DISPLAY_ORDER).all()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("[storage-error] op=all_boards")
        raise StorageUnavailable('all_boards')
    by_user = {u.id: [] for u in users}
    for cell in cells:
        by_user.setdefault(cell.user_id, []).append(cell)
    return OrderedDict((u.username, by_user[u.id]) for u in users)


def _parse_cell_id(username: str, cell_id) -> int:
    # Only a real integer or a string of ASCII digits names a cell
    if isinstance(cell_id, bool):
        raise CellNotFound(username, cell_id)
    if isinstance(cell_id, int):
        return cell_id
    if isinstance(cell_id, str) and cell_id.isascii() and cell_id.isdigit():
        return int(cell_id)
    raise CellNotFound(username, cell_id)


def toggle(username: str, cell_id) -> Tuple[List[Cell], bool]:
    """Flip one cell on the user's own board.

    The flip is a single conditional UPDATE, so concurrent toggles of the
    same cell serialize in the database and never read a stale value.
    A malformed board is rejected before anything is written.
    Returns the full updated board and its freshly computed win status.
    """
    cell_id = _parse_cell_id(username, cell_id)

    try:
        user = user_or_raise(username)
        cells = Cell.query.filter_by(user_id=user.id).all()
        if not any(c.id == cell_id for c in cells):
            raise CellNotFound(username, cell_id)
        grid_from_cells(cells)
        updated = (
            Cell.query
            .filter(Cell.id == cell_id, Cell.user_id == user.id)
            .update({Cell.checked: not_(Cell.checked)}, synchronize_session=False)
        )
        if updated != 1:
            raise CellNotFound(username, cell_id)
        db.session.commit()
    except (CellNotFound, InvalidBoardShape):
        db.session.rollback()
        raise
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[storage-error] op=toggle user={username} cell={cell_id}")
        raise StorageUnavailable('toggle', username)

    board = get_board(username)
    bingo = has_bingo(board)
    checked = next((c.checked for c in board if c.id == cell_id), None)
    current_app.logger.info(f"[toggle] user={username} cell={cell_id} checked={checked} bingo={bingo}")
    return board, bingo


def board_payload(username: str, cells: List[Cell], bingo: bool = None) -> dict:
    """Wire shape shared by HTTP responses and live broadcasts."""
    if bingo is None:
        # An empty board is legitimate between a maintenance reset and the next login
        bingo = has_bingo(cells) if cells else False
    return {
        'username': username,
        'bingoItems': [c.to_dict() for c in cells],
        'hasBingo': bingo,
    }
