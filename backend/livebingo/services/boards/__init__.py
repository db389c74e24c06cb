"""Board domain services: provisioning, toggling, win detection, broadcast.

This package holds the board logic imported by HTTP routes and socket
handlers, keeping transport concerns separated from board mechanics.
"""

from .errors import BoardError, CellNotFound, InvalidBoardShape, PoolExhausted, StorageUnavailable, UserNotFound
from .win import BOARD_SIZE, CELL_COUNT, has_bingo
from .provisioner import ensure, provision
from .store import all_boards, get_board, toggle

__all__ = [
    'BOARD_SIZE', 'CELL_COUNT',
    'BoardError', 'CellNotFound', 'InvalidBoardShape', 'PoolExhausted', 'StorageUnavailable', 'UserNotFound',
    'all_boards', 'ensure', 'get_board', 'has_bingo', 'provision', 'toggle',
]
