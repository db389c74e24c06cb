class BoardError(Exception):
    """Base class for board failures surfaced to callers."""


class PoolExhausted(BoardError):
    """The phrase pool holds fewer phrases than a board needs."""

    def __init__(self, available: int, required: int):
        super().__init__(f'Phrase pool has {available} phrases; {required} are required')
        self.available = available
        self.required = required


class InvalidBoardShape(BoardError):
    """A board broke the 25-cell / positions 0..24 invariant."""


class CellNotFound(BoardError):
    """The cell does not exist or is not owned by the acting user."""

    def __init__(self, username: str, cell_id):
        super().__init__(f'Cell {cell_id} not found on board of {username}')
        self.username = username
        self.cell_id = cell_id


class StorageUnavailable(BoardError):
    """The database rejected or failed a board operation."""

    def __init__(self, operation: str, username: str = None):
        super().__init__(f'Storage failure during {operation}')
        self.operation = operation
        self.username = username


class UserNotFound(BoardError):
    """No user with that username exists."""

    def __init__(self, username: str):
        super().__init__(f'Unknown user {username!r}')
        self.username = username
