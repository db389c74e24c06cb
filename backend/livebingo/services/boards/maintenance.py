from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from livebingo import db
from livebingo.models import Cell
from livebingo.phrases import seed_phrases
from .errors import StorageUnavailable


def clear_all_boards() -> int:
    """Discard every board and make sure the phrase pool is seeded.

    Users are kept; each gets a new board through ``ensure`` on next login.
    Returns the number of cells removed.
    """
    try:
        removed = Cell.query.delete()
        db.session.commit()
        seed_phrases()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("[storage-error] op=clear_all_boards")
        raise StorageUnavailable('clear_all_boards')
    current_app.logger.info(f"[maintenance] cleared cells={removed}")
    return removed
