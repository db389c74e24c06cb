import random

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from livebingo import db
from livebingo.models import Cell
from livebingo.phrases import phrase_pool
from .errors import PoolExhausted, StorageUnavailable, UserNotFound
from .store import get_board, user_or_raise
from .win import CELL_COUNT


def _sample_phrases(rng=random):
    pool = phrase_pool()
    if len(pool) < CELL_COUNT:
        raise PoolExhausted(len(pool), CELL_COUNT)
    # Sample order doubles as the board layout
    return rng.sample(pool, CELL_COUNT)


def provision(username: str, rng=random):
    """Replace the user's board with a fresh random sample of 25 phrases.

    The old cells are deleted and the new ones inserted in one transaction,
    so readers see either the old board or the new one.
    Anything the caller has pending in the session (e.g. a new user row)
    commits with the board or rolls back with it.
    """
    try:
        phrases = _sample_phrases(rng)
        user = user_or_raise(username)
        Cell.query.filter_by(user_id=user.id).delete()
        db.session.add_all([
            Cell(user_id=user.id, phrase=phrase, checked=False, position=index)
            for index, phrase in enumerate(phrases)
        ])
        db.session.commit()
    except (PoolExhausted, UserNotFound):
        db.session.rollback()
        raise
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[storage-error] op=provision user={username}")
        raise StorageUnavailable('provision', username)
    current_app.logger.info(f"[provision] user={username} cells={len(phrases)}")
    return get_board(username)


def ensure(username: str, rng=random):
    """Provision only if the user has no cells; otherwise return the board as is."""
    try:
        user = user_or_raise(username)
        has_cells = db.session.query(Cell.id).filter_by(user_id=user.id).first() is not None
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[storage-error] op=ensure user={username}")
        raise StorageUnavailable('ensure', username)
    if has_cells:
        return get_board(username)
    return provision(username, rng=rng)
