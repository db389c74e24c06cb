from flask import Blueprint, current_app, jsonify
from flask_login import login_required

from livebingo.services.boards import BoardError, InvalidBoardShape, UserNotFound, all_boards, get_board
from livebingo.services.boards.store import board_payload

boards = Blueprint('boards', __name__)


def _failure(exc: BoardError, op: str):
    if isinstance(exc, InvalidBoardShape):
        current_app.logger.error(f"[invalid-board] op={op} detail={exc}")
        return jsonify({'success': False, 'error': 'Board is corrupted'}), 500
    current_app.logger.warning(f"[{op}-failed] error={type(exc).__name__} detail={exc}")
    return jsonify({'success': False, 'error': 'Storage unavailable'}), 503


@boards.route('', methods=['GET'])
@login_required
def list_boards():
    """Full state of every board, for clients reconciling after a reconnect."""
    try:
        payload = [board_payload(name, cells) for name, cells in all_boards().items()]
    except BoardError as exc:
        return _failure(exc, 'list_boards')
    return jsonify(payload)


@boards.route('/<string:username>', methods=['GET'])
@login_required
def board_for_user(username):
    try:
        payload = board_payload(username, get_board(username))
    except UserNotFound:
        return jsonify({'success': False, 'error': 'User not found'}), 404
    except BoardError as exc:
        return _failure(exc, 'board_for_user')
    return jsonify(payload)
