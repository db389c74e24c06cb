from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user
from sqlalchemy.exc import SQLAlchemyError

from livebingo import db, wants_json
from livebingo.models import User
from livebingo.services.boards import (
    BoardError, CellNotFound, InvalidBoardShape, all_boards, ensure, provision, toggle,
)
from livebingo.services.boards.channel import board_channel
from livebingo.services.boards.maintenance import clear_all_boards
from livebingo.services.boards.store import board_payload

main = Blueprint('main', __name__)

MAX_USERNAME_LENGTH = 50


def _request_data():
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form


def _error_status(exc: BoardError) -> int:
    if isinstance(exc, CellNotFound):
        return 404
    if isinstance(exc, InvalidBoardShape):
        return 500
    return 503


def _log_board_error(exc: BoardError, op: str) -> None:
    actor = current_user.username if current_user.is_authenticated else None
    if isinstance(exc, InvalidBoardShape):
        current_app.logger.error(f"[invalid-board] op={op} user={actor} detail={exc}")
    else:
        current_app.logger.warning(f"[{op}-failed] user={actor} error={type(exc).__name__} detail={exc}")


def _entry_form(message, status=200):
    if wants_json():
        return jsonify({'success': False, 'message': message}), status
    return render_template('index.html', message=message), status


@main.route('/')
def index():
    return render_template('index.html', message=None)


@main.route('/auth', methods=['POST'])
def auth():
    data = _request_data()
    username = (data.get('username') or '').strip()
    password = data.get('password') or ''
    if not username or not password:
        return _entry_form('Username and password are required.', 400)
    if len(username) > MAX_USERNAME_LENGTH:
        return _entry_form(f'Usernames are limited to {MAX_USERNAME_LENGTH} characters.', 400)

    try:
        user = User.query.filter_by(username=username).first()
        if user:
            if not user.check_password(password):
                return _entry_form('Incorrect password. Please try again.', 401)
            # Repeat logins keep the board in progress
            ensure(username)
            created = False
        else:
            user = User(username=username)
            user.set_password(password)
            db.session.add(user)
            # The account and its first board commit together
            provision(username)
            created = True
    except BoardError as exc:
        db.session.rollback()
        current_app.logger.warning(f"[auth-failed] user={username} error={type(exc).__name__} detail={exc}")
        return _entry_form('An error occurred. Please try again.', 503)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception(f"[auth-error] user={username}")
        return _entry_form('An error occurred. Please try again.', 500)

    login_user(user)
    current_app.logger.info(f"[auth] user={username} created={created}")
    if wants_json():
        return jsonify({'success': True, 'user': user.to_dict()}), 201 if created else 200
    return redirect(url_for('main.bingo'))


@main.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    if wants_json():
        return jsonify({'success': True})
    return redirect(url_for('main.index'))


@main.route('/bingo')
@login_required
def bingo():
    try:
        boards = [board_payload(name, cells) for name, cells in all_boards().items()]
    except BoardError as exc:
        _log_board_error(exc, 'bingo_page')
        if wants_json():
            return jsonify({'success': False, 'error': 'Could not load boards'}), _error_status(exc)
        return redirect(url_for('main.index'))
    if wants_json():
        return jsonify({'username': current_user.username, 'boards': boards})
    return render_template('bingo.html', username=current_user.username, boards=boards)


@main.route('/bingo/toggle', methods=['POST'])
@login_required
def toggle_cell():
    cell_id = _request_data().get('id')
    username = current_user.username
    try:
        cells, has_bingo = toggle(username, cell_id)
        payload = board_channel.publish(username, cells, has_bingo)
    except BoardError as exc:
        _log_board_error(exc, 'toggle')
        if wants_json():
            return jsonify({'success': False, 'error': str(exc)}), _error_status(exc)
        return redirect(url_for('main.bingo'))
    if wants_json():
        return jsonify({'success': True, **payload})
    return redirect(url_for('main.bingo'))


@main.route('/bingo/reset', methods=['POST'])
@login_required
def reset_board():
    username = current_user.username
    try:
        cells = provision(username)
        payload = board_channel.publish(username, cells)
    except BoardError as exc:
        _log_board_error(exc, 'reset')
        if wants_json():
            return jsonify({'success': False, 'error': str(exc)}), _error_status(exc)
        return redirect(url_for('main.bingo'))
    if wants_json():
        return jsonify({'success': True, **payload})
    return redirect(url_for('main.bingo'))


@main.route('/clear-database', methods=['POST'])
def clear_database():
    password = _request_data().get('password')
    if password != current_app.config.get('MAINTENANCE_PASSWORD'):
        return jsonify({'error': 'Unauthorized: Incorrect password.'}), 401
    try:
        clear_all_boards()
    except BoardError as exc:
        _log_board_error(exc, 'clear_database')
        return jsonify({'error': 'Failed to clear database.'}), 500
    return jsonify({'success': True})
