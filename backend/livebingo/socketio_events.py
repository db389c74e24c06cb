from flask import current_app
from flask_login import current_user
from flask_socketio import emit

from livebingo import socketio
from livebingo.services.boards import BoardError, CellNotFound, InvalidBoardShape, toggle
from livebingo.services.boards.channel import NAMESPACE, board_channel


def handle_connect(auth=None):
    # Every viewer watches every board
    board_channel.subscribe()
    emit('connected', {'message': f'Connected to {NAMESPACE}', 'topic': board_channel.topic})


def handle_disconnect(reason=None):
    board_channel.unsubscribe()


def handle_cell_clicked(data):
    """Toggle one of the caller's own cells and broadcast the new board."""
    data = data or {}
    if not current_user.is_authenticated:
        emit('error', {'message': 'Authentication required'})
        return
    username = current_user.username
    claimed = data.get('username')
    if claimed and claimed != username:
        current_app.logger.warning(f"[toggle-forbidden] user={username} claimed={claimed} cell={data.get('id')}")
        emit('error', {'message': 'Cannot toggle another player\'s board'})
        return
    if data.get('id') is None:
        emit('error', {'message': 'id is required'})
        return

    try:
        cells, has_bingo = toggle(username, data.get('id'))
        board_channel.publish(username, cells, has_bingo)
    except CellNotFound:
        emit('error', {'message': 'Cell not found', 'id': data.get('id')})
    except InvalidBoardShape as exc:
        current_app.logger.error(f"[invalid-board] op=cellClicked user={username} detail={exc}")
        emit('error', {'message': 'Board is corrupted'})
    except BoardError as exc:
        current_app.logger.warning(f"[cellClicked-failed] user={username} error={type(exc).__name__}")
        emit('error', {'message': 'Could not update board'})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the board namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('cellClicked', handle_cell_clicked, namespace=NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=NAMESPACE)
