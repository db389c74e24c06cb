from flask import current_app
from flask_socketio import join_room, leave_room

from livebingo import socketio
from .store import board_payload

NAMESPACE = '/ws'


class BoardChannel:
    """Publish/subscribe over a single shared Socket.IO room.

    Every viewer sees every board, so there is one topic and no per-user
    authorization on delivery. Delivery is fire-and-forget; a viewer that
    misses updates reconciles through the pull-style board query.
    """

    def __init__(self, topic: str = 'boards', namespace: str = NAMESPACE):
        self.topic = topic
        self.namespace = namespace

    def subscribe(self) -> None:
        # Must run inside a Socket.IO event handler
        join_room(self.topic)

    def unsubscribe(self) -> None:
        leave_room(self.topic)

    def publish(self, username: str, cells, bingo: bool = None) -> dict:
        payload = board_payload(username, cells, bingo)
        socketio.emit('updateBoard', payload, to=self.topic, namespace=self.namespace)
        current_app.logger.info(
            f"[broadcast] topic={self.topic} user={username} cells={len(payload['bingoItems'])} bingo={payload['hasBingo']}"
        )
        return payload


board_channel = BoardChannel()
