"""
WebSocket Event Handlers

Pushes game state to subscribed clients after every state change.
"""

from flask_socketio import emit, join_room, leave_room
from ..models.game import GameSnapshot
from ..services.game_service import GameService
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import get_user_identity


def state_payload(snapshot: GameSnapshot) -> dict:
    return {
        'game_id': snapshot.game_id,
        'state': snapshot.to_public_dict(),
        'last_outcome': snapshot.last_outcome.value if snapshot.last_outcome else None
    }


def register_websocket_handlers(socketio, game_service: GameService):
    """Register all WebSocket event handlers and the state push listener."""

    def push_state(game_id: str, snapshot: GameSnapshot):
        socketio.emit('game_state', state_payload(snapshot), to=game_id)

    game_service.add_listener(push_state)

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game):
        """Subscribe this client to a game's state updates."""
        join_room(game.game_id)
        game_logger.log_game_event(
            game.game_id, 'client_joined', get_user_identity()['user_ip']
        )
        emit('game_state', state_payload(game.snapshot()))

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game):
        """Stop receiving a game's state updates."""
        leave_room(game.game_id)
        game_logger.log_game_event(
            game.game_id, 'client_left', get_user_identity()['user_ip']
        )
        emit('left_game', {'game_id': game.game_id})

    return push_state
