"""
ZK Game Controller

Handles the session-based proof game endpoints and the health check.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_service
from ..utils.errors import InvalidInput, UpstreamUnavailable
from ..utils.game_logger import game_logger

zk_bp = Blueprint('zk', __name__)


@zk_bp.route('/zk-wordle', methods=['POST'])
@require_service(get_game_service, 'Game')
def zk_wordle(service):
    """Dispatch start_game and validate_guess actions."""
    data = request.get_json(silent=True) or {}
    action = data.get('action')

    if action == 'start_game':
        return _start_game(service)
    if action == 'validate_guess':
        return _validate_guess(service, data.get('sessionId'), data.get('guess'))

    error_response = {'error': 'Invalid action'}
    game_logger.log_server_response(request, str(action), False, error_response)
    return jsonify(error_response), 400


def _start_game(service):
    try:
        game_logger.log_user_action(request, 'start_game')

        session = service.start_game()

        # Session id and commitment only; the word stays on the server
        response_data = {
            'sessionId': session.session_id,
            'zkProof': session.proof_bundle.to_dict(),
            'salt': service.salt
        }

        game_logger.log_server_response(
            request, 'start_game', True, response_data, session.session_id,
            word_length=session.proof_bundle.word_length
        )
        return jsonify(response_data)

    except UpstreamUnavailable as e:
        game_logger.log_error(request, e, 'start_game')
        return jsonify({'error': 'Failed to start game'}), 500


def _validate_guess(service, session_id, guess):
    try:
        game_logger.log_user_action(request, 'validate_guess', session_id, guess=guess)

        result = service.validate_guess(session_id, guess)
        response_data = result.to_dict()

        game_logger.log_server_response(
            request, 'validate_guess', True, response_data, session_id,
            is_winner=result.is_winner
        )

        if result.is_winner:
            game_logger.log_game_event(
                session_id, 'game_won', request.remote_addr, winning_guess=result.guess
            )
        elif result.word is not None:
            game_logger.log_game_event(
                session_id, 'game_lost', request.remote_addr, final_guess=result.guess
            )

        return jsonify(response_data)

    except InvalidInput as e:
        error_response = {'error': str(e)}
        game_logger.log_server_response(
            request, 'validate_guess', False, error_response, session_id,
            validation_error=str(e)
        )
        return jsonify(error_response), 400

    except UpstreamUnavailable as e:
        game_logger.log_error(request, e, 'validate_guess', session_id)
        return jsonify({'error': 'Invalid session - could not recreate'}), 404


@zk_bp.route('/zk-wordle/<session_id>', methods=['GET'])
@require_service(get_game_service, 'Game')
def get_session_state(session_id, service):
    """Get the public state of a session."""
    game_logger.log_user_action(request, 'get_state', session_id)

    state = service.get_session_state(session_id)
    if state is None:
        error_response = {'error': 'Session not found'}
        game_logger.log_server_response(request, 'get_state', False, error_response, session_id)
        return jsonify(error_response), 404

    game_logger.log_server_response(
        request, 'get_state', True, state, session_id, game_over=state['gameOver']
    )
    return jsonify(state)


@zk_bp.route('/zk-wordle/<session_id>', methods=['DELETE'])
@require_service(get_game_service, 'Game')
def delete_session(session_id, service):
    """Delete a session."""
    game_logger.log_user_action(request, 'delete_session', session_id)

    success = service.delete_session(session_id)
    if success:
        game_logger.log_game_event(session_id, 'session_deleted', request.remote_addr)

    return jsonify({'success': success})


@zk_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_sessions': game_service.active_sessions_count() if game_service else 0,
        'session_backend': type(game_service.session_store).__name__ if game_service else None,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
