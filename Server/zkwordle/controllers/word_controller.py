"""
Word Controller

Handles the word-of-day publication and the plain guess check.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_service
from ..utils.errors import InvalidInput, UpstreamUnavailable
from ..utils.game_logger import game_logger

word_bp = Blueprint('word', __name__)


@word_bp.route('/word-of-day', methods=['GET'])
@require_service(get_game_service, 'Game')
def word_of_day(service):
    """Publish today's commitment bundle, position hashes and salt."""
    try:
        game_logger.log_user_action(request, 'word_of_day')

        response_data = service.get_published_bundle()

        game_logger.log_server_response(request, 'word_of_day', True, response_data)
        return jsonify(response_data)

    except UpstreamUnavailable as e:
        game_logger.log_error(request, e, 'word_of_day')
        return jsonify({
            'error': 'Word fetch failed',
            'message': "Unable to fetch today's word."
        }), 500


@word_bp.route('/wordle', methods=['POST'])
@require_service(get_game_service, 'Game')
def check_guess(service):
    """Check a guess against today's word or a practice word."""
    data = request.get_json(silent=True) or {}
    guess = data.get('guess')
    game_id = data.get('gameId')

    try:
        game_logger.log_user_action(request, 'check_guess', game_id=game_id)

        response_data = service.check_plaintext_guess(guess, game_id)

        game_logger.log_server_response(request, 'check_guess', True, response_data)
        return jsonify(response_data)

    except InvalidInput as e:
        error_response = {'error': str(e)}
        game_logger.log_server_response(request, 'check_guess', False, error_response)
        return jsonify(error_response), 400

    except UpstreamUnavailable as e:
        game_logger.log_error(request, e, 'check_guess')
        return jsonify({'error': 'Service unavailable'}), 500


@word_bp.route('/wordle', methods=['GET'])
@require_service(get_game_service, 'Game')
def word_service_ready(service):
    """Report readiness without exposing the word."""
    return jsonify({
        'ready': True,
        'date': service.word_service.today_key()
    })
