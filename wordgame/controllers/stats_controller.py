"""
Stats Controller

Read-only statistics and daily-challenge endpoints, plus settings toggles.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.session_service import get_session_engine
from ..services.settings_service import get_settings_store
from ..services.stats_service import get_stats_store
from ..services.word_source import date_key
from ..utils.game_logger import game_logger

stats_bp = Blueprint('stats', __name__)


def _service_unavailable(name):
    return jsonify({
        'success': False,
        'error': f'{name} unavailable'
    }), 500


@stats_bp.route('/stats', methods=['GET'])
def get_stats():
    """Lifetime statistics snapshot."""
    stats_store = get_stats_store()
    if not stats_store:
        return _service_unavailable('Stats service')

    stats = stats_store.stats
    return jsonify({
        'success': True,
        'stats': {**stats.to_dict(), 'win_percentage': stats.win_percentage}
    })


@stats_bp.route('/daily', methods=['GET'])
def get_daily():
    """Today's daily challenge and whether it has been completed."""
    stats_store = get_stats_store()
    engine = get_session_engine()
    if not stats_store or not engine:
        return _service_unavailable('Stats service')

    today = stats_store.today()
    record = stats_store.daily_record()
    challenge = engine.word_source.daily_challenge(today)

    return jsonify({
        'success': True,
        'date': date_key(today),
        'completed': stats_store.is_daily_completed(today),
        'record': record.to_dict() if record else None,
        'challenge': asdict(challenge)
    })


@stats_bp.route('/settings', methods=['GET'])
def get_settings():
    settings_store = get_settings_store()
    if not settings_store:
        return _service_unavailable('Settings service')
    return jsonify({'success': True, 'settings': settings_store.settings.to_dict()})


@stats_bp.route('/settings/<name>/toggle', methods=['POST'])
def toggle_setting(name):
    """Flip one of dark_mode, colorblind_mode or sound."""
    settings_store = get_settings_store()
    if not settings_store:
        return _service_unavailable('Settings service')

    game_logger.log_user_action(request, 'toggle_setting', setting=name)
    try:
        settings = settings_store.toggle(name)
    except KeyError:
        error_response = {
            'success': False,
            'error': f'Unknown setting: {name}'
        }
        game_logger.log_server_response(request, 'toggle_setting', False, error_response)
        return jsonify(error_response), 404

    response_data = {'success': True, 'settings': settings.to_dict()}
    game_logger.log_server_response(request, 'toggle_setting', True, response_data)
    return jsonify(response_data)
