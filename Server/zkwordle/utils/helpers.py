"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict


def get_user_identity(request_obj) -> Dict[str, Any]:
    """Extract user identity information from a request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    session_id = None
    get_json = getattr(request_obj, 'get_json', None)
    if get_json is not None:
        data = get_json(silent=True)
        if isinstance(data, dict):
            session_id = data.get('sessionId')

    return {
        'user_ip': user_ip,
        'session_id': session_id
    }
