"""
Endpoint Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import jsonify


def require_service(service_getter, service_name: str):
    """
    Decorator to require an initialized service for an HTTP endpoint.

    The service returned by service_getter is passed to the view as the
    'service' keyword argument. A 500 response is returned if it is missing.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            service = service_getter()
            if not service:
                return jsonify({
                    'success': False,
                    'error': f'{service_name} service unavailable'
                }), 500

            kwargs['service'] = service
            return f(*args, **kwargs)

        return decorated_function

    return decorator
