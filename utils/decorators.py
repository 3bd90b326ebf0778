"""
Decorators for the Incident Reporting application

This module contains decorator functions for authentication and other
cross-cutting concerns.
"""

from functools import wraps
from flask import abort, current_app
from .auth import get_current_user_id


def login_required(view_func):
    """Decorator to require an authenticated session"""
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        if not get_current_user_id():
            current_app.logger.info(f"Unauthenticated access to {view_func.__name__}")
            abort(401)
        return view_func(*args, **kwargs)

    return wrapper


def debug_only(view_func):
    """Decorator hiding development helpers outside debug mode"""
    @wraps(view_func)
    def wrapper(*args, **kwargs):
        if not current_app.debug:
            abort(404)
        return view_func(*args, **kwargs)

    return wrapper
