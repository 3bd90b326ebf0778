"""
Authentication session accessor

Identity is established elsewhere; this application only reads the current
user's identifier from the Flask session.
"""

from flask import session

SESSION_USER_KEY = "user_id"


def get_current_user_id():
    """Return the authenticated user's identifier, or None when signed out"""
    user_id = session.get(SESSION_USER_KEY)
    return str(user_id) if user_id else None
