"""
Development routes for the Incident Reporting application

This module contains helpers for local development: signing in as an
arbitrary user id and seeding the category taxonomy. They return 404
outside debug mode.
"""

from flask import Blueprint, redirect, url_for, session, jsonify, current_app
from services.category_seed import seed_default_categories
from utils.auth import SESSION_USER_KEY
from utils.decorators import debug_only

# Create dev blueprint
dev_bp = Blueprint('dev', __name__)


@dev_bp.route("/dev/login/<user_id>")
@debug_only
def dev_login(user_id: str):
    session[SESSION_USER_KEY] = user_id
    current_app.logger.info(f"Development sign-in as {user_id}")
    return redirect(url_for("main.dashboard"))


@dev_bp.route("/dev/logout")
@debug_only
def dev_logout():
    session.pop(SESSION_USER_KEY, None)
    return redirect(url_for("report.new_report"))


@dev_bp.route("/dev/seed-categories")
@debug_only
def dev_seed_categories():
    created = seed_default_categories()
    return jsonify({"created": created})


def init_dev_routes():
    """Initialize dev routes"""
    return dev_bp
