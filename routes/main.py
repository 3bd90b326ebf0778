"""
Main routes for the Incident Reporting application

This module contains the landing redirect and the user's dashboard, which
lists the user's reports.
"""

from flask import Blueprint, render_template, redirect, url_for
from services.report_service import ReportService
from utils.auth import get_current_user_id
from utils.decorators import login_required

# Create main blueprint
main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def index():
    return redirect(url_for("main.dashboard"))


@main_bp.route("/dashboard")
@login_required
def dashboard():
    reports = ReportService.list_reports_for_user(get_current_user_id())
    return render_template("dashboard.html", reports=reports)


def init_main_routes():
    """Initialize main routes"""
    return main_bp
