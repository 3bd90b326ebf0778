"""
Report routes for the Incident Reporting application

This module contains the create/edit form pages and the report detail page.
"""

from flask import Blueprint, render_template, request, redirect, abort, current_app
from sqlalchemy.exc import NoResultFound

from extensions import limiter
from forms.report import ReportForm
from services.report_form import IncidentReportFormController
from services.report_service import ReportService
from utils.auth import get_current_user_id

# Create report blueprint
report_bp = Blueprint('report', __name__)


def _render_form(form, controller, status=200):
    return render_template(
        "report_form.html",
        form=form,
        is_editing=controller.is_editing,
        report_id=controller.report_id,
    ), status


def _report_for_editing(report_id):
    """Fetch a report for the edit page; only its owner may change it"""
    try:
        report = ReportService.fetch_report_with_assignments(report_id)
    except NoResultFound:
        abort(404)

    user_id = get_current_user_id()
    if user_id and report.user_id != user_id:
        current_app.logger.warning(f"User {user_id} denied edit of report {report_id}")
        abort(403)
    return report


def _handle_submit(form, controller):
    if not form.validate_on_submit():
        current_app.logger.info(f"Report form rejected: {form.errors}")
        return _render_form(form, controller, 400)

    target = controller.submit(form.submission_data())
    if target is None:
        # Keep the user's input on screen
        return _render_form(form, controller, 400)
    return redirect(target)


@report_bp.route("/reports/new", methods=["GET", "POST"])
@limiter.limit("20 per minute", methods=["POST"])
def new_report():
    controller = IncidentReportFormController()
    form = ReportForm()
    if request.method == "POST":
        return _handle_submit(form, controller)
    return _render_form(form, controller)


@report_bp.route("/reports/<report_id>/edit", methods=["GET", "POST"])
@limiter.limit("20 per minute", methods=["POST"])
def edit_report(report_id):
    _report_for_editing(report_id)
    controller = IncidentReportFormController(report_id=report_id)
    if request.method == "POST":
        return _handle_submit(ReportForm(), controller)

    try:
        values = controller.load()
    except NoResultFound:
        abort(404)
    return _render_form(ReportForm(data=values), controller)


@report_bp.route("/reports/<report_id>")
def report_detail(report_id):
    try:
        report = ReportService.fetch_report_with_assignments(report_id)
    except NoResultFound:
        abort(404)
    return render_template("report_detail.html", report=report)


def init_report_routes():
    """Initialize report routes"""
    return report_bp
