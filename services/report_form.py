"""
Incident report form controller

Loads an existing report into form values when editing and runs the submit
workflow: validate identity, write the report, write its category
assignments, upload evidence files and record them.
"""

from datetime import date, datetime, timezone

from flask import current_app, url_for

from services.report_service import ReportService
from utils.auth import get_current_user_id
from utils.notifications import notify, SEVERITY_DESTRUCTIVE

GENERIC_ERROR = "Something went wrong. Please try again."
LOGIN_REQUIRED_ERROR = "You must be logged in to submit a report"


def to_date_string(value) -> str:
    """Calendar-date string (YYYY-MM-DD) of the incident date"""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(str(value)).isoformat()


class IncidentReportFormController:
    """Form state owner for creating (no id) or editing (id) a report"""

    def __init__(self, report_id=None, user_id=None, storage=None):
        self.report_id = report_id
        self._user_id = user_id
        self._storage = storage

    @property
    def is_editing(self) -> bool:
        return bool(self.report_id)

    @property
    def user_id(self):
        return self._user_id if self._user_id is not None else get_current_user_id()

    @property
    def storage(self):
        return self._storage if self._storage is not None else current_app.evidence_storage

    def load(self):
        """Fetch the report being edited and return its form values"""
        if not self.report_id:
            return None

        current_app.logger.info(f"Fetching report data for ID: {self.report_id}")
        try:
            report = ReportService.fetch_report_with_assignments(self.report_id)
        except Exception as e:
            current_app.logger.error(f"Error fetching report {self.report_id}: {e}")
            raise

        return {
            "title": report.title or "",
            "description": report.description or "",
            "incident_date": report.incident_date or date.today(),
            "incident_time": report.incident_time or "",
            "location": report.location or "",
            "main_category_id": report.main_category_id or "",
            "categories": report.subcategory_ids(),
            "files": None,
        }

    def submit(self, data: dict):
        """
        Run the submit workflow. Returns the URL to navigate to on success,
        or None when the form should stay where it is.
        """
        user_id = self.user_id
        if not user_id:
            notify("Error", LOGIN_REQUIRED_ERROR, SEVERITY_DESTRUCTIVE)
            return None

        try:
            report_data = {
                "title": data["title"],
                "description": data["description"],
                "incident_date": to_date_string(data["incident_date"]),
                "incident_time": data.get("incident_time"),
                "location": data.get("location"),
                "main_category_id": data["main_category_id"],
                "user_id": user_id,
            }
            categories = list(data.get("categories") or [])

            if self.is_editing:
                self._update(report_data, categories, data["main_category_id"])
                notify("Success", "Report updated successfully")
            else:
                self._create(report_data, categories, data["main_category_id"], data.get("files"), user_id)
                notify("Success", "Report created successfully")
        except Exception:
            current_app.logger.exception("Form submission error")
            notify("Error", GENERIC_ERROR, SEVERITY_DESTRUCTIVE)
            return None

        return url_for("main.dashboard")

    def _update(self, report_data, categories, main_category_id):
        current_app.logger.info(f"Updating report: {self.report_id}")
        ReportService.update_report_with_categories(
            self.report_id,
            report_data,
            [
                {
                    "subcategory_id": subcategory_id,
                    "main_category_id": main_category_id,
                    "is_primary": False,
                }
                for subcategory_id in categories
            ],
        )

    def _create(self, report_data, categories, main_category_id, files, user_id):
        current_app.logger.info("Creating new report")
        report = ReportService.create_report(report_data)
        report_id = report.id

        if categories:
            ReportService.insert_category_assignments([
                {
                    "report_id": report_id,
                    "subcategory_id": subcategory_id,
                    "main_category_id": main_category_id,
                    "is_primary": False,
                }
                for subcategory_id in categories
            ])

        if files:
            uploaded_files = self.storage.upload_evidence_files(report_id, files, user_id)
            ReportService.save_evidence(uploaded_files)

        current_app.logger.info(
            f"Report {report_id} created with {len(categories)} categories and {len(files or [])} files"
        )
        return report
