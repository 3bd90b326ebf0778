"""
Report data service for the Incident Reporting application

This module wraps the create/update/insert operations on reports, category
assignments and evidence. Database errors roll back the session and are
re-raised unchanged to the caller.
"""

from flask import current_app
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import selectinload

# These will be set by init_report_service()
db = None
Report = None
MainCategory = None
Subcategory = None
CategoryAssignment = None
Evidence = None

EVIDENCE_FIELDS = ("file_url", "file_type", "description", "report_id", "uploaded_by")


class ReportService:
    """Stateless data-access operations for reports"""

    @staticmethod
    def create_report(report_data: dict):
        """Insert a report and return the stored row"""
        try:
            report = Report(**report_data)
            db.session.add(report)
            db.session.commit()
            return report
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update_report(report_id: str, report_data: dict):
        """Update a report by id and return the stored row"""
        try:
            report = ReportService._get_report(report_id)
            for key, value in report_data.items():
                setattr(report, key, value)
            db.session.commit()
            return report
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def save_evidence(evidence_data: list) -> None:
        """Bulk insert evidence rows"""
        try:
            db.session.add_all([
                Evidence(**{field: evidence.get(field) for field in EVIDENCE_FIELDS})
                for evidence in evidence_data
            ])
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def insert_category_assignments(assignments: list) -> None:
        """Bulk insert report/subcategory assignment rows"""
        try:
            db.session.add_all([CategoryAssignment(**row) for row in assignments])
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update_report_with_categories(report_id: str, report_data: dict, categories: list):
        """
        Update a report and replace all of its category assignments in one
        transaction. Either both changes are committed or neither is.
        """
        try:
            report = ReportService._get_report(report_id)
            for key, value in report_data.items():
                setattr(report, key, value)

            # Replacing the collection deletes the previous rows (delete-orphan)
            report.category_assignments = [
                CategoryAssignment(
                    subcategory_id=category["subcategory_id"],
                    main_category_id=category["main_category_id"],
                    is_primary=category.get("is_primary", False),
                )
                for category in categories
            ]
            db.session.commit()
            current_app.logger.info(
                f"Report {report_id} updated with {len(categories)} category assignments"
            )
            return report
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def fetch_report_with_assignments(report_id: str):
        """Select a single report with its category assignments"""
        report = (
            Report.query
            .options(selectinload(Report.category_assignments))
            .filter(Report.id == report_id)
            .one()
        )
        return report

    @staticmethod
    def list_reports_for_user(user_id: str) -> list:
        return (
            Report.query
            .filter(Report.user_id == user_id)
            .order_by(Report.created_at.desc())
            .all()
        )

    @staticmethod
    def list_main_categories() -> list:
        return MainCategory.query.order_by(MainCategory.name).all()

    @staticmethod
    def list_subcategories() -> list:
        return Subcategory.query.order_by(Subcategory.main_category_id, Subcategory.name).all()

    @staticmethod
    def _get_report(report_id: str):
        report = db.session.get(Report, report_id)
        if report is None:
            raise NoResultFound(f"No report with id {report_id}")
        return report


def create_report(report_data: dict):
    return ReportService.create_report(report_data)


def update_report(report_id: str, report_data: dict):
    return ReportService.update_report(report_id, report_data)


def save_evidence(evidence_data: list) -> None:
    return ReportService.save_evidence(evidence_data)


def init_report_service(database_instance, models):
    """Initialize the report service with required dependencies"""
    global db, Report, MainCategory, Subcategory, CategoryAssignment, Evidence

    db = database_instance
    Report = models['Report']
    MainCategory = models['MainCategory']
    Subcategory = models['Subcategory']
    CategoryAssignment = models['CategoryAssignment']
    Evidence = models['Evidence']
