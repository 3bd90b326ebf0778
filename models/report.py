"""
Report model for the Incident Reporting application

This module contains the main Report model and its lifecycle statuses.
"""

import uuid
from datetime import date, datetime

from sqlalchemy.orm import validates


class ReportStatus:
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


def create_report_model(db):
    """Create and return Report model class"""

    class Report(db.Model):
        __tablename__ = "reports"

        id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
        created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
        updated_at = db.Column(
            db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
        )

        title = db.Column(db.String(200), nullable=False)
        description = db.Column(db.Text, nullable=False)
        incident_date = db.Column(db.Date, nullable=True)
        incident_time = db.Column(db.String(16), nullable=True)
        location = db.Column(db.String(255), nullable=True)

        main_category_id = db.Column(
            db.Integer, db.ForeignKey("case_categories.id"), nullable=False, index=True
        )
        user_id = db.Column(db.String(64), nullable=False, index=True)

        status = db.Column(db.String(32), default=ReportStatus.PENDING, index=True, nullable=False)

        main_category = db.relationship("MainCategory", lazy="joined")
        category_assignments = db.relationship(
            "CategoryAssignment", backref="report", cascade="all, delete-orphan"
        )
        evidences = db.relationship("Evidence", backref="report", cascade="all, delete-orphan")

        @validates("incident_date")
        def _coerce_incident_date(self, key, value):
            # Calendar-date strings ("YYYY-MM-DD") arrive from the form payload
            if isinstance(value, str):
                return date.fromisoformat(value) if value else None
            if isinstance(value, datetime):
                return value.date()
            return value

        @property
        def category_name(self):
            return self.main_category.name if self.main_category else None

        def subcategory_ids(self) -> list:
            return [assignment.subcategory_id for assignment in self.category_assignments]

        def __repr__(self):
            return f"<Report {self.id} {self.title!r}>"

    return Report
