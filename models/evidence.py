"""
Evidence model for the Incident Reporting application

This module contains the Evidence model for files attached to a report.
"""

from datetime import datetime


def create_evidence_model(db):
    """Create and return Evidence model class"""

    class Evidence(db.Model):
        __tablename__ = "evidence"

        id = db.Column(db.Integer, primary_key=True)
        report_id = db.Column(
            db.String(36), db.ForeignKey("reports.id", ondelete="CASCADE"), nullable=False, index=True
        )
        file_url = db.Column(db.String(1024), nullable=False)
        file_type = db.Column(db.String(255), nullable=True)
        description = db.Column(db.Text, nullable=True)
        uploaded_by = db.Column(db.String(64), nullable=False)
        created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

        @property
        def file_name(self) -> str:
            return self.file_url.rsplit("/", 1)[-1]

    return Evidence
