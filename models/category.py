"""
Category models for the Incident Reporting application

Reports are classified by a two-level taxonomy: one main category per report
and any number of subcategory assignments under it.
"""

from datetime import datetime


def create_category_models(db):
    """Create and return MainCategory, Subcategory and CategoryAssignment model classes"""

    class MainCategory(db.Model):
        __tablename__ = "case_categories"

        id = db.Column(db.Integer, primary_key=True)
        name = db.Column(db.String(120), nullable=False, unique=True)
        description = db.Column(db.Text, nullable=True)

        subcategories = db.relationship(
            "Subcategory", backref="main_category", cascade="all, delete-orphan",
            order_by="Subcategory.name",
        )

    class Subcategory(db.Model):
        __tablename__ = "case_subcategories"

        id = db.Column(db.Integer, primary_key=True)
        main_category_id = db.Column(
            db.Integer, db.ForeignKey("case_categories.id", ondelete="CASCADE"), nullable=False, index=True
        )
        name = db.Column(db.String(120), nullable=False)

    class CategoryAssignment(db.Model):
        __tablename__ = "report_category_assignments"

        id = db.Column(db.Integer, primary_key=True)
        report_id = db.Column(
            db.String(36), db.ForeignKey("reports.id", ondelete="CASCADE"), nullable=False, index=True
        )
        subcategory_id = db.Column(
            db.Integer, db.ForeignKey("case_subcategories.id"), nullable=False
        )
        main_category_id = db.Column(
            db.Integer, db.ForeignKey("case_categories.id"), nullable=False
        )
        is_primary = db.Column(db.Boolean, default=False, nullable=False)
        created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

        subcategory = db.relationship("Subcategory", lazy="joined")

    return MainCategory, Subcategory, CategoryAssignment
