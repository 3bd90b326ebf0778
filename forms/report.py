"""
Incident report form

Validation rules for creating and editing a report. Choices for the category
fields are loaded from the database when the form is built.
"""

from flask import current_app
from flask_wtf import FlaskForm
from flask_wtf.file import MultipleFileField
from wtforms import DateField, SelectField, SelectMultipleField, StringField, TextAreaField
from wtforms.validators import InputRequired, DataRequired, Length, Optional, Regexp, ValidationError

from services.report_service import ReportService
from utils.security import validate_evidence_file


def _optional_int(value):
    if value in (None, ""):
        return None
    return int(value)


class ReportForm(FlaskForm):
    title = StringField(
        "Title",
        validators=[DataRequired(message="Title is required"), Length(max=200)],
    )
    description = TextAreaField(
        "Description",
        validators=[DataRequired(message="Description is required"), Length(max=5000)],
    )
    incident_date = DateField(
        "Incident date",
        format="%Y-%m-%d",
        validators=[DataRequired(message="Incident date is required")],
    )
    incident_time = StringField(
        "Incident time",
        validators=[Optional(), Regexp(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$", message="Use HH:MM")],
    )
    location = StringField("Location", validators=[Optional(), Length(max=255)])
    main_category_id = SelectField(
        "Category",
        coerce=_optional_int,
        validators=[InputRequired(message="Please select a category")],
    )
    categories = SelectMultipleField("Subcategories", coerce=int)
    files = MultipleFileField("Evidence")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        main_categories = ReportService.list_main_categories()
        subcategories = ReportService.list_subcategories()

        self.main_category_id.choices = [("", "Select a category")] + [
            (category.id, category.name) for category in main_categories
        ]
        self.categories.choices = [(sub.id, sub.name) for sub in subcategories]
        self._subcategory_parents = {sub.id: sub.main_category_id for sub in subcategories}

    def validate_categories(self, field):
        main_category_id = self.main_category_id.data
        foreign = [
            sub_id for sub_id in (field.data or [])
            if self._subcategory_parents.get(sub_id) != main_category_id
        ]
        if foreign:
            raise ValidationError("Subcategories must belong to the selected category")

    def validate_files(self, field):
        files = self.selected_files()
        max_files = current_app.config['MAX_EVIDENCE_FILES']
        if len(files) > max_files:
            raise ValidationError(f"You can attach at most {max_files} files")
        for file in files:
            is_valid, error_msg = validate_evidence_file(file)
            if not is_valid:
                raise ValidationError(error_msg)

        names = [file.filename for file in files]
        if len(set(names)) != len(names):
            raise ValidationError("Each attached file needs a distinct name")

    def selected_files(self) -> list:
        return [file for file in (self.files.data or []) if file and getattr(file, "filename", None)]

    def submission_data(self) -> dict:
        """Validated values in the shape the form controller submits"""
        return {
            "title": self.title.data.strip(),
            "description": self.description.data.strip(),
            "incident_date": self.incident_date.data,
            "incident_time": (self.incident_time.data or "").strip(),
            "location": (self.location.data or "").strip(),
            "main_category_id": self.main_category_id.data,
            "categories": list(self.categories.data or []),
            "files": self.selected_files() or None,
        }
