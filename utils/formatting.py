"""
Presentation helpers for report summaries

Registered as Jinja filters in create_app().
"""

from datetime import date, datetime

NO_DATE_PLACEHOLDER = "No date specified"


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(value: date) -> str:
    """Long localized date, e.g. ``October 19th, 2026``"""
    return f"{value.strftime('%B')} {_ordinal(value.day)}, {value.year}"


def format_incident_date(value) -> str:
    if not value:
        return NO_DATE_PLACEHOLDER
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    elif isinstance(value, datetime):
        value = value.date()
    return format_long_date(value)


def status_badge_variant(status) -> str:
    """Visual badge variant for a report status"""
    if status == "resolved":
        return "success"
    if status == "in_progress":
        return "warning"
    return "default"
