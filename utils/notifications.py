"""
User-facing notifications

Notifications are queued with Flask's message flashing and rendered by the
base template. Each message carries a title and a description; the flash
category is the severity.
"""

from flask import flash

SEVERITY_DEFAULT = "success"
SEVERITY_DESTRUCTIVE = "error"


def notify(title: str, description: str, severity: str = SEVERITY_DEFAULT) -> None:
    flash({"title": title, "description": description}, severity)
