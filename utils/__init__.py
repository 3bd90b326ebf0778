"""
Utils package for the Incident Reporting application

This package contains utility functions, decorators, and helpers that are
used across the application.
"""

from .auth import get_current_user_id
from .security import is_safe_object_name, validate_evidence_file
from .file_handler import allowed_file, file_size
from .decorators import login_required, debug_only
from .notifications import notify
from .formatting import format_incident_date, status_badge_variant

__all__ = [
    'get_current_user_id',
    'is_safe_object_name',
    'validate_evidence_file',
    'allowed_file',
    'file_size',
    'login_required',
    'debug_only',
    'notify',
    'format_incident_date',
    'status_badge_variant',
]
