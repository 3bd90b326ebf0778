"""
Security utilities for the Incident Reporting application

This module contains evidence file validation and object name checks.
"""

from flask import current_app as app

from .file_handler import allowed_file, file_size


def is_safe_object_name(filename) -> bool:
    """A file name usable as the last segment of a storage path"""
    if not filename or filename in (".", ".."):
        return False
    return not any(char in filename for char in ("/", "\\", "\x00"))


def validate_evidence_file(file):
    """Validate file name, extension, MIME type, and size of an evidence upload"""
    if not file or not file.filename:
        return False, "No file provided"

    filename = file.filename
    if not is_safe_object_name(filename):
        return False, "Invalid filename"

    if not allowed_file(filename, app.config['ALLOWED_EVIDENCE_EXTENSIONS']):
        return False, f"Unsupported file extension: {filename}"

    mime_type = (file.mimetype or "").lower()
    if mime_type not in app.config['ALLOWED_EVIDENCE_MIMES']:
        app.logger.warning(f"Rejected evidence MIME type {mime_type!r} for {filename}")
        return False, f"Unsupported file type: {mime_type or 'unknown'}"

    max_size = app.config['MAX_EVIDENCE_FILE_SIZE']
    if file_size(file) > max_size:
        return False, f"File too large (max {max_size // (1024*1024)}MB)"

    return True, "Valid file"
