"""
File handling utilities for the Incident Reporting application
"""

import os


def allowed_file(filename: str, allowed_extensions: set[str]) -> bool:
    """Check if a filename has an allowed extension"""
    if not filename or "." not in filename:
        return False
    return filename.rsplit(".", 1)[1].lower() in allowed_extensions


def file_size(file) -> int:
    """Size in bytes of an uploaded file, leaving its stream at the start"""
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size
