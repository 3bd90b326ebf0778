"""
Evidence storage routes for the Incident Reporting application

This module serves stored evidence objects at their public URLs.
"""

import os
from flask import Blueprint, send_from_directory, current_app, abort
from services.storage import StorageError

# Create evidence blueprint
evidence_bp = Blueprint('evidence', __name__)


@evidence_bp.route("/storage/<bucket>/<path:object_path>")
def get_object(bucket: str, object_path: str):
    storage = current_app.evidence_storage
    if bucket != storage.bucket:
        abort(404)

    try:
        safe_path = storage.resolve(object_path)
    except StorageError:
        current_app.logger.error(f"Object path outside bucket: {object_path}")
        abort(404, "File not found")

    if not os.path.isfile(safe_path):
        abort(404, "File not found")

    directory, filename = os.path.dirname(safe_path), os.path.basename(safe_path)
    return send_from_directory(directory, filename, as_attachment=False)


def init_evidence_routes():
    """Initialize evidence routes"""
    return evidence_bp
