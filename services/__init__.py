"""
Services package for the Incident Reporting application

This package contains business logic services including:
- Report data access (reports, category assignments, evidence)
- Evidence object storage
- The incident report form controller
"""

from .report_service import ReportService, create_report, update_report, save_evidence, init_report_service
from .storage import EvidenceStorage, StorageError
from .report_form import IncidentReportFormController

__all__ = [
    'ReportService',
    'create_report',
    'update_report',
    'save_evidence',
    'init_report_service',
    'EvidenceStorage',
    'StorageError',
    'IncidentReportFormController',
]
