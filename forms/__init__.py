"""
Forms package for the Incident Reporting application

Form classes validate user input before any data service call is made.
"""

from .report import ReportForm

__all__ = ['ReportForm']
