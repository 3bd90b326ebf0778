"""
Models package for the Incident Reporting application

This package contains all database models and related utilities.
"""

# Store initialized models to prevent re-initialization
_initialized_models = None

def init_models(database_instance):
    """Initialize models with the shared database instance"""
    global _initialized_models

    # Return cached models if already initialized
    if _initialized_models is not None:
        return _initialized_models

    # Import model factory functions
    from .report import create_report_model, ReportStatus
    from .category import create_category_models
    from .evidence import create_evidence_model

    # Create model classes
    Report = create_report_model(database_instance)
    MainCategory, Subcategory, CategoryAssignment = create_category_models(database_instance)
    Evidence = create_evidence_model(database_instance)

    # Cache and return all model classes and utilities
    _initialized_models = {
        'ReportStatus': ReportStatus,
        'Report': Report,
        'MainCategory': MainCategory,
        'Subcategory': Subcategory,
        'CategoryAssignment': CategoryAssignment,
        'Evidence': Evidence,
    }

    return _initialized_models

__all__ = [
    'init_models',
    'ReportStatus',
    'Report',
    'MainCategory',
    'Subcategory',
    'CategoryAssignment',
    'Evidence',
]
