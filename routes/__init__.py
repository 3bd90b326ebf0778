"""
Routes package for the Incident Reporting application

This package contains all route blueprints and initialization functions.
"""

def init_all_routes(app):
    """Initialize and register all route blueprints"""

    # Import blueprint initialization functions
    from .main import init_main_routes
    from .report import init_report_routes
    from .evidence import init_evidence_routes
    from .dev import init_dev_routes

    # Initialize blueprints
    main_blueprint = init_main_routes()
    report_blueprint = init_report_routes()
    evidence_blueprint = init_evidence_routes()
    dev_blueprint = init_dev_routes()

    # Register blueprints
    app.register_blueprint(main_blueprint)
    app.register_blueprint(report_blueprint)
    app.register_blueprint(evidence_blueprint)
    app.register_blueprint(dev_blueprint)

    return {
        'main': main_blueprint,
        'report': report_blueprint,
        'evidence': evidence_blueprint,
        'dev': dev_blueprint,
    }
