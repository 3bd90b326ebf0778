import os
import logging
from datetime import timedelta

from flask import Flask, render_template
from flask_wtf.csrf import generate_csrf
from werkzeug.middleware.proxy_fix import ProxyFix
from flask_talisman import Talisman

from config import Config
from extensions import db, csrf, limiter
from utils.auth import get_current_user_id
from utils.formatting import format_incident_date, status_badge_variant

VERSION = "2026.10.19.001"


def create_app(config_obj=Config):
    """Build and configure the Flask application"""
    app = Flask(__name__)
    app.config.from_object(config_obj)

    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO))

    # Template filters for the reports list
    app.add_template_filter(format_incident_date, "incident_date")
    app.add_template_filter(status_badge_variant, "badge_variant")

    @app.context_processor
    def inject_globals():
        return {
            "VERSION": VERSION,
            "generate_csrf": generate_csrf,
            "current_user_id": get_current_user_id(),
        }

    # Add security headers outside development and tests
    if not (app.debug or app.testing):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)
        Talisman(
            app,
            force_https=app.config["FORCE_HTTPS"],
            strict_transport_security=True,
            strict_transport_security_max_age=31536000,
            session_cookie_secure=app.config["SESSION_COOKIE_SECURE"],
            content_security_policy={
                'default-src': "'self'",
                'style-src': "'self' 'unsafe-inline'",
                'img-src': "'self' data:",
            },
            referrer_policy='strict-origin-when-cross-origin'
        )

    # Initialize extensions
    db.init_app(app)
    csrf.init_app(app)
    limiter.init_app(app)

    app.permanent_session_lifetime = timedelta(seconds=app.config['PERMANENT_SESSION_LIFETIME'])

    # Evidence object storage
    from services.storage import EvidenceStorage
    os.makedirs(app.config["BASE_UPLOAD_DIR"], exist_ok=True)
    app.evidence_storage = EvidenceStorage.from_config(app.config)

    # Register models and hand them to the services
    from models import init_models
    from services.report_service import init_report_service
    from services.category_seed import init_category_seed

    with app.app_context():
        model_classes = init_models(db)
    init_report_service(db, model_classes)
    init_category_seed(db, model_classes)
    app.models = model_classes

    import routes
    routes.init_all_routes(app)

    @app.errorhandler(401)
    def unauthorized(error):
        return render_template("error.html", code=401, message="Please sign in to continue."), 401

    @app.errorhandler(403)
    def forbidden(error):
        return render_template("error.html", code=403, message="You can only edit your own reports."), 403

    @app.errorhandler(404)
    def not_found(error):
        return render_template("error.html", code=404, message="Page not found."), 404

    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()

    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=os.getenv("FLASK_DEBUG", "False").lower() == "true")
