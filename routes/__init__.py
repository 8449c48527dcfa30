from flask import jsonify
from werkzeug.exceptions import HTTPException
from models import db
from services.errors import ServiceError
from .auth import auth_bp
from .startups import startups_bp
from .mentor import mentor_bp
from .mentorship import mentorship_bp
from .session import session_bp
from .funding import funding_bp
from .admin import admin_bp
from .cron import cron_bp

def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(startups_bp)
    app.register_blueprint(mentor_bp)
    app.register_blueprint(mentorship_bp)
    app.register_blueprint(session_bp)
    app.register_blueprint(funding_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(cron_bp)
    register_error_handlers(app)

def register_error_handlers(app):
    """Render every failure as a JSON error body"""

    @app.errorhandler(ServiceError)
    def handle_service_error(error):
        db.session.rollback()
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        print(f"[Error] Unhandled {type(error).__name__}: {error}")
        return jsonify({'error': 'Internal server error'}), 500
