"""
OPS-DESK Flask Application
Application factory for the operations backend.
"""

import sys
from flask import Flask, g
from flask_cors import CORS
import structlog

from config import get_config, validate_config
from utils import generate_request_id
from middleware import register_error_handlers
from routes import health_bp, amounts_bp, imports_bp, inventory_bp

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)


def create_app() -> Flask:
    """Flask application factory."""
    config = get_config()

    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.critical("Configuration error", error=error)
        if config.is_production:
            sys.exit(1)

    app = Flask(__name__)
    app.config['SECRET_KEY'] = config.secret_key or 'dev-only-secret-key'
    # Oversize uploads are refused before the body is read
    app.config['MAX_CONTENT_LENGTH'] = config.imports.max_upload_bytes
    # Keep "₹" readable in responses
    app.json.ensure_ascii = False

    CORS(app, origins=config.cors_origins)

    register_error_handlers(app)

    @app.before_request
    def before_request():
        """Set up request context."""
        g.request_id = generate_request_id()

    @app.after_request
    def after_request(response):
        """Add security and tracking headers."""
        response.headers['X-Request-ID'] = g.get('request_id', 'unknown')
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        return response

    app.register_blueprint(health_bp)
    app.register_blueprint(amounts_bp)
    app.register_blueprint(imports_bp)
    app.register_blueprint(inventory_bp)

    logger.info(
        "Application initialized",
        env=config.env,
        debug=config.debug
    )

    return app


# Application instance for WSGI servers
app = create_app()


if __name__ == '__main__':
    config = get_config()
    app.run(
        host=config.host,
        port=config.port,
        debug=config.debug
    )
