"""
Flask application factory for prodscrape.
"""
from flask import Flask
from flask_cors import CORS

from .. import __version__
from ..config import Config
from ..logger import get_logger
from .routes import api_bp

logger = get_logger(__name__)


def create_app() -> Flask:
    """
    Create and configure Flask application.

    Returns:
        Configured Flask app instance
    """
    app = Flask(__name__)

    if Config.SECRET_KEY:
        app.config['SECRET_KEY'] = Config.SECRET_KEY
    app.config['ENV'] = Config.FLASK_ENV

    # CORS headers go on every response, preflight included
    cors_origins = Config.get_cors_origins()
    if cors_origins == ["*"]:
        CORS(app, send_wildcard=True, allow_headers=Config.CORS_ALLOW_HEADERS)
    else:
        CORS(app, origins=cors_origins, allow_headers=Config.CORS_ALLOW_HEADERS)

    # /api/scrape-product plus the bare function path /scrape-product
    app.register_blueprint(api_bp)
    app.register_blueprint(api_bp, name='function', url_prefix='')

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return {'status': 'healthy', 'version': __version__}

    logger.info("Flask app created")
    logger.info(f"Configuration: {Config.get_summary()}")

    errors = Config.validate()
    if errors:
        logger.warning(f"Configuration warnings: {errors}")

    return app
