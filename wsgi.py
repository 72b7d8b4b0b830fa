"""
WSGI entry point for production deployment.

Use this file with a WSGI server like gunicorn or waitress:

    # Linux/Mac with gunicorn
    gunicorn wsgi:app --bind 0.0.0.0:5000 --workers 4

    # Windows with waitress
    waitress-serve --host=0.0.0.0 --port=5000 wsgi:app

    # Or use the CLI
    python wsgi.py
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from prodscrape.api import create_app
from prodscrape.config import Config
from prodscrape.logger import get_logger

logger = get_logger(__name__)

# Create the Flask application instance
app = create_app()


def main():
    """Run with a production-ready server."""
    from waitress import serve

    host = Config.FLASK_HOST
    port = Config.FLASK_PORT

    errors = Config.validate()
    if errors:
        logger.warning("Configuration warnings:")
        for error in errors:
            logger.warning(f"  - {error}")

    logger.info(f"Starting prodscrape on {host}:{port}")
    logger.info(f"Environment: {Config.FLASK_ENV}")

    if Config.FLASK_ENV == "production" or not Config.FLASK_DEBUG:
        logger.info(f"Using Waitress production server ({Config.SERVER_THREADS} threads)")
        serve(app, host=host, port=port, threads=Config.SERVER_THREADS)
    else:
        logger.info("Using Flask development server")
        app.run(host=host, port=port, debug=True)


if __name__ == "__main__":
    main()
