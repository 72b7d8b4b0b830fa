"""
Development server for the prodscrape API.

    python run_app.py                      # host/port from .env
    python run_app.py --port 8080 --debug  # override for this run

Use wsgi.py for production.
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from prodscrape.api import create_app
from prodscrape.config import Config
from prodscrape.logger import get_logger

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the prodscrape development server")
    parser.add_argument("--host", default=Config.FLASK_HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=Config.FLASK_PORT, help="Port to listen on")
    parser.add_argument("--debug", action="store_true", default=Config.FLASK_DEBUG,
                        help="Enable the Flask debugger and reloader")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    errors = Config.validate()
    for error in errors:
        logger.error("CONFIG %s", error)
    if errors and Config.FLASK_ENV == "production":
        return 1

    app = create_app()
    logger.info("Serving scrape API on http://%s:%d (debug=%s)", args.host, args.port, args.debug)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
