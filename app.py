"""
Reddit Proxy Web App
Serves normalized Reddit listings to the dashboard, falling back to sample data
"""

import logging
import os

from flask import Flask

import config
from reddit_fetcher import RedditFetcher
from routes.api_routes import register_api_routes
from routes.cors import register_cors_headers
from routes.error_routes import register_error_handlers
from services.cache import ResultCache

_logging_configured = False


def configure_logging() -> None:
    """Set up root logging from LOG_LEVEL; later calls are no-ops."""
    global _logging_configured
    if _logging_configured:
        return

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    _logging_configured = True


def create_app(fetcher=None, result_cache=None) -> Flask:
    """Build the Flask app; tests pass their own fetcher and cache."""
    configure_logging()
    app = Flask(__name__)

    fetcher = fetcher or RedditFetcher()
    if result_cache is None:
        result_cache = ResultCache(maxsize=config.RESULT_CACHE_MAXSIZE, ttl=config.RESULT_CACHE_TTL)

    register_cors_headers(app)
    register_api_routes(app, fetcher, result_cache)
    register_error_handlers(app)

    return app


if __name__ == '__main__':
    debug_mode = os.getenv('FLASK_DEBUG', '0') == '1'
    create_app().run(host='0.0.0.0', port=5000, debug=debug_mode)
