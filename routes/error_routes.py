"""Error handlers."""

import logging

from flask import jsonify

from errors import ProxyError
from services.response_builder import build_error_envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app) -> None:
    @app.errorhandler(ProxyError)
    def proxy_error(error):
        return jsonify(build_error_envelope(str(error))), error.status_code

    @app.errorhandler(404)
    def not_found(error):
        return jsonify(build_error_envelope("Not found")), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify(build_error_envelope("Method not allowed")), 405

    @app.errorhandler(500)
    def server_error(error):
        logger.error("Unhandled error: %r", getattr(error, "original_exception", error))
        return jsonify(build_error_envelope("Server error occurred")), 500
