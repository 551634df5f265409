"""Response hooks shared by every route."""

from __future__ import annotations

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def register_cors_headers(app) -> None:
    @app.after_request
    def add_cors_headers(response):
        response.headers.update(CORS_HEADERS)
        return response
