"""JSON API routes."""

from __future__ import annotations

import logging

from flask import jsonify, request

import config
from errors import AllStrategiesExhausted, NotFound, ValidationError
from models import SOURCE_SAMPLE, AttemptResult
from services.request_parser import parse_listing_request
from services.response_builder import (
    build_error_envelope,
    build_fallback_envelope,
    build_not_found_envelope,
    build_success_envelope,
)
from services.sample_posts import get_sample_posts

logger = logging.getLogger(__name__)


def register_api_routes(app, fetcher, result_cache) -> None:
    @app.route("/api/reddit", methods=["GET", "OPTIONS"])
    @app.route("/api/reddit/<subreddit>", methods=["GET", "OPTIONS"])
    def api_reddit(subreddit=None):
        if request.method == "OPTIONS":
            return "", 200

        args = request.args.to_dict()
        if subreddit is not None:
            args["subreddit"] = subreddit

        try:
            listing_request = parse_listing_request(args)
        except ValidationError as exc:
            return jsonify(build_error_envelope(str(exc))), 400

        envelope = result_cache.get(listing_request)
        if envelope is None:
            try:
                result = fetcher.fetch_posts(listing_request)
            except NotFound as exc:
                logger.info("Not found: %s", exc)
                return jsonify(build_not_found_envelope(listing_request)), 404
            except AllStrategiesExhausted as exc:
                logger.warning(
                    "All strategies failed for r/%s (%s); serving sample data",
                    listing_request.subreddit,
                    exc,
                )
                sample = AttemptResult(
                    success=False,
                    source=SOURCE_SAMPLE,
                    posts=get_sample_posts(listing_request.subreddit),
                    error=str(exc),
                )
                response = jsonify(build_fallback_envelope(listing_request, exc, sample))
                response.headers["Cache-Control"] = "no-store"
                return response, 503

            envelope = build_success_envelope(listing_request, result)
            result_cache.set(listing_request, envelope)

        response = jsonify(envelope)
        response.headers["Cache-Control"] = config.CACHE_CONTROL
        return response

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "cache": result_cache.stats()})
