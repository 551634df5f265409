"""JSON envelopes returned by the listing endpoint."""

from __future__ import annotations

from typing import Any

from errors import AllStrategiesExhausted
from models import SOURCE_JSON, SOURCE_RSS, SOURCE_SAMPLE, AttemptResult, SanitizedRequest

UNAVAILABLE_MESSAGE = "Using sample data. Reddit is blocking cloud IPs."


def build_success_envelope(request: SanitizedRequest, result: AttemptResult) -> dict[str, Any]:
    return {
        "success": True,
        "source": result.source,
        "subreddit": request.subreddit,
        "sort": request.sort,
        "count": result.count,
        "posts": [post.to_dict() for post in result.posts],
        "fetchedAt": result.fetched_at_iso,
    }


def build_fallback_envelope(
    request: SanitizedRequest, exhausted: AllStrategiesExhausted, sample: AttemptResult
) -> dict[str, Any]:
    """Degraded envelope: per-kind errors plus clearly flagged sample posts."""
    return {
        "success": False,
        "error": "Reddit unavailable",
        "subreddit": request.subreddit,
        "sort": request.sort,
        "jsonError": exhausted.errors.get(SOURCE_JSON),
        "rssError": exhausted.errors.get(SOURCE_RSS),
        "fallback": True,
        "source": SOURCE_SAMPLE,
        "count": sample.count,
        "posts": [post.to_dict() for post in sample.posts],
        "fetchedAt": sample.fetched_at_iso,
        "message": UNAVAILABLE_MESSAGE,
    }


def build_not_found_envelope(request: SanitizedRequest) -> dict[str, Any]:
    return {"success": False, "error": "Subreddit not found", "subreddit": request.subreddit}


def build_error_envelope(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}
