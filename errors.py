"""
Error types raised while resolving a listing request.
"""

from __future__ import annotations


class ProxyError(Exception):
    """Base class for every error the proxy raises on purpose."""

    status_code = 500


class ValidationError(ProxyError):
    """The inbound request cannot be served (e.g. no usable subreddit)."""

    status_code = 400


class NotFound(ProxyError):
    """Reddit confirmed the subreddit does not exist. Stops the chain."""

    status_code = 404


class UpstreamError(ProxyError):
    """A single strategy failed; the chain moves on to the next one."""

    status_code = 502


class UpstreamBlocked(UpstreamError):
    """403/429, or a body of the wrong type (HTML instead of JSON/feed)."""


class UpstreamTimeout(UpstreamError):
    pass


class ParseFailure(UpstreamError):
    """Body was received but held no usable posts."""


class AllStrategiesExhausted(ProxyError):
    """Every strategy failed. Carries the last error per strategy kind."""

    status_code = 503

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        summary = ", ".join(f"{kind}: {message}" for kind, message in self.errors.items())
        super().__init__(summary or "no strategies attempted")
