"""
Reddit Fetcher - tries a fixed chain of Reddit endpoints until one returns posts
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

import config
from errors import (
    AllStrategiesExhausted,
    NotFound,
    ParseFailure,
    UpstreamBlocked,
    UpstreamError,
    UpstreamTimeout,
)
from models import SOURCE_JSON, SOURCE_RSS, AttemptResult, Post, SanitizedRequest
from services.post_builder import parse_atom_feed, parse_listing

logger = logging.getLogger(__name__)

JSON_ACCEPT = "application/json"
FEED_ACCEPT = "application/atom+xml, application/rss+xml, application/xml, text/xml"


@dataclass(frozen=True)
class Strategy:
    """One concrete attempt: a URL template plus a header profile."""

    name: str
    kind: str  # SOURCE_JSON or SOURCE_RSS
    url_template: str
    user_agent: str
    accept: str

    def url(self, request: SanitizedRequest) -> str:
        return self.url_template.format(
            subreddit=request.subreddit, sort=request.sort, limit=request.limit
        )

    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": "en-US,en;q=0.5",
        }


# JSON first (richer data), the feed last (leaner but less often blocked)
STRATEGIES = (
    Strategy(
        name="old-json",
        kind=SOURCE_JSON,
        url_template="https://old.reddit.com/r/{subreddit}/{sort}.json?limit={limit}&raw_json=1",
        user_agent=config.BROWSER_USER_AGENT,
        accept=JSON_ACCEPT,
    ),
    Strategy(
        name="www-json",
        kind=SOURCE_JSON,
        url_template="https://www.reddit.com/r/{subreddit}/{sort}.json?limit={limit}&raw_json=1",
        user_agent=config.BROWSER_USER_AGENT,
        accept=JSON_ACCEPT,
    ),
    Strategy(
        name="www-json-alt-agent",
        kind=SOURCE_JSON,
        url_template="https://www.reddit.com/r/{subreddit}/{sort}.json?limit={limit}&raw_json=1",
        user_agent=config.ALT_BROWSER_USER_AGENT,
        accept=JSON_ACCEPT,
    ),
    Strategy(
        name="www-rss",
        kind=SOURCE_RSS,
        url_template="https://www.reddit.com/r/{subreddit}/{sort}.rss?limit={limit}",
        user_agent=config.FEED_USER_AGENT,
        accept=FEED_ACCEPT,
    ),
)


class RedditFetcher:
    """Resolves a listing request against the strategy chain"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        strategies: tuple = STRATEGIES,
        timeout: float = config.REQUEST_TIMEOUT,
    ):
        """
        Initialize the fetcher

        Args:
            session: HTTP session to use (default: a new requests.Session)
            strategies: Ordered strategies to attempt
            timeout: Seconds allowed per attempt
        """
        self.session = session or requests.Session()
        self.strategies = strategies
        self.timeout = timeout

    def _get(self, strategy: Strategy, request: SanitizedRequest) -> requests.Response:
        """Issue one GET and classify any non-successful outcome."""
        try:
            response = self.session.get(
                strategy.url(request), headers=strategy.headers(), timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise UpstreamTimeout(f"Timed out after {self.timeout:g}s") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Request failed: {e}") from e

        status = response.status_code
        if status == 404:
            raise NotFound(f"r/{request.subreddit} not found")
        # Unknown subreddits get redirected to the community search page
        if response.history and "/subreddits/search" in (response.url or ""):
            raise NotFound(f"r/{request.subreddit} not found")
        if status in (403, 429):
            raise UpstreamBlocked(f"HTTP {status}")
        if not 200 <= status < 300:
            raise UpstreamError(f"HTTP {status}")
        return response

    def _fetch_json(self, strategy: Strategy, request: SanitizedRequest) -> List[Post]:
        response = self._get(strategy, request)

        content_type = response.headers.get("content-type", "")
        if "json" not in content_type:
            raise UpstreamBlocked(f"Expected JSON, got {content_type or 'no content type'}")

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseFailure("Malformed JSON body") from e

        return parse_listing(payload, request.limit)

    def _fetch_feed(self, strategy: Strategy, request: SanitizedRequest) -> List[Post]:
        response = self._get(strategy, request)
        return parse_atom_feed(response.text, request.subreddit, request.limit)

    def attempt(self, strategy: Strategy, request: SanitizedRequest) -> List[Post]:
        """Run a single strategy. Raises UpstreamError on any recoverable failure."""
        if strategy.kind == SOURCE_RSS:
            posts = self._fetch_feed(strategy, request)
        else:
            posts = self._fetch_json(strategy, request)

        if not posts:
            raise ParseFailure("No posts in response")
        return posts

    def fetch_posts(self, request: SanitizedRequest) -> AttemptResult:
        """
        Try each strategy in order and return the first non-empty result

        Args:
            request: Sanitized listing request

        Returns:
            Successful AttemptResult from the first strategy that produced posts

        Raises:
            NotFound: Reddit says the subreddit does not exist
            AllStrategiesExhausted: every strategy failed
        """
        errors: Dict[str, str] = {}

        for strategy in self.strategies:
            try:
                posts = self.attempt(strategy, request)
            except UpstreamError as e:
                logger.warning("Strategy %s failed for r/%s: %s", strategy.name, request.subreddit, e)
                errors[strategy.kind] = str(e)
                continue

            logger.info(
                "Strategy %s returned %d posts for r/%s", strategy.name, len(posts), request.subreddit
            )
            return AttemptResult(success=True, source=strategy.kind, posts=posts, strategy=strategy.name)

        raise AllStrategiesExhausted(errors)
