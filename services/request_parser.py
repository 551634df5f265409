"""Sanitize inbound listing query parameters."""

from __future__ import annotations

import re
from typing import Mapping, Optional

import config
from errors import ValidationError
from models import SanitizedRequest

_SUBREDDIT_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def clean_subreddit(raw_value: Optional[str]) -> str:
    if not raw_value:
        return ""
    return _SUBREDDIT_DISALLOWED.sub("", raw_value)[: config.MAX_SUBREDDIT_LENGTH]


def clamp_limit(raw_value: Optional[str]) -> int:
    """Parse a leading integer ("7abc" -> 7), default on failure, clamp to 1..MAX."""
    match = _LEADING_INT.match(str(raw_value)) if raw_value is not None else None
    limit = int(match.group(1)) if match else 0
    if limit == 0:
        limit = config.DEFAULT_POST_LIMIT
    return min(max(limit, 1), config.MAX_POST_LIMIT)


def normalize_sort(raw_value: Optional[str]) -> str:
    sort = (raw_value or "").strip().lower()
    return sort if sort in config.ALLOWED_SORTS else config.DEFAULT_SORT


def parse_listing_request(args: Mapping[str, str]) -> SanitizedRequest:
    subreddit = clean_subreddit(args.get("subreddit"))
    if not subreddit:
        raise ValidationError("Missing subreddit parameter")

    return SanitizedRequest(
        subreddit=subreddit,
        limit=clamp_limit(args.get("limit")),
        sort=normalize_sort(args.get("sort")),
    )
