from __future__ import annotations

import re

import pytest

from errors import ValidationError
from services.request_parser import clamp_limit, clean_subreddit, normalize_sort, parse_listing_request


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("coffee", "coffee"),
        ("r/coffee", "rcoffee"),
        ("Ask_Reddit!", "Ask_Reddit"),
        ("../../etc/passwd", "etcpasswd"),
        ("café lovers", "caflovers"),
    ],
)
def test_clean_subreddit_strips_disallowed_characters(raw, expected):
    assert clean_subreddit(raw) == expected


def test_clean_subreddit_output_alphabet_and_length():
    raw = "a-b c_d" * 30 + "<script>"
    cleaned = clean_subreddit(raw)

    assert re.fullmatch(r"[A-Za-z0-9_]*", cleaned)
    assert len(cleaned) <= 50


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 10),
        ("", 10),
        ("abc", 10),
        ("0", 10),
        ("-5", 1),
        ("1", 1),
        ("7abc", 7),
        (" 12 ", 12),
        ("25", 25),
        ("26", 25),
        ("9999", 25),
        ("3.9", 3),
    ],
)
def test_clamp_limit(raw, expected):
    limit = clamp_limit(raw)

    assert isinstance(limit, int)
    assert limit == expected
    assert 1 <= limit <= 25


@pytest.mark.parametrize(
    "raw, expected",
    [("hot", "hot"), ("new", "new"), ("TOP", "top"), ("rising", "rising"), ("controversial", "hot"), (None, "hot")],
)
def test_normalize_sort(raw, expected):
    assert normalize_sort(raw) == expected


def test_parse_listing_request_defaults():
    request = parse_listing_request({"subreddit": "coffee"})

    assert request.subreddit == "coffee"
    assert request.limit == 10
    assert request.sort == "hot"


@pytest.mark.parametrize("args", [{}, {"subreddit": ""}, {"subreddit": "!!!/"}])
def test_parse_listing_request_rejects_missing_subreddit(args):
    with pytest.raises(ValidationError) as exc_info:
        parse_listing_request(args)

    assert "Missing subreddit parameter" in str(exc_info.value)
    assert exc_info.value.status_code == 400
