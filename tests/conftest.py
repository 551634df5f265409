from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
import requests

from app import create_app
from reddit_fetcher import RedditFetcher
from services.cache import ResultCache


def make_child(post_id: str = "abc123", kind: str = "t3", **overrides) -> dict:
    data = {
        "id": post_id,
        "title": f"Post {post_id}",
        "author": "someone",
        "subreddit": "coffee",
        "ups": 120,
        "score": 118,
        "upvote_ratio": 0.97,
        "num_comments": 14,
        "created_utc": 1700000000.0,
        "permalink": f"/r/coffee/comments/{post_id}/post/",
        "url": f"https://www.reddit.com/r/coffee/comments/{post_id}/post/",
        "selftext": "",
        "thumbnail": "self",
        "link_flair_text": None,
        "over_18": False,
        "stickied": False,
    }
    data.update(overrides)
    return {"kind": kind, "data": data}


def make_listing(*children: dict) -> dict:
    return {"kind": "Listing", "data": {"after": None, "children": list(children)}}


def make_atom(*entries: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<feed xmlns="http://www.w3.org/2005/Atom">'
        "<title>coffee</title>" + "".join(entries) + "</feed>"
    )


def make_entry(
    post_id: str = "x1",
    title: str = "A post",
    author: str = "/u/someone",
    content: str = "submitted by /u/someone",
    published: str = "2024-01-01T12:00:00+00:00",
) -> str:
    link = f"https://www.reddit.com/r/coffee/comments/{post_id}/a_post/"
    return (
        "<entry>"
        f"<author><name>{author}</name><uri>https://www.reddit.com/user/someone</uri></author>"
        '<category term="coffee" label="r/coffee"/>'
        f'<content type="html">{content}</content>'
        f"<id>t3_{post_id}</id>"
        f'<link href="{link}" />'
        f"<published>{published}</published>"
        f"<title>{title}</title>"
        "</entry>"
    )


def make_response(
    status: int = 200,
    body="",
    content_type: str = "application/json; charset=UTF-8",
    url: str = "https://www.reddit.com/r/coffee/hot.json",
    history=None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.encoding = "utf-8"
    response.headers["Content-Type"] = content_type
    response.url = url
    response.history = history or []
    return response


@pytest.fixture
def session():
    """Stand-in for requests.Session; set ``session.get.side_effect`` per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def fetcher(session):
    return RedditFetcher(session=session, timeout=6)


@pytest.fixture
def app(fetcher):
    flask_app = create_app(fetcher=fetcher, result_cache=ResultCache(maxsize=16, ttl=60))
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
