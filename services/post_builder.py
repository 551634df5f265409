"""Helpers for building canonical posts from Reddit JSON listings and Atom feeds."""

from __future__ import annotations

import re
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import urlsplit

import config
from errors import ParseFailure, UpstreamBlocked
from models import Post

# Listing JSON ---------------------------------------------------------------


def _truncate_selftext(selftext: Any) -> Optional[str]:
    if not isinstance(selftext, str) or not selftext:
        return None
    return selftext[: config.MAX_SELFTEXT_LENGTH]


def _absolute_thumbnail(thumbnail: Any) -> Optional[str]:
    # Reddit uses placeholders like "self", "default", "nsfw" for missing thumbnails
    if isinstance(thumbnail, str) and thumbnail.startswith("http"):
        return thumbnail
    return None


def build_post_from_listing(post_data: dict[str, Any]) -> Post:
    """Normalize a Reddit ``t3`` payload into a canonical post."""
    return Post(
        id=str(post_data.get("id", "")),
        title=post_data.get("title") or "",
        author=post_data.get("author") or "[deleted]",
        subreddit=post_data.get("subreddit") or "",
        upvotes=int(post_data.get("ups") or 0),
        score=int(post_data.get("score") or 0),
        ratio=float(post_data.get("upvote_ratio") or 0),
        comments=int(post_data.get("num_comments") or 0),
        created=float(post_data.get("created_utc") or 0),
        permalink=post_data.get("permalink") or "",
        url=post_data.get("url") or "",
        selftext=_truncate_selftext(post_data.get("selftext")),
        thumbnail=_absolute_thumbnail(post_data.get("thumbnail")),
        flair=post_data.get("link_flair_text") or None,
        is_nsfw=bool(post_data.get("over_18", False)),
        is_pinned=bool(post_data.get("stickied", False)),
    )


def _is_listed_post(child: Any, exclude_pinned: bool) -> bool:
    if not isinstance(child, dict) or child.get("kind") != "t3":
        return False
    data = child.get("data")
    if not isinstance(data, dict) or data.get("promoted"):
        return False
    return not (exclude_pinned and data.get("stickied"))


def parse_listing(payload: Any, limit: int, exclude_pinned: Optional[bool] = None) -> list[Post]:
    """
    Parse a Reddit listing JSON document into canonical posts

    Args:
        payload: Decoded JSON body of a ``/r/<sub>/<sort>.json`` response
        limit: Maximum number of posts to return
        exclude_pinned: Drop stickied posts (default: config.EXCLUDE_PINNED_POSTS)

    Returns:
        Posts in listing order

    Raises:
        ParseFailure: the document is not a listing
    """
    if exclude_pinned is None:
        exclude_pinned = config.EXCLUDE_PINNED_POSTS

    data = payload.get("data") if isinstance(payload, dict) else None
    children = data.get("children") if isinstance(data, dict) else None
    if not isinstance(children, list):
        raise ParseFailure("Listing has no data.children")

    try:
        return [
            build_post_from_listing(child["data"])
            for child in children
            if _is_listed_post(child, exclude_pinned)
        ][:limit]
    except (TypeError, ValueError) as e:
        raise ParseFailure("Malformed listing record") from e


# Atom feed ------------------------------------------------------------------

_ENTRY_START = re.compile(r"<entry(?:\s[^>]*)?>")
_ENTRY_END = "</entry>"
_TAG = re.compile(r"<[^>]+>")
_POINTS = re.compile(r"(\d+)\s*points?", re.IGNORECASE)
_COMMENTS = re.compile(r"(\d+)\s*comments?", re.IGNORECASE)
_HTML_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def extract_tag(fragment: str, tag: str) -> Optional[str]:
    match = re.search(rf"<{tag}(?:\s[^>]*)?>([\s\S]*?)</{tag}>", fragment)
    return match.group(1).strip() if match else None


def extract_attr(fragment: str, tag: str, attr: str) -> Optional[str]:
    match = re.search(rf'<{tag}\b[^>]*\b{attr}="([^"]+)"', fragment)
    return match.group(1) if match else None


def decode_html(text: str) -> str:
    """Decode the handful of entities Reddit emits, then drop any tags left."""
    for entity, char in _HTML_ENTITIES:
        text = text.replace(entity, char)
    return _TAG.sub("", text)


def _match_count(pattern: re.Pattern, text: str) -> int:
    match = pattern.search(text)
    return int(match.group(1)) if match else 0


def _post_id_from_link(link: str) -> str:
    _, sep, rest = link.partition("/comments/")
    post_id = rest.split("/")[0] if sep else ""
    # Local-only id; stable ids are not available from a bare entry
    return post_id or uuid.uuid4().hex[:10]


def _parse_published(published: Optional[str]) -> float:
    if published:
        try:
            parsed = datetime.fromisoformat(published.replace("Z", "+00:00"))
        except ValueError:
            parsed = None
        if parsed is not None:
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed.timestamp()
    return time.time()


def looks_like_feed(body: str) -> bool:
    return "<html" not in body.lower() and _ENTRY_START.search(body) is not None


def build_post_from_entry(entry: str, subreddit: str) -> Post:
    link = extract_attr(entry, "link", "href") or ""
    author = extract_tag(entry, "name") or "unknown"
    if author.startswith("/u/"):
        author = author[len("/u/"):]
    content = extract_tag(entry, "content") or ""
    score = _match_count(_POINTS, content)

    return Post(
        id=_post_id_from_link(link),
        title=decode_html(extract_tag(entry, "title") or "Untitled"),
        author=author,
        subreddit=subreddit,
        upvotes=score,
        score=score,
        ratio=None,
        comments=_match_count(_COMMENTS, content),
        created=_parse_published(extract_tag(entry, "published")),
        permalink=urlsplit(link).path if link else "",
        url=link,
    )


def parse_atom_feed(xml: str, subreddit: str, limit: int) -> list[Post]:
    """Parse a Reddit Atom feed by pattern matching entry blocks."""
    if not looks_like_feed(xml):
        raise UpstreamBlocked("Feed returned HTML")

    entries = _ENTRY_START.split(xml)[1:]
    return [
        build_post_from_entry(entry.split(_ENTRY_END, 1)[0], subreddit)
        for entry in entries[:limit]
    ]
