"""
Data shapes passed between the fetcher, the normalizers and the routes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

SOURCE_JSON = "json"
SOURCE_RSS = "rss"
SOURCE_SAMPLE = "sample"


@dataclass(frozen=True)
class SanitizedRequest:
    subreddit: str
    limit: int
    sort: str

    @property
    def cache_key(self) -> tuple[str, str, int]:
        return (self.subreddit, self.sort, self.limit)


@dataclass
class Post:
    """Canonical post shape. Every strategy produces exactly these fields."""

    id: str
    title: str
    author: str
    subreddit: str
    upvotes: int = 0
    score: int = 0
    ratio: Optional[float] = None
    comments: int = 0
    created: float = 0.0
    permalink: str = ""
    url: str = ""
    selftext: Optional[str] = None
    thumbnail: Optional[str] = None
    flair: Optional[str] = None
    is_nsfw: bool = False
    is_pinned: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "subreddit": self.subreddit,
            "upvotes": self.upvotes,
            "score": self.score,
            "ratio": self.ratio,
            "comments": self.comments,
            "created": self.created,
            "permalink": self.permalink,
            "url": self.url,
            "selftext": self.selftext,
            "thumbnail": self.thumbnail,
            "flair": self.flair,
            "isNsfw": self.is_nsfw,
            "isPinned": self.is_pinned,
        }


@dataclass
class AttemptResult:
    success: bool
    source: str
    posts: list[Post] = field(default_factory=list)
    error: Optional[str] = None
    strategy: Optional[str] = None
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def count(self) -> int:
        return len(self.posts)

    @property
    def fetched_at_iso(self) -> str:
        return self.fetched_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
