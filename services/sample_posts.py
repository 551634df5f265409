"""Static sample posts served when Reddit cannot be reached."""

from __future__ import annotations

import time
from typing import Optional

from models import Post

SAMPLE_AUTHOR = "sample_user"
SAMPLE_RATIO = 0.92
DEFAULT_SAMPLE_SET = "coffee"

# (id, title, upvotes, comments)
SAMPLE_POSTS = {
    "coffee": (
        ("s1", "My pour-over setup after 2 years of experimentation", 2847, 234),
        ("s2", "Is a $300 grinder really worth it? My honest review", 1923, 456),
        ("s3", "Local roaster just won a national award - so proud!", 1567, 89),
    ),
    "philippines": (
        ("s1", "Hidden gem cafes in Makati you need to try", 1834, 312),
        ("s2", "Best work-from-cafe spots with stable wifi?", 945, 187),
        ("s3", "Support local coffee farmers - where to buy beans direct", 723, 56),
    ),
    "entrepreneur": (
        ("s1", "I bootstrapped to $10k MRR - lessons learned", 3421, 567),
        ("s2", "Stop building features, start talking to customers", 2156, 234),
        ("s3", "The real cost of starting a food/beverage business", 1876, 345),
    ),
}


def get_sample_posts(subreddit: str, now: Optional[float] = None) -> list[Post]:
    """
    Return the curated sample set for *subreddit* (or the default set).

    Timestamps are spaced one hour apart going back from *now*, so the
    first post is the newest.
    """
    if now is None:
        now = time.time()

    samples = SAMPLE_POSTS.get(subreddit.lower(), SAMPLE_POSTS[DEFAULT_SAMPLE_SET])
    return [
        Post(
            id=post_id,
            title=title,
            author=SAMPLE_AUTHOR,
            subreddit=subreddit,
            upvotes=upvotes,
            score=upvotes,
            ratio=SAMPLE_RATIO,
            comments=comments,
            created=now - (index + 1) * 3600,
            permalink=f"/r/{subreddit}/comments/{post_id}/",
            url=f"https://reddit.com/r/{subreddit}",
        )
        for index, (post_id, title, upvotes, comments) in enumerate(samples)
    ]
