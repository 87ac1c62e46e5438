"""
Trending feeds built from YouTube's mostPopular chart.

Two regional variants exist. India is the primary feed and ships category
hashtags; US is the secondary feed. They differ in how a display keyword and
an approximate search volume are derived from each video, see `TrendingFeed`.
"""

import logging
import math
import random
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

import httpx

from .config import Settings
from .generators import get_category_hashtags
from .schemas import IndiaTrendingResponse, TrendingResponse, TrendingSearch
from .youtube import Video, list_most_popular

logger = logging.getLogger(__name__)

MAX_TRENDING = 10
MIN_JITTERED_VOLUME = 1000
MAX_JITTERED_VOLUME = 500000

_NON_WORD_RE = re.compile(r"[^\w\s]", flags=re.ASCII)


# -----------------------------
# Keyword / volume derivation
# -----------------------------
def leading_words_keyword(title: str) -> str:
    return " ".join(title.split(" ")[:3])


def significant_words_keyword(title: str) -> str:
    words = [w for w in _NON_WORD_RE.sub("", title.lower()).split(" ") if len(w) > 3]
    return " ".join(words[:3]) or title[:30]


def direct_search_volume(view_count: int) -> int:
    return max(view_count, 0) // 1000


def jittered_search_volume(view_count: int, rng: Optional[random.Random] = None) -> int:
    """view_count / 1000 scaled by a random factor in [0.5, 1.0), clamped to [1000, 500000]."""
    rng = rng or random.Random()
    volume = math.floor((view_count / 1000) * (rng.random() * 0.5 + 0.5))
    return max(MIN_JITTERED_VOLUME, min(volume, MAX_JITTERED_VOLUME))


@dataclass(frozen=True)
class TrendingFeed:
    region_code: str
    max_results: int
    keyword_for: Callable[[str], str]
    volume_for: Callable[[int], int]


INDIA_FEED = TrendingFeed(
    region_code="IN",
    max_results=50,
    keyword_for=leading_words_keyword,
    volume_for=direct_search_volume,
)


def us_feed(rng: Optional[random.Random] = None) -> TrendingFeed:
    return TrendingFeed(
        region_code="US",
        max_results=10,
        keyword_for=significant_words_keyword,
        volume_for=lambda views: jittered_search_volume(views, rng),
    )


# -----------------------------
# Shaping
# -----------------------------
def to_trending_search(video: Video, feed: TrendingFeed) -> TrendingSearch:
    return TrendingSearch(
        keyword=feed.keyword_for(video.snippet.title),
        searchVolume=feed.volume_for(video.statistics.viewCount),
        category=video.snippet.categoryId,
    )


def rank_trending(items: List[TrendingSearch], limit: int = MAX_TRENDING) -> List[TrendingSearch]:
    """Drop repeated keywords (first one wins), sort by volume descending, keep `limit`."""
    seen = set()
    unique: List[TrendingSearch] = []
    for it in items:
        if it.keyword in seen:
            continue
        seen.add(it.keyword)
        unique.append(it)
    unique.sort(key=lambda t: t.searchVolume, reverse=True)
    return unique[:limit]


async def fetch_trending(
    client: httpx.AsyncClient,
    settings: Settings,
    feed: TrendingFeed,
    category_id: Optional[str] = None,
) -> List[TrendingSearch]:
    data = await list_most_popular(client, settings, feed.region_code, feed.max_results, category_id)
    if not data.items:
        logger.info("No trending videos for region=%s category=%s", feed.region_code, category_id)
        return []
    return rank_trending([to_trending_search(v, feed) for v in data.items])


async def india_trending(
    client: httpx.AsyncClient,
    settings: Settings,
    category_id: Optional[str] = None,
) -> IndiaTrendingResponse:
    trending = await fetch_trending(client, settings, INDIA_FEED, category_id)
    return IndiaTrendingResponse(trending=trending, hashtags=get_category_hashtags(category_id))


async def us_trending(
    client: httpx.AsyncClient,
    settings: Settings,
    category_id: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> TrendingResponse:
    trending = await fetch_trending(client, settings, us_feed(rng), category_id)
    return TrendingResponse(trending=trending)
