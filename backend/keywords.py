"""
Keyword research over live YouTube search results.

For a seed keyword we build a handful of query variations and, for each one,
look at the last month of uploads: how many videos compete for it, how many
views the top results get, and whether uploads are speeding up or slowing
down. Variations are analysed concurrently; one failing variation never sinks
the others.
"""

import asyncio
import logging
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import httpx

from .config import Settings
from .generators import generate_related_keywords
from .schemas import KeywordAnalysis
from .youtube import SearchResult, Video, get_video_statistics, search_videos

logger = logging.getLogger(__name__)

SEARCH_MAX_RESULTS = 50
STATS_SAMPLE_SIZE = 10
LOOKBACK_DAYS = 30
MAX_SEARCH_VOLUME = 1000000
MIN_TREND_SAMPLE = 5


# -----------------------------
# Metrics
# -----------------------------
def calculate_average_views(videos: Sequence[Video]) -> int:
    if not videos:
        return 0
    total = sum(v.statistics.viewCount for v in videos)
    return total // len(videos)


def calculate_competition_score(total_results: int, recent_uploads: int) -> int:
    """More indexed videos and more uploads in the window both mean more competition."""
    base = min((total_results / 10000) * 100, 100)
    recency_bonus = min((recent_uploads / SEARCH_MAX_RESULTS) * 20, 20)
    return min(math.floor(base + recency_bonus), 100)


def calculate_trend_direction(results: Sequence[SearchResult]) -> str:
    if len(results) < MIN_TREND_SAMPLE:
        return "stable"

    oldest = datetime.min.replace(tzinfo=timezone.utc)
    ordered = sorted(results, key=lambda r: r.snippet.publishedAt or oldest, reverse=True)
    half = len(ordered) // 2
    newer, older = ordered[:half], ordered[half:]

    if len(newer) > len(older) * 1.5:
        return "up"
    if len(newer) < len(older) * 0.7:
        return "down"
    return "stable"


def opportunity(analysis: KeywordAnalysis) -> float:
    return analysis.searchVolume / (analysis.competitionScore + 1)


# -----------------------------
# Research
# -----------------------------
async def analyze_keyword(
    client: httpx.AsyncClient,
    settings: Settings,
    keyword: str,
    published_after: datetime,
) -> Optional[KeywordAnalysis]:
    search = await search_videos(
        client,
        settings,
        keyword,
        max_results=SEARCH_MAX_RESULTS,
        order="relevance",
        published_after=published_after,
    )
    if not search.items:
        return None

    ids = [it.id.videoId for it in search.items[:STATS_SAMPLE_SIZE] if it.id.videoId]
    stats = await get_video_statistics(client, settings, ids)

    total_videos = search.pageInfo.totalResults
    avg_views = calculate_average_views(stats.items)

    return KeywordAnalysis(
        keyword=keyword,
        searchVolume=min(avg_views * 10, MAX_SEARCH_VOLUME),
        competitionScore=calculate_competition_score(total_videos, len(search.items)),
        trendDirection=calculate_trend_direction(search.items),
        videoCount=total_videos,
        avgViews=avg_views,
    )


async def _analyze_isolated(
    client: httpx.AsyncClient,
    settings: Settings,
    keyword: str,
    published_after: datetime,
) -> Optional[KeywordAnalysis]:
    try:
        return await analyze_keyword(client, settings, keyword, published_after)
    except Exception as e:
        logger.warning('Error analyzing keyword "%s": %s', keyword, e)
        return None


async def research_keywords(
    client: httpx.AsyncClient,
    settings: Settings,
    seed: str,
    now: Optional[datetime] = None,
) -> List[KeywordAnalysis]:
    now = now or datetime.now(timezone.utc)
    published_after = now - timedelta(days=LOOKBACK_DAYS)

    variations = generate_related_keywords(seed)
    results = await asyncio.gather(
        *(_analyze_isolated(client, settings, kw, published_after) for kw in variations)
    )

    valid = [r for r in results if r is not None]
    valid.sort(key=opportunity, reverse=True)
    logger.info("Keyword research for %r: %d/%d variations analysed", seed, len(valid), len(variations))
    return valid
