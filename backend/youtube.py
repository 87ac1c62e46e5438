"""Thin async client for the parts of the YouTube Data API v3 we use."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

import httpx
from pydantic import BaseModel, Field, ValidationError

from .config import Settings
from .errors import UpstreamSchemaError, YouTubeAPIError
from .lexicon import UNFILTERED_CATEGORY_IDS

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


# -----------------------------
# Response schemas
# -----------------------------
class VideoSnippet(BaseModel):
    title: str = ""
    categoryId: str = ""
    publishedAt: Optional[datetime] = None


class VideoStatistics(BaseModel):
    viewCount: int = 0
    likeCount: int = 0
    commentCount: int = 0


class Video(BaseModel):
    id: str = ""
    snippet: VideoSnippet = Field(default_factory=VideoSnippet)
    statistics: VideoStatistics = Field(default_factory=VideoStatistics)


class VideoListResponse(BaseModel):
    items: List[Video] = Field(default_factory=list)


class SearchResultId(BaseModel):
    videoId: Optional[str] = None


class SearchResult(BaseModel):
    id: SearchResultId = Field(default_factory=SearchResultId)
    snippet: VideoSnippet = Field(default_factory=VideoSnippet)


class PageInfo(BaseModel):
    totalResults: int = 0


class SearchListResponse(BaseModel):
    items: List[SearchResult] = Field(default_factory=list)
    pageInfo: PageInfo = Field(default_factory=PageInfo)


# -----------------------------
# Transport
# -----------------------------
def _parse(model: Type[M], data: Any, resource: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise UpstreamSchemaError(f"Unexpected {resource} response from YouTube API: {e.error_count()} invalid field(s)") from e


async def youtube_get(
    client: httpx.AsyncClient,
    settings: Settings,
    resource: str,
    params: Dict[str, Any],
) -> Any:
    url = f"{settings.youtube_base_url}/{resource}"
    logger.info("Fetching from YouTube API: %s %s", resource, params)

    r = await client.get(url, params={**params, "key": settings.youtube_api_key}, timeout=settings.http_timeout)
    if r.status_code >= 400:
        logger.error("YouTube API error %s on %s: %s", r.status_code, resource, r.text[:500])
        raise YouTubeAPIError(r.status_code, r.text)

    try:
        return r.json()
    except ValueError as e:
        raise UpstreamSchemaError(f"YouTube API {resource} response is not JSON") from e


def is_unfiltered_category(category_id: Optional[str]) -> bool:
    return not category_id or category_id in UNFILTERED_CATEGORY_IDS


# -----------------------------
# Endpoints
# -----------------------------
async def list_most_popular(
    client: httpx.AsyncClient,
    settings: Settings,
    region_code: str,
    max_results: int,
    category_id: Optional[str] = None,
) -> VideoListResponse:
    params: Dict[str, Any] = {
        "part": "snippet,statistics",
        "chart": "mostPopular",
        "regionCode": region_code,
        "maxResults": max_results,
    }
    if not is_unfiltered_category(category_id):
        params["videoCategoryId"] = category_id

    data = await youtube_get(client, settings, "videos", params)
    return _parse(VideoListResponse, data, "videos")


async def search_videos(
    client: httpx.AsyncClient,
    settings: Settings,
    query: str,
    max_results: int,
    order: str = "relevance",
    published_after: Optional[datetime] = None,
) -> SearchListResponse:
    params: Dict[str, Any] = {
        "part": "snippet",
        "q": query,
        "type": "video",
        "order": order,
        "maxResults": max_results,
    }
    if published_after is not None:
        params["publishedAfter"] = published_after.strftime("%Y-%m-%dT%H:%M:%SZ")

    data = await youtube_get(client, settings, "search", params)
    return _parse(SearchListResponse, data, "search")


async def get_video_statistics(
    client: httpx.AsyncClient,
    settings: Settings,
    video_ids: Sequence[str],
) -> VideoListResponse:
    if not video_ids:
        return VideoListResponse()
    data = await youtube_get(client, settings, "videos", {"part": "statistics", "id": ",".join(video_ids)})
    return _parse(VideoListResponse, data, "videos")
