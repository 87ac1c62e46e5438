import logging
import os
from typing import AsyncIterator, Dict, List, Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .assistant import generate_content, rewrite_titles, score_title
from .config import Settings, get_settings
from .csv_export import format_csv_filename, generate_csv
from .errors import ApiError, bad_request, missing_credential, register_error_handlers
from .generators import (
    build_search_query,
    generate_optimization_suggestions,
    generate_title_hashtags,
    select_related_titles,
)
from .keywords import research_keywords
from .lexicon import CATEGORIES
from .schemas import (
    Category,
    CategoryRequest,
    GeneratedContentResponse,
    IndiaTrendingResponse,
    KeywordAnalysis,
    KeywordRequest,
    KeywordResearchResponse,
    TitleAnalysis,
    TitleRequest,
    TitleRewrite,
    TitleScoreResponse,
    TrendingResponse,
)
from .trending import india_trending, us_trending
from .youtube import search_videos

_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# -----------------------------
# FastAPI app
# -----------------------------
app = FastAPI(title="TubeTrends Backend", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# -----------------------------
# Dependencies
# -----------------------------
async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yield client


def require_text(value: Optional[str], error: str) -> str:
    if not value or not value.strip():
        raise bad_request(error)
    return value


def require_youtube(settings: Settings) -> None:
    if not settings.has_youtube:
        raise missing_credential("YouTube")


# -----------------------------
# Routes
# -----------------------------
@app.get("/")
def root() -> Dict[str, str]:
    return {"message": "TubeTrends backend is running. Use /health or the /api routes"}


@app.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "ok": True,
        "model": settings.openai_model,
        "youtube": settings.has_youtube,
        "openai": settings.has_openai,
    }


@app.get("/api/youtube/categories")
def categories() -> Dict[str, List[Category]]:
    return {
        "categories": [
            Category(id=slug, name=name, categoryId=category_id)
            for slug, (name, category_id) in CATEGORIES.items()
        ]
    }


@app.post("/api/youtube/trending-india", response_model=IndiaTrendingResponse)
async def trending_india(
    body: Optional[CategoryRequest] = None,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    require_youtube(settings)
    category_id = body.categoryId if body else None
    try:
        return await india_trending(client, settings, category_id)
    except Exception as e:
        logger.exception("Error fetching India trending videos")
        raise ApiError(500, "Failed to fetch trending videos", details=str(e))


@app.post("/api/youtube/trending", response_model=TrendingResponse)
async def trending(
    body: Optional[CategoryRequest] = None,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    require_youtube(settings)
    category_id = body.categoryId if body else None
    try:
        return await us_trending(client, settings, category_id)
    except Exception as e:
        logger.exception("Error fetching trending searches")
        raise ApiError(500, "Failed to fetch trending searches", details=str(e))


@app.post("/api/youtube/analyze-title", response_model=TitleAnalysis)
async def analyze_title(
    body: TitleRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    title = require_text(body.title, "Title is required")
    require_youtube(settings)

    try:
        search = await search_videos(client, settings, build_search_query(title), max_results=20)
        related = select_related_titles(title, [it.snippet.title for it in search.items])
        return TitleAnalysis(
            relatedTitles=related,
            hashtags=generate_title_hashtags(title),
            suggestions=generate_optimization_suggestions(title, related),
        )
    except Exception as e:
        logger.exception("Title analysis error")
        raise ApiError(500, "Failed to analyze title", details=str(e))


@app.post("/api/youtube/score-title", response_model=TitleScoreResponse, response_model_exclude_none=True)
async def score_title_route(
    body: TitleRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    title = require_text(body.title, "Title is required")
    try:
        return await score_title(client, settings, title)
    except ApiError:
        raise
    except Exception:
        logger.exception("Title scoring error")
        raise ApiError(500, "Failed to score title. Please try again.")


@app.post("/api/youtube/rewrite-titles", response_model=TitleRewrite, response_model_exclude_none=True)
async def rewrite_titles_route(
    body: TitleRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    title = require_text(body.title, "Title is required and must be a string")
    try:
        return await rewrite_titles(client, settings, title)
    except ApiError:
        raise
    except Exception:
        logger.exception("Title rewrite error")
        raise ApiError(500, "Failed to rewrite titles. Please try again.")


@app.post("/api/youtube/analyze", response_model=KeywordResearchResponse)
async def analyze_keywords(
    body: KeywordRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    keyword = require_text(body.keyword, "Keyword is required")
    require_youtube(settings)
    try:
        return KeywordResearchResponse(keywords=await research_keywords(client, settings, keyword))
    except Exception:
        logger.exception("YouTube analysis error")
        raise ApiError(500, "Failed to analyze keywords")


@app.post("/api/youtube/analyze/csv")
async def export_keywords_csv(
    body: KeywordRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    keyword = require_text(body.keyword, "Keyword is required")
    require_youtube(settings)
    try:
        rows: List[KeywordAnalysis] = await research_keywords(client, settings, keyword)
    except Exception:
        logger.exception("Keyword export error")
        raise ApiError(500, "Failed to analyze keywords")

    filename = format_csv_filename(keyword)
    return Response(
        content=generate_csv(rows),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/api/ai/generate-content", response_model=GeneratedContentResponse, response_model_exclude_none=True)
async def generate_content_route(
    body: KeywordRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    keyword = require_text(body.keyword, "Keyword is required")
    try:
        return await generate_content(client, settings, keyword)
    except ApiError:
        raise
    except Exception:
        logger.exception("AI content generation error")
        raise ApiError(500, "Failed to generate AI content")


def main() -> None:
    uvicorn.run(
        "backend.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
