"""
LLM-backed title scoring, title rewriting and content generation.

All three share one policy:
  * no OpenAI key             -> local fallback, flagged with fallbackUsed
  * unusable model reply      -> local fallback
  * quota / billing exhausted -> local fallback, flagged with fallbackUsed
  * still rate limited after retries -> 429 ApiError (type "rate_limit")
  * anything else             -> 500 ApiError
"""

import logging
import random
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .config import Settings
from .errors import ApiError, LLMError, LLMQuotaError, LLMResponseError, RetryExhaustedError, rate_limited
from .generators import (
    generate_fallback_description,
    generate_fallback_rewrites,
    generate_fallback_titles,
    parse_rewrite_lines,
)
from .lexicon import INDIA_TRENDING_CONTEXT
from .llm import chat_completion_with_retry, parse_json_reply
from .schemas import GeneratedContent, GeneratedContentResponse, TitleRewrite, TitleScore, TitleScoreResponse
from .scoring import calculate_fallback_score

logger = logging.getLogger(__name__)


# -----------------------------
# LLM prompts
# -----------------------------
SCORE_SYSTEM = """You are a YouTube title optimization expert. Analyze the given title and provide a detailed score breakdown and improvement suggestions.

Return STRICT JSON only, with this exact structure:
{
  "overall": number (0-100),
  "breakdown": {
    "length": number (0-100),
    "keywords": number (0-100),
    "engagement": number (0-100),
    "clarity": number (0-100),
    "trending": number (0-100)
  },
  "improvements": ["improvement suggestion 1", "improvement suggestion 2", ...],
  "strengths": ["strength 1", "strength 2", ...]
}

Scoring criteria:
- Length: optimal 50-60 characters, penalize if too short (<30) or too long (>70)
- Keywords: searchable, relevant keywords and trending terms
- Engagement: power words, numbers, emotional triggers, urgency
- Clarity: clear value proposition, easy to understand, not clickbait
- Trending: current trends, popular formats, viral elements

Provide 3-5 specific, actionable improvement suggestions and 2-4 strengths."""

SCORE_USER_TEMPLATE = """Analyze this YouTube title: "{title}"

Provide a comprehensive score breakdown and specific suggestions for improvement."""

REWRITE_SYSTEM = (
    "You are a YouTube content optimization expert specializing in viral Indian content. "
    "Rewrite video titles to make them more engaging, clickable and viral while keeping the core message.\n"
    "Guidelines:\n"
    "- Use power words and emotional triggers that work for Indian viewers\n"
    "- Use numbers, questions or curiosity gaps when appropriate\n"
    "- Keep each title under 60 characters\n"
    "- Make every variation take a different angle: emotional, curiosity, benefit, urgency, trending\n"
    "- Stay relevant to the original title's intent\n"
    "Return exactly 5 rewritten titles, one per line, without numbering or bullet points.\n"
    + INDIA_TRENDING_CONTEXT
)

REWRITE_USER_TEMPLATE = (
    'Rewrite this YouTube video title in 5 different ways, making them more viral and engaging '
    'for an Indian audience: "{title}"'
)

CONTENT_SYSTEM = (
    "You are a YouTube content optimization expert. Generate engaging, SEO-friendly video titles "
    "and descriptions that attract viewers and rank well in search results.\n"
    "Return STRICT JSON only."
)

CONTENT_USER_TEMPLATE = """Generate 3 optimized YouTube video titles and 1 engaging video description (around 150 words) for the keyword: "{keyword}".

The titles should:
- grab attention and include the keyword naturally
- be 50-60 characters long
- use power words and emotional triggers

The description should:
- integrate the keyword naturally for SEO
- open with a compelling hook in the first 2 lines
- say what viewers will learn or gain
- end with relevant hashtags

Return JSON with a "titles" array of strings and a "description" string."""

NO_KEY_SCORE_MESSAGE = "AI analysis unavailable (OpenAI not configured). Using rule-based scoring."
QUOTA_SCORE_MESSAGE = "AI analysis unavailable due to quota limits. Using rule-based scoring."
REWRITE_FALLBACK_MESSAGE = "Generated using basic rewrite patterns (OpenAI unavailable)"
CONTENT_FALLBACK_MESSAGE = "AI content unavailable. Generated using templates."
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please wait a moment before trying again."


class FallbackRequired(Exception):
    pass


async def _complete(
    client: httpx.AsyncClient,
    settings: Settings,
    system: str,
    user: str,
    failure_message: str,
    rate_limit_message: str = RATE_LIMIT_MESSAGE,
    **kwargs: Any,
) -> str:
    """Ask the model, turning upstream failures into fallbacks or API errors."""
    try:
        return await chat_completion_with_retry(client, settings, system, user, **kwargs)
    except LLMQuotaError as e:
        logger.warning("OpenAI quota exceeded, using fallback: %s", e)
        raise FallbackRequired() from e
    except RetryExhaustedError as e:
        logger.warning("OpenAI still rate limited after %d attempts", e.attempts)
        raise rate_limited(rate_limit_message) from e
    except LLMResponseError:
        raise
    except LLMError as e:
        logger.error("OpenAI error: %s", e)
        raise ApiError(500, failure_message) from e


# -----------------------------
# Title scoring
# -----------------------------
def _fallback_score(title: str, message: Optional[str] = None, year: Optional[int] = None) -> TitleScoreResponse:
    score = calculate_fallback_score(title, year=year)
    if message is None:
        return TitleScoreResponse(**score.model_dump())
    return TitleScoreResponse(**score.model_dump(), fallbackUsed=True, message=message)


async def score_title(
    client: httpx.AsyncClient,
    settings: Settings,
    title: str,
    year: Optional[int] = None,
) -> TitleScoreResponse:
    if not settings.has_openai:
        logger.info("OpenAI API key not configured, using fallback scoring")
        return _fallback_score(title, NO_KEY_SCORE_MESSAGE, year)

    try:
        text = await _complete(
            client,
            settings,
            SCORE_SYSTEM,
            SCORE_USER_TEMPLATE.format(title=title),
            failure_message="Failed to score title. Please try again.",
            temperature=0.3,
            json_mode=True,
        )
        score = TitleScore.model_validate(parse_json_reply(text))
    except FallbackRequired:
        return _fallback_score(title, QUOTA_SCORE_MESSAGE, year)
    except (LLMResponseError, ValidationError) as e:
        logger.warning("Invalid AI response, using fallback scoring: %s", e)
        return _fallback_score(title, year=year)

    return TitleScoreResponse(**score.model_dump())


# -----------------------------
# Title rewriting
# -----------------------------
def _fallback_rewrite(title: str, rng: Optional[random.Random] = None) -> TitleRewrite:
    return TitleRewrite(
        rewrittenTitles=generate_fallback_rewrites(title, rng),
        originalTitle=title,
        fallbackUsed=True,
        message=REWRITE_FALLBACK_MESSAGE,
    )


async def rewrite_titles(
    client: httpx.AsyncClient,
    settings: Settings,
    title: str,
    rng: Optional[random.Random] = None,
) -> TitleRewrite:
    if not settings.has_openai:
        logger.info("OpenAI API key not configured, using fallback rewrites")
        return _fallback_rewrite(title, rng)

    try:
        text = await _complete(
            client,
            settings,
            REWRITE_SYSTEM,
            REWRITE_USER_TEMPLATE.format(title=title),
            failure_message="Failed to rewrite titles. Please try again.",
            temperature=0.9,
            max_tokens=500,
        )
    except FallbackRequired:
        return _fallback_rewrite(title, rng)
    except LLMResponseError as e:
        logger.warning("Unusable rewrite response, using fallback rewrites: %s", e)
        return _fallback_rewrite(title, rng)

    return TitleRewrite(rewrittenTitles=parse_rewrite_lines(text, title), originalTitle=title)


# -----------------------------
# Content generation
# -----------------------------
def _fallback_content(keyword: str, message: Optional[str] = None) -> GeneratedContentResponse:
    content = GeneratedContentResponse(
        titles=generate_fallback_titles(keyword),
        description=generate_fallback_description(keyword),
    )
    if message:
        content.fallbackUsed = True
        content.message = message
    return content


async def generate_content(
    client: httpx.AsyncClient,
    settings: Settings,
    keyword: str,
) -> GeneratedContentResponse:
    if not settings.has_openai:
        logger.info("OpenAI API key not configured, using template content")
        return _fallback_content(keyword, CONTENT_FALLBACK_MESSAGE)

    try:
        text = await _complete(
            client,
            settings,
            CONTENT_SYSTEM,
            CONTENT_USER_TEMPLATE.format(keyword=keyword),
            failure_message="Failed to generate AI content",
            rate_limit_message="OpenAI API rate limit exceeded. Please wait a moment and try again.",
            temperature=0.8,
            max_tokens=800,
            json_mode=True,
        )
        content = GeneratedContent.model_validate(parse_json_reply(text))
    except FallbackRequired:
        return _fallback_content(keyword, CONTENT_FALLBACK_MESSAGE)
    except (LLMResponseError, ValidationError) as e:
        logger.warning("Invalid AI content response, using templates: %s", e)
        return _fallback_content(keyword)

    return GeneratedContentResponse(**content.model_dump())
