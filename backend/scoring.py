"""
Rule-based title scoring.

Used directly when no LLM is configured and as the fallback whenever the
AI-backed scorer cannot produce a valid answer. Thresholds and weights are
fixed so that fallback scores stay comparable across releases.
"""

import re
from datetime import date
from typing import List, Optional

from .lexicon import (
    CLARITY_PUNCTUATION,
    INTENT_KEYWORDS,
    POWER_WORDS,
    TREND_WORDS,
    TRENDING_FORMATS,
)
from .schemas import ScoreBreakdown, TitleScore

MAX_IMPROVEMENTS = 4
MAX_STRENGTHS = 3

_DIGIT_RE = re.compile(r"[0-9]")
_UPPER_RUN_RE = re.compile(r"[A-Z]{2,}")
_UPPER_RE = re.compile(r"[A-Z]")


def _count_matches(lower_title: str, words) -> int:
    return sum(1 for w in words if w in lower_title)


def calculate_length_score(title: str) -> int:
    length = len(title)
    if 50 <= length <= 60:
        return 100
    if 40 <= length <= 70:
        return 80
    if 30 <= length <= 80:
        return 60
    return 40


def calculate_keyword_score(title: str) -> int:
    lower = title.lower()
    score = 50
    score += 10 * _count_matches(lower, INTENT_KEYWORDS)
    score += 5 * _count_matches(lower, TREND_WORDS)
    return min(score, 100)


def calculate_engagement_score(title: str) -> int:
    lower = title.lower()
    score = 40
    score += 8 * _count_matches(lower, POWER_WORDS)
    if _DIGIT_RE.search(title):
        score += 15
    if "?" in title:
        score += 10
    if "!" in title:
        score += 5
    if _UPPER_RUN_RE.search(title):
        score += 10
    return min(score, 100)


def calculate_clarity_score(title: str) -> int:
    score = 70

    punctuation = sum(1 for ch in title if ch in CLARITY_PUNCTUATION)
    if punctuation > 3:
        score -= 20

    if ":" in title or "-" in title:
        score += 10

    caps_ratio = len(_UPPER_RE.findall(title)) / len(title) if title else 0.0
    if caps_ratio > 0.3:
        score -= 15

    return max(score, 20)


def calculate_trending_score(title: str, year: Optional[int] = None) -> int:
    current_year = str(year if year is not None else date.today().year)
    lower = title.lower()
    score = 50
    score += 10 * _count_matches(lower, TRENDING_FORMATS)
    if current_year in title:
        score += 15
    return min(score, 100)


def generate_improvements(title: str, breakdown: ScoreBreakdown) -> List[str]:
    improvements: List[str] = []

    if breakdown.length < 70:
        if len(title) < 40:
            improvements.append("Consider making your title longer (40-60 characters is optimal)")
        if len(title) > 70:
            improvements.append("Try shortening your title for better visibility")

    if breakdown.keywords < 70:
        improvements.append("Add relevant keywords like 'how to', 'best', or 'guide' to improve searchability")

    if breakdown.engagement < 70:
        improvements.append("Include numbers or power words to make your title more engaging")

    if breakdown.clarity < 70:
        improvements.append("Make your title clearer and more specific about the video content")

    if breakdown.trending < 70:
        improvements.append("Consider adding current year or trending formats to boost discoverability")

    return improvements[:MAX_IMPROVEMENTS]


def generate_strengths(breakdown: ScoreBreakdown) -> List[str]:
    strengths: List[str] = []

    if breakdown.length >= 80:
        strengths.append("Great title length for optimal visibility")
    if breakdown.keywords >= 80:
        strengths.append("Good use of searchable keywords")
    if breakdown.engagement >= 80:
        strengths.append("Engaging and attention-grabbing")
    if breakdown.clarity >= 80:
        strengths.append("Clear and easy to understand")
    if breakdown.trending >= 80:
        strengths.append("Uses trending formats effectively")

    return strengths[:MAX_STRENGTHS]


def calculate_fallback_score(title: str, year: Optional[int] = None) -> TitleScore:
    breakdown = ScoreBreakdown(
        length=calculate_length_score(title),
        keywords=calculate_keyword_score(title),
        engagement=calculate_engagement_score(title),
        clarity=calculate_clarity_score(title),
        trending=calculate_trending_score(title, year=year),
    )
    parts = breakdown.as_list()
    # mean of five ints never lands on .5, so round() matches half-up
    overall = round(sum(parts) / len(parts))

    return TitleScore(
        overall=overall,
        breakdown=breakdown,
        improvements=generate_improvements(title, breakdown),
        strengths=generate_strengths(breakdown),
    )
