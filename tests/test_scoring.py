import pytest

from backend.schemas import ScoreBreakdown
from backend.scoring import (
    calculate_clarity_score,
    calculate_engagement_score,
    calculate_fallback_score,
    calculate_keyword_score,
    calculate_length_score,
    calculate_trending_score,
    generate_improvements,
    generate_strengths,
)

SAMPLE_TITLES = [
    "",
    "a",
    "BGMI Best Tips and Tricks 2024",
    "How to Cook Perfect Rice: The Ultimate Guide for Beginners 2025",
    "WHAT?! WHY?! HOW?!",
    "My vacation vlog",
    "Top 10 SHOCKING Secrets Hidden in Minecraft - Reaction vs Review Challenge Unboxing!",
    "Is this the best phone of the year? Full review and unboxing",
]


@pytest.mark.parametrize("length,expected", [
    (10, 40), (29, 40), (30, 60), (39, 60), (40, 80), (49, 80),
    (50, 100), (55, 100), (60, 100), (61, 80), (70, 80), (71, 60), (80, 60), (81, 40),
])
def test_length_bands(length, expected):
    assert calculate_length_score("a" * length) == expected


def test_plain_title_engagement_is_base():
    assert calculate_engagement_score("my quiet morning routine at home") == 40


def test_engagement_markers():
    # digits +15, ? +10, ! +5, upper run +10, "secret" +8
    assert calculate_engagement_score("the secret of 5 CATS? wow!") == 40 + 8 + 15 + 10 + 5 + 10


def test_engagement_capped():
    title = "AMAZING incredible shocking unbelievable secret hidden ultimate perfect 10?!"
    assert calculate_engagement_score(title) == 100


def test_keyword_score_matches_and_cap():
    assert calculate_keyword_score("my quiet morning routine") == 50
    assert calculate_keyword_score("a guide") == 60
    assert calculate_keyword_score("latest update") == 60
    assert calculate_keyword_score("how to best top guide tutorial review tips") == 100


def test_clarity_penalties_and_bonus():
    assert calculate_clarity_score("plain lowercase title") == 70
    assert calculate_clarity_score("Rice: a guide") == 80
    assert calculate_clarity_score("WHAT?! WHY?! HOW?!") == 35
    assert calculate_clarity_score("") == 70


def test_clarity_floor():
    assert calculate_clarity_score("AAAA...,,,;;;") >= 20


def test_trending_score_year_bonus():
    assert calculate_trending_score("new phone 2030", year=2030) == 65
    assert calculate_trending_score("new phone 2030", year=2031) == 50
    assert calculate_trending_score("Reaction vs Challenge 2030", year=2030) == 95


def test_bgmi_title_breakdown():
    title = "BGMI Best Tips and Tricks 2024"
    score = calculate_fallback_score(title, year=2026)

    assert len(title) == 30
    assert score.breakdown.length == 60
    assert score.breakdown.keywords == 85
    assert score.breakdown.engagement == 65
    assert score.breakdown.clarity == 70
    assert score.breakdown.trending == 50
    assert score.overall == 66
    assert score.strengths == ["Good use of searchable keywords"]
    assert score.improvements == [
        "Consider making your title longer (40-60 characters is optimal)",
        "Include numbers or power words to make your title more engaging",
        "Consider adding current year or trending formats to boost discoverability",
    ]

    assert calculate_fallback_score(title, year=2024).breakdown.trending == 65


@pytest.mark.parametrize("title", SAMPLE_TITLES)
def test_overall_is_rounded_mean(title):
    score = calculate_fallback_score(title, year=2025)
    parts = score.breakdown.as_list()
    assert score.overall == round(sum(parts) / 5)
    assert all(0 <= p <= 100 for p in parts)


@pytest.mark.parametrize("title", SAMPLE_TITLES)
def test_list_caps(title):
    score = calculate_fallback_score(title, year=2025)
    assert len(score.improvements) <= 4
    assert len(score.strengths) <= 3


def test_improvements_capped_at_four():
    weak = ScoreBreakdown(length=40, keywords=50, engagement=40, clarity=35, trending=50)
    improvements = generate_improvements("short", weak)
    assert len(improvements) == 4
    assert improvements[0].startswith("Consider making your title longer")


def test_long_title_gets_shortening_hint():
    title = "x" * 90
    breakdown = ScoreBreakdown(length=40, keywords=90, engagement=90, clarity=90, trending=90)
    assert generate_improvements(title, breakdown) == ["Try shortening your title for better visibility"]


def test_strengths_capped_at_three():
    strong = ScoreBreakdown(length=100, keywords=90, engagement=85, clarity=80, trending=95)
    assert generate_strengths(strong) == [
        "Great title length for optimal visibility",
        "Good use of searchable keywords",
        "Engaging and attention-grabbing",
    ]
