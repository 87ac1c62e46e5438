"""Keyword, hashtag and template generators (no network access)."""

import random
import re
from collections import Counter
from typing import Iterable, List, Optional, Sequence

from .lexicon import (
    CATEGORY_HASHTAGS,
    COMMON_HASHTAGS,
    DEFAULT_HASHTAGS,
    EMOTIONAL_WORDS,
    GAMING_HASHTAGS,
    GAMING_KEYWORDS,
    KEYWORD_VARIATION_TEMPLATES,
    MUSIC_HASHTAGS,
    MUSIC_KEYWORDS,
    REWRITE_EMOJIS,
    REWRITE_POWER_WORDS,
)

MAX_RELATED_TITLES = 8
MAX_HASHTAGS = 12
MAX_SUGGESTIONS = 4
MAX_KEYWORD_VARIATIONS = 10
REWRITE_COUNT = 5

_NON_WORD_RE = re.compile(r"[^\w\s]", flags=re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_NUMBERED_LINE_RE = re.compile(r"^\d+[.)]")


def _dedupe(items: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for it in items:
        if it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out


# -----------------------------
# Title keywords
# -----------------------------
def title_words(title: str, min_length: int = 3) -> List[str]:
    """Lowercased title words, punctuation stripped, at least `min_length` chars."""
    cleaned = _NON_WORD_RE.sub("", (title or "").lower())
    return [w for w in _WHITESPACE_RE.split(cleaned) if len(w) >= min_length]


def build_search_query(title: str) -> str:
    return " ".join(title_words(title)[:3])


def word_overlap_similarity(a: str, b: str) -> float:
    words_a = _WHITESPACE_RE.split(a)
    words_b = _WHITESPACE_RE.split(b)
    common = [w for w in words_a if w in words_b]
    return len(common) / max(len(words_a), len(words_b))


def select_related_titles(title: str, candidates: Sequence[str]) -> List[str]:
    lower = title.lower()
    related = [
        c for c in candidates
        if word_overlap_similarity(lower, c.lower()) < 0.7 and len(c) > 20
    ]
    return related[:MAX_RELATED_TITLES]


# -----------------------------
# Hashtags
# -----------------------------
def generate_title_hashtags(title: str) -> List[str]:
    title_tags = [f"#{w}" for w in title_words(title)]

    is_gaming = any(k in tag for tag in title_tags for k in GAMING_KEYWORDS)
    is_music = any(k in tag for tag in title_tags for k in MUSIC_KEYWORDS)

    hashtags = list(title_tags[:3])
    if is_gaming:
        hashtags += GAMING_HASHTAGS
    if is_music:
        hashtags += MUSIC_HASHTAGS
    hashtags += COMMON_HASHTAGS

    return _dedupe(hashtags)[:MAX_HASHTAGS]


def get_category_hashtags(category_id: Optional[str]) -> List[str]:
    return list(CATEGORY_HASHTAGS.get(category_id or "", DEFAULT_HASHTAGS))


# -----------------------------
# Suggestions
# -----------------------------
def find_trending_words(titles: Sequence[str], min_count: int = 3, limit: int = 3) -> List[str]:
    words = [w for w in _WHITESPACE_RE.split(" ".join(titles).lower()) if len(w) > 3]
    counts = Counter(words)
    return [w for w, c in counts.items() if c >= min_count][:limit]


def generate_optimization_suggestions(title: str, related_titles: Sequence[str]) -> List[str]:
    suggestions: List[str] = []

    if len(title) < 30:
        suggestions.append("Consider making your title longer (30-60 characters) for better SEO")
    elif len(title) > 100:
        suggestions.append("Your title might be too long. Consider shortening it to under 60 characters")

    if not re.search(r"[0-9]", title):
        suggestions.append("Adding numbers (like '2024', 'Top 10', '5 Tips') can increase click-through rates")

    lower = title.lower()
    if not any(w in lower for w in EMOTIONAL_WORDS):
        suggestions.append("Consider adding emotional words like 'Amazing', 'Epic', or 'Incredible' to boost engagement")

    trending = find_trending_words(related_titles)
    if trending:
        suggestions.append(f"Trending words in your niche: {', '.join(trending)}. Consider incorporating them.")

    return suggestions[:MAX_SUGGESTIONS]


# -----------------------------
# Keyword research
# -----------------------------
def generate_related_keywords(seed: str, limit: int = MAX_KEYWORD_VARIATIONS) -> List[str]:
    return [t.format(seed=seed) for t in KEYWORD_VARIATION_TEMPLATES][:limit]


# -----------------------------
# Template fallbacks for the AI handlers
# -----------------------------
def parse_rewrite_lines(content: str, title: str) -> List[str]:
    lines = [ln.strip() for ln in (content or "").split("\n")]
    titles = [ln for ln in lines if ln and not _NUMBERED_LINE_RE.match(ln)][:REWRITE_COUNT]
    while len(titles) < REWRITE_COUNT:
        titles.append(f"{title} - Variation {len(titles) + 1}")
    return titles


def generate_fallback_rewrites(title: str, rng: Optional[random.Random] = None) -> List[str]:
    rng = rng or random.Random()
    return [
        f"{rng.choice(REWRITE_POWER_WORDS)} {title}",
        f"{title} {rng.choice(REWRITE_EMOJIS)}",
        f"You Won't Believe: {title}",
        f"{title} - Must Watch!",
        f"The Truth About {title}",
    ]


def generate_fallback_titles(keyword: str) -> List[str]:
    return [
        f"Ultimate {keyword} Guide That Actually Works!",
        f"{keyword}: The Secret Method Nobody Talks About",
        f"I Tried {keyword} for 30 Days - Here's What Happened",
    ]


def generate_fallback_description(keyword: str) -> str:
    tag = _WHITESPACE_RE.sub("", keyword)
    return (
        f"Discover the most effective {keyword} strategies that top creators don't want you to know! "
        f"In this comprehensive guide, you'll learn proven techniques that have helped thousands of "
        f"people master {keyword}. Whether you're a complete beginner or looking to take your skills "
        f"to the next level, this video covers everything you need to know. We'll break down complex "
        f"concepts into easy-to-follow steps, share real-world examples, and give you actionable tips "
        f"you can implement immediately. Don't forget to subscribe for more {keyword} content! "
        f"#{tag} #Tutorial #Guide #Tips"
    )
