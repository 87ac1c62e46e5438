"""Static word lists and lookup tables shared by the scorer and generators."""

from types import MappingProxyType
from typing import Mapping, Tuple


# -----------------------------
# Title scoring
# -----------------------------
INTENT_KEYWORDS: Tuple[str, ...] = (
    "how to", "best", "top", "guide", "tutorial",
    "review", "vs", "tips", "tricks", "secrets",
)

TREND_WORDS: Tuple[str, ...] = ("2024", "2025", "new", "latest", "update", "viral", "trending")

POWER_WORDS: Tuple[str, ...] = (
    "amazing", "incredible", "shocking", "unbelievable",
    "secret", "hidden", "ultimate", "perfect",
)

TRENDING_FORMATS: Tuple[str, ...] = (
    "vs", "reaction", "review", "unboxing", "first time", "trying", "challenge",
)

CLARITY_PUNCTUATION = "!?.,;:"


# -----------------------------
# Title analysis
# -----------------------------
COMMON_HASHTAGS: Tuple[str, ...] = (
    "#viral", "#trending", "#youtube", "#shorts", "#fyp", "#subscribe", "#like", "#share",
)

GAMING_KEYWORDS: Tuple[str, ...] = ("bgmi", "gaming", "game", "pubg", "mobile", "tips", "tricks", "gameplay")
GAMING_HASHTAGS: Tuple[str, ...] = (
    "#gaming", "#mobilegaming", "#bgmi", "#pubgmobile", "#gamingcommunity", "#esports",
)

MUSIC_KEYWORDS: Tuple[str, ...] = ("song", "music", "cover", "remix", "beat", "lyrics")
MUSIC_HASHTAGS: Tuple[str, ...] = ("#music", "#song", "#cover", "#remix", "#musician", "#newmusic")

EMOTIONAL_WORDS: Tuple[str, ...] = ("amazing", "incredible", "shocking", "unbelievable", "epic", "insane", "crazy")


# -----------------------------
# Trending feed
# -----------------------------
# UI category slug -> (display name, YouTube videoCategoryId)
CATEGORIES: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "all": ("All", "0"),
    "gaming": ("Gaming", "20"),
    "music": ("Music", "10"),
    "sports": ("Sports", "17"),
    "entertainment": ("Entertainment", "24"),
    "education": ("Education", "27"),
    "tech": ("Tech", "28"),
    "news": ("News", "25"),
})

UNFILTERED_CATEGORY_IDS = frozenset({"all", "0"})

CATEGORY_HASHTAGS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "20": (  # Gaming
        "#BGMI", "#Gaming", "#PUBGMobile", "#FreeFire", "#CallOfDuty",
        "#Esports", "#GamingIndia", "#MobileGaming", "#LiveGaming", "#ProGamer",
    ),
    "10": (  # Music
        "#BollyWood", "#Music", "#Song", "#Dance", "#Singer",
        "#MusicVideo", "#IndianMusic", "#Trending", "#Viral", "#NewSong",
    ),
    "17": (  # Sports
        "#Cricket", "#Football", "#Sports", "#IPL", "#IndianSports",
        "#Fitness", "#Workout", "#Match", "#Tournament", "#Champion",
    ),
    "24": (  # Entertainment
        "#Entertainment", "#Comedy", "#Funny", "#Viral", "#Trending",
        "#Bollywood", "#Drama", "#Movie", "#Celebrity", "#Fun",
    ),
    "27": (  # Education
        "#Education", "#Learning", "#Study", "#Tutorial", "#Knowledge",
        "#School", "#College", "#Exam", "#Tips", "#Guide",
    ),
    "28": (  # Science & Technology
        "#Technology", "#Tech", "#Innovation", "#Science", "#AI",
        "#Mobile", "#Gadgets", "#Review", "#Latest", "#Future",
    ),
    "25": (  # News & Politics
        "#News", "#Politics", "#India", "#Current", "#Breaking",
        "#Update", "#Government", "#Election", "#Policy", "#Nation",
    ),
})

DEFAULT_HASHTAGS: Tuple[str, ...] = (
    "#Trending", "#Viral", "#India", "#Popular", "#Latest",
    "#Hot", "#New", "#Top", "#Best", "#Amazing",
)


# -----------------------------
# Keyword research
# -----------------------------
KEYWORD_VARIATION_TEMPLATES: Tuple[str, ...] = (
    "{seed}",
    "{seed} tutorial",
    "{seed} tips",
    "{seed} guide",
    "{seed} review",
    "{seed} 2024",
    "{seed} for beginners",
    "{seed} advanced",
    "how to {seed}",
    "best {seed}",
    "{seed} explained",
    "{seed} secrets",
    "{seed} mistakes",
    "{seed} vs",
    "{seed} comparison",
)


# -----------------------------
# Fallback rewrites
# -----------------------------
REWRITE_POWER_WORDS: Tuple[str, ...] = (
    "Amazing", "Shocking", "Incredible", "Unbelievable", "Secret",
    "Hidden", "Ultimate", "Best", "Worst", "Epic",
)

REWRITE_EMOJIS: Tuple[str, ...] = ("😱", "🔥", "💯", "⚡", "🚀", "💥", "🎯", "✨")

INDIA_TRENDING_CONTEXT = (
    "Current trending topics in India: BGMI, Cricket World Cup, Bollywood, Tech Reviews, "
    "Gaming, Music Videos, Comedy, Food Vlogs, Travel, Education, News, Sports Highlights, "
    "Movie Trailers, Dance Videos, Fashion"
)
