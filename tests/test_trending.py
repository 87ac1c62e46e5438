import random

import httpx

from backend.lexicon import CATEGORY_HASHTAGS, DEFAULT_HASHTAGS
from backend.schemas import TrendingSearch
from backend.trending import (
    direct_search_volume,
    jittered_search_volume,
    leading_words_keyword,
    rank_trending,
    significant_words_keyword,
)
from backend.youtube import Video

from .helpers import Recorder, video


class FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


def popular(items):
    return Recorder(lambda request: httpx.Response(200, json={"items": items}))


# -----------------------------
# Derivation helpers
# -----------------------------
def test_leading_words_keyword():
    assert leading_words_keyword("India vs Australia Final Highlights") == "India vs Australia"
    assert leading_words_keyword("Short") == "Short"


def test_significant_words_keyword():
    assert significant_words_keyword("Top 10 Gaming Moments!!!") == "gaming moments"
    assert significant_words_keyword("Hi! Ok") == "Hi! Ok"


def test_direct_search_volume():
    assert direct_search_volume(1234567) == 1234
    assert direct_search_volume(999) == 0


def test_jittered_search_volume_bounds():
    assert jittered_search_volume(10_000_000, FixedRandom(0.0)) == 5000
    assert jittered_search_volume(10_000_000, FixedRandom(0.999999)) == 9999
    assert jittered_search_volume(100, FixedRandom(0.5)) == 1000
    assert jittered_search_volume(5_000_000_000, FixedRandom(0.5)) == 500000


def test_rank_trending_dedupes_sorts_and_truncates():
    items = [TrendingSearch(keyword=f"kw {i}", searchVolume=i, category="1") for i in range(15)]
    items.append(TrendingSearch(keyword="kw 14", searchVolume=10_000, category="1"))

    ranked = rank_trending(items)

    assert len(ranked) == 10
    assert [t.searchVolume for t in ranked] == sorted((t.searchVolume for t in ranked), reverse=True)
    assert [t.keyword for t in ranked].count("kw 14") == 1
    assert ranked[0].searchVolume == 14


# -----------------------------
# India feed
# -----------------------------
def test_india_trending_dedupes_and_ranks(api):
    items = [video(f"v{i}", f"Video number {i} is here", (i + 1) * 100_000, "20") for i in range(12)]
    items.append(video("dup", "Video number 3 again, louder", 99_000_000, "20"))
    recorder = popular(items)

    resp = api(recorder).post("/api/youtube/trending-india", json={"categoryId": "20"})

    assert resp.status_code == 200
    body = resp.json()
    keywords = [t["keyword"] for t in body["trending"]]
    assert len(keywords) == 10
    assert len(set(keywords)) == 10
    assert keywords[0] == "Video number 11"
    assert body["trending"][0]["searchVolume"] == 1200
    assert body["trending"][0]["category"] == "20"
    assert body["hashtags"] == list(CATEGORY_HASHTAGS["20"])

    params = recorder.requests[0].url.params
    assert params["regionCode"] == "IN"
    assert params["chart"] == "mostPopular"
    assert params["maxResults"] == "50"
    assert params["videoCategoryId"] == "20"
    assert params["key"] == "yt-test-key"


def test_india_trending_unfiltered_category(api):
    recorder = popular([video("v1", "One two three four", 5000)])

    for category in ("all", "0", None):
        payload = {"categoryId": category} if category is not None else {}
        resp = api(recorder).post("/api/youtube/trending-india", json=payload)
        assert resp.status_code == 200
        assert resp.json()["hashtags"] == list(DEFAULT_HASHTAGS)

    assert all("videoCategoryId" not in r.url.params for r in recorder.requests)


def test_india_trending_empty_is_not_an_error(api):
    resp = api(popular([])).post("/api/youtube/trending-india", json={"categoryId": "0"})
    assert resp.status_code == 200
    assert resp.json() == {"trending": [], "hashtags": list(DEFAULT_HASHTAGS)}


def test_india_trending_requires_key(api):
    resp = api(youtube_api_key="").post("/api/youtube/trending-india", json={})
    assert resp.status_code == 500
    assert resp.json() == {"error": "YouTube API key not configured"}


def test_india_trending_upstream_failure(api):
    failing = Recorder(lambda request: httpx.Response(403, json={"error": {"message": "quotaExceeded"}}))
    resp = api(failing).post("/api/youtube/trending-india", json={})
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to fetch trending videos"
    assert "403" in body["details"]


def test_india_trending_rejects_malformed_payload(api):
    broken = Recorder(lambda request: httpx.Response(200, json={"items": "not-a-list"}))
    resp = api(broken).post("/api/youtube/trending-india", json={})
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to fetch trending videos"


# -----------------------------
# US feed
# -----------------------------
def test_us_trending_empty(api):
    resp = api(popular([])).post("/api/youtube/trending", json={"categoryId": "all"})
    assert resp.status_code == 200
    assert resp.json() == {"trending": []}


def test_us_trending_volumes_are_clamped(api):
    items = [
        video("a", "Massive Football Final Highlights", 2_000_000_000),
        video("b", "Quiet Piano Evening Session", 10),
        video("c", "massive football final replay!!", 50_000_000),
    ]
    recorder = popular(items)

    resp = api(recorder).post("/api/youtube/trending", json={"categoryId": "17"})

    assert resp.status_code == 200
    trending = resp.json()["trending"]
    assert [t["keyword"] for t in trending] == ["massive football final", "quiet piano evening"]
    assert trending[0]["searchVolume"] == 500000
    assert trending[1]["searchVolume"] == 1000

    params = recorder.requests[0].url.params
    assert params["regionCode"] == "US"
    assert params["maxResults"] == "10"
    assert params["videoCategoryId"] == "17"


def test_video_snippet_keeps_only_used_fields():
    parsed = Video.model_validate({
        "id": "v1",
        "snippet": {"title": "t", "description": "long text", "channelTitle": "chan", "categoryId": "10"},
    })
    assert parsed.snippet.title == "t"
    assert set(parsed.snippet.model_dump()) == {"title", "categoryId", "publishedAt"}
