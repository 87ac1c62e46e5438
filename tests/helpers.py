import json
from typing import Any, Callable, Dict, List

import httpx

from backend.config import Settings


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "youtube_api_key": "yt-test-key",
        "openai_api_key": "sk-test",
        "openai_model": "gpt-test",
        "retry_base_delay_ms": 0,
    }
    values.update(overrides)
    return Settings(**values)


def video(video_id: str, title: str, views: int, category: str = "24") -> Dict[str, Any]:
    return {
        "id": video_id,
        "snippet": {"title": title, "categoryId": category},
        "statistics": {"viewCount": str(views)},
    }


def chat_reply(content: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


def openai_error(status: int, message: str = "error") -> httpx.Response:
    return httpx.Response(status, json={"error": {"message": message}})


class Recorder:
    """Wraps a MockTransport handler and keeps every request it saw."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def json_bodies(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]
