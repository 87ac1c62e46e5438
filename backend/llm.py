import json
import logging
import re
from typing import Any, Dict, Optional

import httpx

from .config import Settings
from .errors import LLMError, LLMQuotaError, LLMRateLimitError, LLMResponseError
from .retry import retry_with_backoff

logger = logging.getLogger(__name__)


# -----------------------------
# Robust JSON parsing for LLM responses
# -----------------------------
def _extract_json_object(text: str) -> str:
    text = (text or "").strip()
    if not text:
        return ""
    if text.startswith("{") and text.endswith("}"):
        return text
    m = re.search(r"```(?:json)?\s*(\{.*?\})\s*```", text, flags=re.S)
    if m:
        return m.group(1).strip()
    m = re.search(r"(\{.*\})", text, flags=re.S)
    if m:
        return m.group(1).strip()
    return ""


def parse_json_reply(text: str) -> Dict[str, Any]:
    js = _extract_json_object(text)
    if not js:
        raise LLMResponseError(f"Model did not return JSON. Raw: {(text or '')[:300]}")
    try:
        data = json.loads(js)
    except json.JSONDecodeError as e:
        raise LLMResponseError(f"Model returned invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise LLMResponseError("Model returned JSON that is not an object")
    return data


# -----------------------------
# Error classification
# -----------------------------
def _error_message(r: httpx.Response) -> str:
    try:
        return str(r.json()["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return r.text


def classify_error(status_code: Optional[int], message: str) -> LLMError:
    lower = (message or "").lower()
    # OpenAI reports exhausted credit as a 429 whose message mentions the quota
    if status_code == 402 or "quota" in lower or "billing" in lower:
        return LLMQuotaError(message, status_code)
    if status_code == 429:
        return LLMRateLimitError(message, status_code)
    return LLMError(f"OpenAI error {status_code}: {message}", status_code)


# -----------------------------
# Chat completions
# -----------------------------
async def chat_completion(
    client: httpx.AsyncClient,
    settings: Settings,
    system: str,
    user: str,
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
    json_mode: bool = False,
) -> str:
    url = f"{settings.openai_base_url}/chat/completions"
    headers = {"Authorization": f"Bearer {settings.openai_api_key}", "Content-Type": "application/json"}

    payload: Dict[str, Any] = {
        "model": settings.openai_model,
        "temperature": temperature,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
    }
    if max_tokens:
        payload["max_tokens"] = max_tokens
    if json_mode:
        payload["response_format"] = {"type": "json_object"}

    try:
        r = await client.post(url, headers=headers, json=payload, timeout=settings.openai_timeout)
    except httpx.HTTPError as e:
        raise LLMError(f"OpenAI request failed: {e}") from e

    if r.status_code >= 400:
        raise classify_error(r.status_code, _error_message(r))

    try:
        txt = r.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise LLMResponseError("Unexpected chat completion payload") from e

    if not txt or not str(txt).strip():
        raise LLMResponseError("No content received from OpenAI")
    return str(txt)


async def chat_completion_with_retry(
    client: httpx.AsyncClient,
    settings: Settings,
    system: str,
    user: str,
    **kwargs: Any,
) -> str:
    return await retry_with_backoff(
        lambda: chat_completion(client, settings, system, user, **kwargs),
        max_retries=settings.openai_max_retries,
        base_delay_ms=settings.retry_base_delay_ms,
    )
