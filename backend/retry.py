import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from .errors import LLMQuotaError, LLMRateLimitError, RetryExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY_MS = 1000


def is_rate_limited(exc: BaseException) -> bool:
    # exhausted credit also arrives as a 429
    if isinstance(exc, LLMQuotaError):
        return False
    if isinstance(exc, LLMRateLimitError):
        return True
    return getattr(exc, "status_code", None) == 429


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_delay_ms: float = DEFAULT_BASE_DELAY_MS,
    is_retryable: Callable[[BaseException], bool] = is_rate_limited,
) -> T:
    """
    Await `operation()` up to `max_retries` times.

    Only failures accepted by `is_retryable` are retried, after sleeping
    base_delay_ms * 2**attempt. Anything else propagates on the spot. If the
    final attempt is still rate limited, RetryExhaustedError is raised with
    the last failure chained.
    """
    last_err: Optional[BaseException] = None
    for attempt in range(max_retries):
        try:
            return await operation()
        except Exception as e:
            if not is_retryable(e):
                raise
            last_err = e
            if attempt < max_retries - 1:
                delay_ms = base_delay_ms * (2 ** attempt)
                logger.info("Rate limited, retrying in %sms (attempt %d/%d)", delay_ms, attempt + 1, max_retries)
                await asyncio.sleep(delay_ms / 1000)

    raise RetryExhaustedError(max_retries, last_err) from last_err
