import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# -----------------------------
# Errors surfaced to API callers
# -----------------------------
class ApiError(Exception):
    """An error that maps straight onto a JSON error response."""

    def __init__(
        self,
        status_code: int,
        error: str,
        type: Optional[str] = None,
        details: Optional[str] = None,
    ):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.type = type
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error}
        if self.type:
            body["type"] = self.type
        if self.details:
            body["details"] = self.details
        return body


def bad_request(error: str) -> ApiError:
    return ApiError(400, error)


def missing_credential(service: str) -> ApiError:
    return ApiError(500, f"{service} API key not configured")


def rate_limited(error: str) -> ApiError:
    return ApiError(429, error, type="rate_limit")


# -----------------------------
# Upstream failures
# -----------------------------
class UpstreamError(Exception):
    """Base class for failures talking to YouTube or OpenAI."""

    status_code: Optional[int] = None


class YouTubeAPIError(UpstreamError):
    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"YouTube API returned {status_code}: {body[:300]}")
        self.status_code = status_code


class UpstreamSchemaError(UpstreamError):
    """An upstream payload did not match the expected response schema."""


class LLMError(UpstreamError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMRateLimitError(LLMError):
    pass


class LLMQuotaError(LLMError):
    pass


class LLMResponseError(LLMError):
    """The model answered, but not in the requested shape."""


class RetryExhaustedError(Exception):
    def __init__(self, attempts: int, last_error: Optional[BaseException] = None):
        super().__init__(f"Max retries exceeded after {attempts} attempts")
        self.attempts = attempts
        self.last_error = last_error


# -----------------------------
# Handlers
# -----------------------------
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
