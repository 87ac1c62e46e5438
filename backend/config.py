import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field


# -----------------------------
# Config
# -----------------------------
class Settings(BaseModel):
    youtube_api_key: str = ""
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_base_url: str = "https://api.openai.com/v1"
    youtube_base_url: str = "https://www.googleapis.com/youtube/v3"

    http_timeout: float = 25.0
    openai_timeout: float = 35.0
    openai_max_retries: int = Field(3, ge=1)
    retry_base_delay_ms: float = Field(1000.0, ge=0)

    allowed_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"

    @property
    def has_youtube(self) -> bool:
        return bool(self.youtube_api_key)

    @property
    def has_openai(self) -> bool:
        return bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
        return cls(
            youtube_api_key=os.getenv("YOUTUBE_API_KEY", "").strip(),
            openai_api_key=os.getenv("OPENAI_API_KEY", "").strip(),
            # Support BOTH env var names
            openai_model=(os.getenv("OPENAI_MODEL") or os.getenv("LLM_MODEL") or "gpt-4o").strip(),
            openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").strip().rstrip("/"),
            youtube_base_url=os.getenv("YOUTUBE_BASE_URL", "https://www.googleapis.com/youtube/v3").strip().rstrip("/"),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "25")),
            openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "35")),
            openai_max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "3")),
            retry_base_delay_ms=float(os.getenv("RETRY_BASE_DELAY_MS", "1000")),
            allowed_origins=[o.strip() for o in origins if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process (reads an optional .env first)."""
    load_dotenv()
    return Settings.from_env()
