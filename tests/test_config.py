import pytest

from backend.config import Settings

ENV_VARS = (
    "YOUTUBE_API_KEY", "OPENAI_API_KEY", "OPENAI_MODEL", "LLM_MODEL", "OPENAI_BASE_URL",
    "ALLOWED_ORIGINS", "LOG_LEVEL", "OPENAI_MAX_RETRIES", "RETRY_BASE_DELAY_MS",
)


@pytest.fixture
def env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(env):
    settings = Settings.from_env()
    assert settings.openai_model == "gpt-4o"
    assert settings.openai_max_retries == 3
    assert settings.retry_base_delay_ms == 1000
    assert settings.allowed_origins == ["http://localhost:3000"]
    assert not settings.has_youtube
    assert not settings.has_openai


def test_reads_keys_and_options(env):
    env.setenv("YOUTUBE_API_KEY", "  yt-key ")
    env.setenv("OPENAI_API_KEY", "sk-live")
    env.setenv("OPENAI_BASE_URL", "https://llm.example.com/v1/")
    env.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,,")
    env.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.youtube_api_key == "yt-key"
    assert settings.has_youtube and settings.has_openai
    assert settings.openai_base_url == "https://llm.example.com/v1"
    assert settings.allowed_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"


def test_model_name_fallback(env):
    env.setenv("LLM_MODEL", "gpt-4o-mini")
    assert Settings.from_env().openai_model == "gpt-4o-mini"

    env.setenv("OPENAI_MODEL", "gpt-4.1")
    assert Settings.from_env().openai_model == "gpt-4.1"


def test_rejects_zero_retries(env):
    env.setenv("OPENAI_MAX_RETRIES", "0")
    with pytest.raises(ValueError):
        Settings.from_env()


# -----------------------------
# Service routes
# -----------------------------
def test_health(api):
    resp = api(openai_api_key="").get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "model": "gpt-test", "youtube": True, "openai": False}


def test_categories(api):
    resp = api().get("/api/youtube/categories")
    assert resp.status_code == 200
    categories = resp.json()["categories"]
    assert categories[0] == {"id": "all", "name": "All", "categoryId": "0"}
    assert {"id": "gaming", "name": "Gaming", "categoryId": "20"} in categories
    assert len(categories) == 8


def test_root(api):
    assert "running" in api().get("/").json()["message"]
