from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Website Builder Backend"
    debug: bool = False
    port: int = 5000

    # OpenRouter
    openrouter_api_key: str = ""
    openrouter_api_url: str = "https://openrouter.ai/api/v1/chat/completions"
    http_referer: str = "https://spectacular-hotteok-7139fa.netlify.app"
    x_title: str = "Orbit Website Builder Backend"

    # LLM
    llm_model: str = "deepseek/deepseek-chat"
    temperature: float = 0.5
    max_tokens: int = 3000
    provider_timeout_seconds: float = 120.0  # env: PROVIDER_TIMEOUT_SECONDS

    # Output
    generated_websites_dir: str = "generated_websites"

    # CORS
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "https://spectacular-hotteok-7139fa.netlify.app",
    ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
