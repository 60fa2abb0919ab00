from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]

    # Judge platform
    supported_platform: str = "leetcode"
    leetcode_graphql_url: str = "https://leetcode.com/graphql"
    user_agent: str = DEFAULT_USER_AGENT

    # Google Gemini
    # Empty is a valid startup state; every solve then fails at generation time.
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-preview-09-2025"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Outbound HTTP (seconds)
    connect_timeout: float = 10.0
    read_timeout: float = 60.0

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key.strip())

    @property
    def gemini_generate_url(self) -> str:
        return f"{self.gemini_base_url.rstrip('/')}/models/{self.gemini_model}:generateContent"


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once at startup."""
    return Settings()
