"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # LLM voice parsing (optional, keyword parser is used without a key)
    openai_api_key: str = ""
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    openai_model: str = "gpt-4o"
    llm_timeout: float = 15.0  # seconds before falling back to keyword parsing
    llm_temperature: float = 0.1
    llm_max_tokens: int = 2000
    llm_max_retries: int = 2

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def llm_enabled(self) -> bool:
        """Check if an OpenAI key is configured."""
        return bool(self.openai_api_key.strip())

    @property
    def allowed_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
