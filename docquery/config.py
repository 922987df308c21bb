"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)

    content_url: str = Field("https://halans.com/llms-full.txt", alias="CONTENT_URL")
    listing_url: str = Field("https://halans.com/llms.txt", alias="LISTING_URL")
    site_name: str = Field("halans.com", alias="SITE_NAME")
    cache_ttl_seconds: float = Field(300.0, alias="CACHE_TTL_SECONDS")
    fetch_timeout_seconds: float = Field(20.0, alias="FETCH_TIMEOUT_SECONDS")
    fetch_user_agent: str = Field("docquery/0.1 (content indexer)", alias="FETCH_USER_AGENT")
    search_context_lines: int = Field(3, ge=0, alias="SEARCH_CONTEXT_LINES")
    section_include_subsections: bool = Field(True, alias="SECTION_INCLUDE_SUBSECTIONS")
    full_content_max_length: int = Field(50000, ge=0, alias="FULL_CONTENT_MAX_LENGTH")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    @property
    def source_ids(self) -> tuple[str, str]:
        """Return the primary document and the article listing source ids."""
        return self.content_url, self.listing_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
