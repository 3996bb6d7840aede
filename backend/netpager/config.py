"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - 1 <= default_page_size <= max_page_size

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
      (ADR: developer UX)
    - Page size defaults live here, not in the paginator: hosts tune them per deployment
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from netpager.core.domain_types import DEFAULT_PAGE_SIZE


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Pagination
    default_page_size: int = DEFAULT_PAGE_SIZE
    # Upper bound enforced on tool-supplied pageSize
    max_page_size: int = 100

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        if self.default_page_size < 1:
            raise ValueError("default_page_size must be >= 1")
        if self.max_page_size < self.default_page_size:
            raise ValueError("max_page_size must be >= default_page_size")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
