"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from src.browser.kinds import (
    MIN_HTML_CONTENT_SIZE,
    MIN_IMG_CONTENT_SIZE,
    MIN_LINKS_CONTENT_SIZE,
    MIN_MD_CONTENT_SIZE,
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    api_key: str

    scraper_private_url: str = ""
    scraper_public_url: str = ""
    proxy_url: str = ""
    scraper_timeout_seconds: float = 65.0

    data_dir: str = "./data"

    min_md_content_size: int = MIN_MD_CONTENT_SIZE
    min_html_content_size: int = MIN_HTML_CONTENT_SIZE
    min_links_content_size: int = MIN_LINKS_CONTENT_SIZE
    min_img_content_size: int = MIN_IMG_CONTENT_SIZE

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
