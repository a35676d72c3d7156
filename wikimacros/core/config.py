#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from wikimacros._version import __version__ as _pkg_version


# -----------------------------------------------------------------------------

IMAGE_EXTENSIONS = [
    "jpg", "jpeg", "jpe", "bmp", "tif", "tiff", "png", "gif",
    "jpeg2", "jpe2", "jp2", "jpg2", "svg",
]


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "WikiMacros"
    app_version: str = _pkg_version
    base_url: str = ""
    debug: bool = False
    environment: Literal["development", "testing", "production"] = "development"
    log_level: str = "INFO"

    # ── Database ───────────────────────────────────────────────────────────

    database_url: str = "sqlite+aiosqlite:///./wikimacros.db"
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # ── Storage ────────────────────────────────────────────────────────────

    # Uploads live under <app_root>/<wiki_filepath>/<page id>/<filename>
    app_root: Path = Path("./data")
    # File specs starting with "/" are taken relative to site_root
    site_root: Path = Path(".")
    wiki_filepath: str = "/site/wiki"
    max_attachment_bytes: int = 50 * 1024 * 1024   # 50 MB

    # ── Wiki macros ────────────────────────────────────────────────────────

    wiki_option: str = "com_wiki"
    image_extensions: list[str] = IMAGE_EXTENSIONS
    twitter_widget_id: str = "346714310770302976"
    twitter_width: str = "100%"
    twitter_height: str = "500"

    # ── CORS ───────────────────────────────────────────────────────────────

    cors_origins: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
    ]

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    @property
    def upload_root(self) -> Path:
        """Directory holding per-page upload folders."""
        return self.app_root / self.wiki_filepath.strip("/")


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
