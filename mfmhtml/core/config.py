#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Application configuration.

All values can be overridden via environment variables (prefixed ``MFM_``)
or a .env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from mfmhtml._version import __version__ as _pkg_version
from mfmhtml.schemas.schemas import RenderConfig


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MFM_",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ────────────────────────────────────────────────────────

    app_name: str = "mfm-html"
    app_version: str = _pkg_version
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ── Render defaults (used when a request carries no config) ───────────

    instance_url: Optional[str] = None
    animate: bool = False
    code_tag_as_div: bool = False
    root_tag_name: str = "p"
    highlight_code: bool = False

    # ── CORS ───────────────────────────────────────────────────────────────

    cors_origins: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
    ]

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            url=self.instance_url,
            animate=self.animate,
            code_tag_as_div=self.code_tag_as_div,
            root_tag_name=self.root_tag_name,
            highlight_code=self.highlight_code,
        )


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
