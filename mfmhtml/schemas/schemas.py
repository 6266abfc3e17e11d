#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for render configuration and the HTTP API.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


_TAG_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render configuration
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderConfig(BaseModel):
    """
    Options for one render call.

    Accepts the camelCase option names used by MFM clients (``codeTagAsDiv``,
    ``rootTagName``, ``highlightCode``) as well as the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    url: Optional[str] = None                   # instance host, e.g. "misskey.io"
    animate: bool = False
    code_tag_as_div: bool = Field(default=False, alias="codeTagAsDiv")
    root_tag_name: str = Field(default="p", alias="rootTagName")
    # Escape + highlight block code with Pygments instead of injecting it raw.
    highlight_code: bool = Field(default=False, alias="highlightCode")

    @field_validator("url", mode="before")
    @classmethod
    def normalise_host(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = re.sub(r"^https?://", "", v.strip(), flags=re.IGNORECASE).rstrip("/")
            return v or None
        return v

    @field_validator("root_tag_name", mode="before")
    @classmethod
    def root_tag_default(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "p"
        if isinstance(v, str):
            v = v.strip()
            if not _TAG_NAME_RE.match(v):
                raise ValueError(f"Invalid root tag name '{v}'")
        return v


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# HTTP API
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class RenderRequest(BaseModel):
    # Raw parser output; validated by the renderer so unknown kinds surface
    # as RenderError rather than a schema error.
    nodes: list[dict[str, Any]] = Field(default_factory=list)
    config: Optional[RenderConfig] = None


# -----------------------------------------------------------------------------

class RenderResponse(BaseModel):
    html: str


# -----------------------------------------------------------------------------
