#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoint: turn parser output into HTML.

POST /api/v1/render  {"nodes": [...], "config": {...}}
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from mfmhtml.core.config import get_settings
from mfmhtml.core.errors import RenderError
from mfmhtml.schemas import RenderRequest, RenderResponse
from mfmhtml.services.renderer import render

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/render", tags=["render"])


# -----------------------------------------------------------------------------

@router.post("", response_model=RenderResponse)
async def render_nodes(body: RenderRequest):
    """Return rendered HTML for a parsed MFM document.  Without a config the server defaults apply."""
    config = body.config or get_settings().render_config()
    try:
        html = render(body.nodes, config)
    except RenderError as exc:
        log.warning("Rejected document: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))
    return RenderResponse(html=html)


# -----------------------------------------------------------------------------
