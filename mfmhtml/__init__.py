"""Render parsed MFM (Misskey Flavoured Markdown) node trees to HTML."""
from __future__ import annotations

from mfmhtml._version import __version__
from mfmhtml.core.errors import MalformedPropsError, RenderError, UnsupportedNodeError
from mfmhtml.schemas.nodes import MfmNode, NODE_TYPES, load_nodes
from mfmhtml.schemas.schemas import RenderConfig
from mfmhtml.services.renderer import render

__all__ = [
    "__version__",
    "render", "load_nodes",
    "RenderConfig", "MfmNode", "NODE_TYPES",
    "RenderError", "UnsupportedNodeError", "MalformedPropsError",
]
