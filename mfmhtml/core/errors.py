#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render errors.

A render call either succeeds completely or raises one of these; no partial
HTML is ever returned.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations


# -----------------------------------------------------------------------------

class RenderError(Exception):
    """Base class for everything the renderer refuses to render."""


class UnsupportedNodeError(RenderError):
    def __init__(self, kind: object):
        self.kind = kind
        super().__init__(f"unsupported node kind: {kind!r}")


class MalformedPropsError(RenderError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"malformed props: {detail}")


# -----------------------------------------------------------------------------
