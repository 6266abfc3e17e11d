#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pytest fixtures and node builders for mfm-html tests.
The renderer is pure, so only the HTTP tests need an app instance.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
import pytest_asyncio
from bs4 import BeautifulSoup
from httpx import ASGITransport, AsyncClient

from mfmhtml.core.config import get_settings
from mfmhtml.main import create_app


# -----------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are lru_cached; make env changes in a test visible to it."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture(scope="function")
async def client():
    """HTTP test client wired to a fresh app."""
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# -----------------------------------------------------------------------------
# Node builders in the JSON shape the MFM parser emits
# -----------------------------------------------------------------------------

def text(value: str) -> dict:
    return {"type": "text", "props": {"text": value}}


def container(kind: str, *children: dict) -> dict:
    return {"type": kind, "children": list(children)}


def leaf(kind: str, **props) -> dict:
    return {"type": kind, "props": props}


def mention(username: str, host: str | None = None) -> dict:
    acct = f"@{username}@{host}" if host else f"@{username}"
    return leaf("mention", username=username, host=host, acct=acct)


# -----------------------------------------------------------------------------
# Output helpers
# -----------------------------------------------------------------------------

def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def root_of(html: str):
    """The root wrapper element of a rendered fragment."""
    return parse(html).find(attrs={"data-mfm": "root"})


# -----------------------------------------------------------------------------
