#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Link resolution
===============
Pure string templating for the URLs the renderer emits: mentions, hashtags,
search queries and custom emoji images.  Nothing here is fetched or checked.

``instance`` is always the bare configured host (``RenderConfig.url``), or
None when no instance is configured.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote, quote_plus

from mfmhtml.schemas.nodes import MentionProps


SEARCH_ENGINE_URL = "https://www.google.com/search?q="

# Remote hosts whose profile URLs use the bare username, not the acct.
_USERNAME_HOSTS = {
    "github.com":  "https://github.com/{username}",
    "twitter.com": "https://twitter.com/{username}",
}

_EXTERNAL_RE = re.compile(r"^(?:https?:)?//", re.IGNORECASE)


# -----------------------------------------------------------------------------

def is_external(href: str) -> bool:
    """True for absolute http(s) or protocol-relative links."""
    return bool(_EXTERNAL_RE.match(href))


# -----------------------------------------------------------------------------

def mention_href(props: MentionProps, instance: Optional[str]) -> str:
    """
    Resolve a mention to a profile URL.

      github.com / twitter.com → https://{host}/{username}
      any other host           → https://{host}/{acct}
      no host                  → https://{instance}/{acct}, or /{acct} with no instance
    """
    host = props.host or ""
    template = _USERNAME_HOSTS.get(host)
    if template:
        return template.format(username=props.username)
    if host:
        return f"https://{host}/{props.acct}"
    if instance:
        return f"https://{instance}/{props.acct}"
    return f"/{props.acct}"


def hashtag_href(tag: str, instance: Optional[str]) -> str:
    path = f"/tags/{quote(tag, safe='')}"
    return f"https://{instance}{path}" if instance else path


def search_href(query: str) -> str:
    return SEARCH_ENGINE_URL + quote_plus(query)


def emoji_src(name: str, instance: str) -> str:
    return f"https://{instance}/emoji/{name}.webp"


# -----------------------------------------------------------------------------
