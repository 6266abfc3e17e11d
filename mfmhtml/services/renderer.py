#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
MFM renderer
============
Renders a parsed MFM node tree to an HTML fragment.

The walk is a pre-order recursion over the tree; every node kind has exactly
one handler registered in ``_HANDLERS``.  Each produced element carries a
``data-mfm`` attribute naming the construct it came from, and the whole
fragment is wrapped in ``<p data-mfm="root">`` (tag configurable).

Block code is injected as raw markup so pre-highlighted code survives.  That
is a trust boundary: callers must only pass code that is safe to embed, or
set ``highlight_code`` so the code is escaped and highlighted by Pygments.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Union

from bs4 import NavigableString, Tag

from mfmhtml.core.errors import UnsupportedNodeError
from mfmhtml.schemas.nodes import (
    BlockCodeNode, EmojiCodeNode, FnNode, HashtagNode, InlineCodeNode,
    LinkNode, MathBlockNode, MathInlineNode, MentionNode, MfmNode,
    SearchNode, TextNode, UnicodeEmojiNode, UrlNode, load_nodes,
)
from mfmhtml.schemas.schemas import RenderConfig
from mfmhtml.services.builder import DocumentBuilder
from mfmhtml.services import links
from mfmhtml.utils.array import intersperse

log = logging.getLogger(__name__)


# At most this many nodes of each animatable kind get an animation class.
ANIMATION_BUDGET = 3

BIG_ANIMATION    = ("animated", "tada")
MOTION_ANIMATION = ("animated", "rubberBand")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

Rendered = Union[Tag, NavigableString]


# -----------------------------------------------------------------------------
# Per-call state
# -----------------------------------------------------------------------------

@dataclass
class RenderState:
    big: int = 0
    motion: int = 0


# -----------------------------------------------------------------------------
# Handler registry
# -----------------------------------------------------------------------------

_HANDLERS: dict[str, Callable[["_Renderer", MfmNode], Rendered]] = {}


def _handles(*kinds: str):
    def decorator(fn):
        for kind in kinds:
            _HANDLERS[kind] = fn
        return fn
    return decorator


def handled_kinds() -> frozenset[str]:
    return frozenset(_HANDLERS)


# -----------------------------------------------------------------------------

class _Renderer:
    """One render call: its builder, its config and its animation counters."""

    def __init__(self, config: RenderConfig):
        self.config = config
        self.doc    = DocumentBuilder()
        self.state  = RenderState()

    # ── dispatch ──────────────────────────────────────────────────────────

    def render_node(self, node: MfmNode) -> Rendered:
        handler = _HANDLERS.get(getattr(node, "type", None))
        if handler is None:
            raise UnsupportedNodeError(getattr(node, "type", None))
        return handler(self, node)

    def append_children(self, children: Sequence[MfmNode], target: Tag) -> None:
        for child in children:
            self.doc.append_child(target, self.render_node(child))

    # ── helpers ───────────────────────────────────────────────────────────

    def element(self, tag_name: str, kind: str) -> Tag:
        el = self.doc.create_element(tag_name)
        self.doc.set_attribute(el, "data-mfm", kind)
        return el

    def container(self, tag_name: str, node: MfmNode) -> Tag:
        el = self.element(tag_name, node.type)
        self.append_children(node.children, el)
        return el

    def anchor(self, href: str, kind: str, rel_extra: str = "") -> Tag:
        a = self.element("a", kind)
        self.doc.set_attribute(a, "href", href)
        rel = []
        if links.is_external(href):
            self.doc.set_attribute(a, "target", "_blank")
            rel += ["noopener", "noreferrer"]
        if rel_extra:
            rel.append(rel_extra)
        if rel:
            self.doc.set_attribute(a, "rel", " ".join(rel))
        return a

    def animate(self, el: Tag, count: int, classes: tuple[str, ...]) -> None:
        if self.config.animate and count <= ANIMATION_BUDGET:
            for cls in classes:
                self.doc.add_class(el, cls)

    # ── entry point ───────────────────────────────────────────────────────

    def render(self, nodes: Sequence[MfmNode]) -> str:
        tag_name = self.config.root_tag_name
        root = self.element(tag_name, "root")
        self.append_children(nodes, root)
        return self.doc.serialize(root)


# -----------------------------------------------------------------------------
# Simple containers
# -----------------------------------------------------------------------------

_CONTAINER_TAGS = {
    "bold":   "b",
    "italic": "i",
    "strike": "del",
    "small":  "small",
    "quote":  "blockquote",
    "center": "div",
    "title":  "h1",
    "plain":  "span",
}


@_handles(*_CONTAINER_TAGS)
def _render_container(r: _Renderer, node) -> Tag:
    return r.container(_CONTAINER_TAGS[node.type], node)


@_handles("big")
def _render_big(r: _Renderer, node) -> Tag:
    r.state.big += 1
    count = r.state.big
    el = r.container("strong", node)
    r.animate(el, count, BIG_ANIMATION)
    return el


@_handles("motion")
def _render_motion(r: _Renderer, node) -> Tag:
    r.state.motion += 1
    count = r.state.motion
    el = r.container("span", node)
    r.animate(el, count, MOTION_ANIMATION)
    return el


@_handles("fn")
def _render_fn(r: _Renderer, node: FnNode) -> Tag:
    el = r.element("span", node.props.name)
    r.append_children(node.children, el)
    for arg in node.props.args:
        r.doc.add_class(el, arg)
    return el


# -----------------------------------------------------------------------------
# Text
# -----------------------------------------------------------------------------

@_handles("text")
def _render_text(r: _Renderer, node: TextNode) -> Tag:
    el = r.element("span", "text")
    fragments = [r.doc.create_text(t) for t in _LINE_BREAK_RE.split(node.props.text)]
    for item in intersperse(None, fragments):
        r.doc.append_child(el, r.doc.create_element("br") if item is None else item)
    return el


# -----------------------------------------------------------------------------
# Code and math
# -----------------------------------------------------------------------------

def _highlight(code: str, lang: Optional[str]) -> str:
    """Highlighted, escaped markup for *code* (no wrapping element)."""
    from pygments import highlight
    from pygments.formatters import HtmlFormatter
    from pygments.lexers import TextLexer, get_lexer_by_name
    from pygments.util import ClassNotFound
    try:
        lexer = get_lexer_by_name(lang.strip()) if lang and lang.strip() else TextLexer()
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(code, lexer, HtmlFormatter(nowrap=True))


@_handles("inlineCode")
def _render_inline_code(r: _Renderer, node: InlineCodeNode) -> Tag:
    el = r.element("span" if r.config.code_tag_as_div else "code", "inlineCode")
    r.doc.set_text(el, node.props.code)
    return el


@_handles("blockCode")
def _render_block_code(r: _Renderer, node: BlockCodeNode) -> Tag:
    as_div = r.config.code_tag_as_div
    pre    = r.element("div" if as_div else "pre", "blockCode")
    inner  = r.element("div" if as_div else "code", "blockCode-inner")
    if node.props.lang:
        r.doc.add_class(inner, f"language-{node.props.lang}")
    if r.config.highlight_code:
        r.doc.inject_markup(inner, _highlight(node.props.code, node.props.lang))
    else:
        r.doc.inject_markup(inner, node.props.code)
    r.doc.append_child(pre, inner)
    return pre


@_handles("mathInline", "mathBlock")
def _render_math(r: _Renderer, node: Union[MathInlineNode, MathBlockNode]) -> Tag:
    el = r.element("code", node.type)
    r.doc.set_text(el, node.props.formula)
    return el


# -----------------------------------------------------------------------------
# Links
# -----------------------------------------------------------------------------

@_handles("url")
def _render_url(r: _Renderer, node: UrlNode) -> Tag:
    a = r.anchor(node.props.url, "url")
    r.doc.set_text(a, node.props.url)
    return a


@_handles("link")
def _render_link(r: _Renderer, node: LinkNode) -> Tag:
    a = r.anchor(node.props.url, "link")
    r.append_children(node.children, a)
    return a


@_handles("hashtag")
def _render_hashtag(r: _Renderer, node: HashtagNode) -> Tag:
    a = r.anchor(links.hashtag_href(node.props.hashtag, r.config.url), "hashtag", rel_extra="tag")
    r.doc.set_text(a, f"#{node.props.hashtag}")
    return a


@_handles("mention")
def _render_mention(r: _Renderer, node: MentionNode) -> Tag:
    a = r.anchor(links.mention_href(node.props, r.config.url), "mention")
    r.doc.set_text(a, node.props.acct)
    return a


@_handles("search")
def _render_search(r: _Renderer, node: SearchNode) -> Tag:
    a = r.anchor(links.search_href(node.props.query), "search")
    r.doc.set_text(a, node.props.content)
    return a


# -----------------------------------------------------------------------------
# Emoji
# -----------------------------------------------------------------------------

@_handles("unicodeEmoji")
def _render_unicode_emoji(r: _Renderer, node: UnicodeEmojiNode) -> NavigableString:
    return r.doc.create_text(node.props.emoji)


@_handles("emojiCode")
def _render_emoji_code(r: _Renderer, node: EmojiCodeNode) -> Rendered:
    name = node.props.name
    if not r.config.url:
        return r.doc.create_text(f":{name}:")
    img = r.element("img", "emojiCode")
    r.doc.set_attribute(img, "src", links.emoji_src(name, r.config.url))
    r.doc.set_attribute(img, "alt", name)
    return img


# -----------------------------------------------------------------------------
# Public render function
# -----------------------------------------------------------------------------

def render(
    nodes: Iterable[Union[MfmNode, Mapping]],
    config: Optional[Union[RenderConfig, Mapping]] = None,
) -> str:
    """
    Render *nodes* to an HTML string.

    Parameters
    ----------
    nodes  : root nodes, either node models or raw parser output (mappings);
             any iterable, including a generator
    config : RenderConfig, a mapping of its options, or None for defaults

    Returns ``""`` for an empty node list.  Raises RenderError for unknown
    node kinds or malformed props; nothing is returned in that case.
    """
    nodes = list(nodes)
    if not nodes:
        return ""
    if config is None:
        config = RenderConfig()
    elif isinstance(config, Mapping):
        config = RenderConfig.model_validate(config)
    if any(isinstance(n, Mapping) for n in nodes):
        nodes = load_nodes(nodes)

    log.debug("Rendering %d root node(s)", len(nodes))
    return _Renderer(config).render(nodes)


# -----------------------------------------------------------------------------
