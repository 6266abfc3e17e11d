#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
MFM node models.

The parser emits plain JSON objects shaped ``{"type": ..., "props": {...},
"children": [...]}``.  These pydantic models mirror that shape one class per
node kind, discriminated on ``type``.  Container kinds carry ``children``,
leaf kinds carry ``props``; ``link`` and ``fn`` carry both.

Models are frozen; the renderer only ever reads the tree.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Annotated, Any, Iterable, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from mfmhtml.core.errors import MalformedPropsError, UnsupportedNodeError


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Base classes
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class _Container(_Frozen):
    children: list[MfmNode] = Field(default_factory=list)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Containers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class BoldNode(_Container):
    type: Literal["bold"] = "bold"


class ItalicNode(_Container):
    type: Literal["italic"] = "italic"


class StrikeNode(_Container):
    type: Literal["strike"] = "strike"


class SmallNode(_Container):
    type: Literal["small"] = "small"


class BigNode(_Container):
    type: Literal["big"] = "big"


class MotionNode(_Container):
    type: Literal["motion"] = "motion"


class QuoteNode(_Container):
    type: Literal["quote"] = "quote"


class CenterNode(_Container):
    type: Literal["center"] = "center"


class TitleNode(_Container):
    type: Literal["title"] = "title"


class PlainNode(_Container):
    type: Literal["plain"] = "plain"


# -----------------------------------------------------------------------------

class LinkProps(_Frozen):
    url: str
    silent: bool = False


class LinkNode(_Container):
    type: Literal["link"] = "link"
    props: LinkProps


# -----------------------------------------------------------------------------

class FnProps(_Frozen):
    name: str
    args: dict[str, Union[bool, str]] = Field(default_factory=dict)


class FnNode(_Container):
    type: Literal["fn"] = "fn"
    props: FnProps


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Leaves
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TextProps(_Frozen):
    text: str


class TextNode(_Frozen):
    type: Literal["text"] = "text"
    props: TextProps


# -----------------------------------------------------------------------------

class InlineCodeProps(_Frozen):
    code: str


class InlineCodeNode(_Frozen):
    type: Literal["inlineCode"] = "inlineCode"
    props: InlineCodeProps


class BlockCodeProps(_Frozen):
    code: str
    lang: Optional[str] = None


class BlockCodeNode(_Frozen):
    type: Literal["blockCode"] = "blockCode"
    props: BlockCodeProps


# -----------------------------------------------------------------------------

class MathProps(_Frozen):
    formula: str


class MathInlineNode(_Frozen):
    type: Literal["mathInline"] = "mathInline"
    props: MathProps


class MathBlockNode(_Frozen):
    type: Literal["mathBlock"] = "mathBlock"
    props: MathProps


# -----------------------------------------------------------------------------

class UrlProps(_Frozen):
    url: str
    brackets: Optional[bool] = None


class UrlNode(_Frozen):
    type: Literal["url"] = "url"
    props: UrlProps


class HashtagProps(_Frozen):
    hashtag: str


class HashtagNode(_Frozen):
    type: Literal["hashtag"] = "hashtag"
    props: HashtagProps


class MentionProps(_Frozen):
    username: str
    host: Optional[str] = None
    acct: str


class MentionNode(_Frozen):
    type: Literal["mention"] = "mention"
    props: MentionProps


class SearchProps(_Frozen):
    query: str
    content: str


class SearchNode(_Frozen):
    type: Literal["search"] = "search"
    props: SearchProps


# -----------------------------------------------------------------------------

class EmojiCodeProps(_Frozen):
    name: str


class EmojiCodeNode(_Frozen):
    type: Literal["emojiCode"] = "emojiCode"
    props: EmojiCodeProps


class UnicodeEmojiProps(_Frozen):
    emoji: str


class UnicodeEmojiNode(_Frozen):
    type: Literal["unicodeEmoji"] = "unicodeEmoji"
    props: UnicodeEmojiProps


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Union
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_AnyNode = Union[
    BoldNode, ItalicNode, StrikeNode, SmallNode, BigNode, MotionNode,
    QuoteNode, CenterNode, TitleNode, PlainNode, LinkNode, FnNode,
    TextNode, InlineCodeNode, BlockCodeNode, MathInlineNode, MathBlockNode,
    UrlNode, HashtagNode, MentionNode, SearchNode,
    EmojiCodeNode, UnicodeEmojiNode,
]

MfmNode = Annotated[_AnyNode, Field(discriminator="type")]

for _model in get_args(_AnyNode):
    _model.model_rebuild()

# Every node kind the parser may emit, in declaration order.
NODE_TYPES: tuple[str, ...] = tuple(m.model_fields["type"].default for m in get_args(_AnyNode))

_NODE_LIST = TypeAdapter(list[MfmNode])


# -----------------------------------------------------------------------------

def load_nodes(data: Iterable[Any]) -> list[MfmNode]:
    """
    Validate parser output (a sequence of JSON-like mappings) into node models.

    Raises UnsupportedNodeError when any node, at any depth, has a ``type``
    outside NODE_TYPES, and MalformedPropsError for every other shape problem.
    """
    try:
        return _NODE_LIST.validate_python(list(data))
    except ValidationError as exc:
        errors = exc.errors()
        for err in errors:
            if err["type"] == "union_tag_invalid":
                raise UnsupportedNodeError(err.get("ctx", {}).get("tag")) from exc
        first = errors[0]
        where = ".".join(str(p) for p in first["loc"])
        raise MalformedPropsError(f"{where}: {first['msg']}") from exc


# -----------------------------------------------------------------------------
