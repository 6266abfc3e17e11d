#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for the render entry point, root wrapping and the container nodes."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

import pytest

from mfmhtml import RenderConfig, load_nodes, render
from tests.conftest import container, leaf, parse, root_of, text


# ── Empty input ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("config", [
    None,
    RenderConfig(),
    RenderConfig(url="example.com", animate=True, rootTagName="div"),
])
def test_empty_input_renders_empty_string(config):
    assert render([], config) == ""


# ── Root wrapping ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("config, tag", [
    (None, "p"),
    (RenderConfig(), "p"),
    (RenderConfig(rootTagName="div"), "div"),
    (RenderConfig(root_tag_name="section", codeTagAsDiv=True), "section"),
    ({"rootTagName": "article", "animate": True}, "article"),
    (RenderConfig(rootTagName=""), "p"),
])
def test_root_wrapper(config, tag):
    html = render([text("hello"), container("bold", text("x"))], config)
    assert re.match(rf'^<{tag} data-mfm="root">.*</{tag}>$', html, re.S)


def test_single_text_node_exact_output():
    assert render([text("hi")]) == '<p data-mfm="root"><span data-mfm="text">hi</span></p>'


def test_render_is_deterministic():
    nodes = [container("big", text("a")), leaf("emojiCode", name="smile"), text("b\nc")]
    cfg = RenderConfig(url="example.com", animate=True)
    assert render(nodes, cfg) == render(nodes, cfg)


def test_render_accepts_validated_models():
    nodes = load_nodes([container("bold", text("x"))])
    assert render(nodes) == render([container("bold", text("x"))])


def test_render_accepts_generator():
    nodes = [text("a"), container("bold", text("b")), text("c")]
    assert render(n for n in nodes) == render(nodes)
    assert root_of(render(n for n in [text("a")])).get_text() == "a"


def test_render_empty_generator():
    assert render(n for n in []) == ""


def test_input_tree_is_not_mutated():
    nodes = [container("quote", text("a"))]
    snapshot = repr(nodes)
    render(nodes)
    assert repr(nodes) == snapshot


# ── Containers ────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("kind, tag", [
    ("bold", "b"),
    ("italic", "i"),
    ("strike", "del"),
    ("small", "small"),
    ("big", "strong"),
    ("motion", "span"),
    ("quote", "blockquote"),
    ("center", "div"),
    ("title", "h1"),
    ("plain", "span"),
])
def test_container_element_and_marker(kind, tag):
    root = root_of(render([container(kind, text("inside"))]))
    el = root.find(attrs={"data-mfm": kind})
    assert el is not None
    assert el.name == tag
    assert el.get_text() == "inside"


def test_children_keep_document_order():
    nodes = [container("bold", text("one"), container("italic", text("two")), text("three"))]
    bold = root_of(render(nodes)).find("b")
    assert [c.get("data-mfm") for c in bold.children] == ["text", "italic", "text"]
    assert bold.get_text() == "onetwothree"


def test_nested_containers():
    nodes = [container("quote", container("center", container("small", text("deep"))))]
    html = render(nodes)
    assert '<blockquote data-mfm="quote"><div data-mfm="center"><small data-mfm="small">' in html


def test_multiple_root_nodes_in_order():
    root = root_of(render([text("a"), container("bold", text("b")), text("c")]))
    assert [c.get("data-mfm") for c in root.children] == ["text", "bold", "text"]


def test_container_without_children():
    assert '<b data-mfm="bold"></b>' in render([{"type": "bold"}])


# ── fn ────────────────────────────────────────────────────────────────────────

def test_fn_marker_is_function_name():
    node = {"type": "fn", "props": {"name": "x2", "args": {}}, "children": [text("big")]}
    el = root_of(render([node])).find("span", attrs={"data-mfm": "x2"})
    assert el is not None
    assert el.get_text() == "big"
    assert el.get("class") is None


def test_fn_args_become_classes():
    node = {
        "type": "fn",
        "props": {"name": "spin", "args": {"x": True, "speed": "2s"}},
        "children": [text("wee")],
    }
    el = root_of(render([node])).find("span", attrs={"data-mfm": "spin"})
    assert el["class"] == ["x", "speed"]


def test_plain_keeps_children():
    html = render([container("plain", text("**not bold**"))])
    assert parse(html).find(attrs={"data-mfm": "plain"}).get_text() == "**not bold**"


# -----------------------------------------------------------------------------
