"""Tests for the sequence helpers behind text segmentation."""
from __future__ import annotations

from mfmhtml.utils.array import concat, intersperse


def test_intersperse_places_separator_between_items():
    assert intersperse("|", ["a", "b", "c"]) == ["a", "|", "b", "|", "c"]


def test_intersperse_single_item_has_no_separator():
    assert intersperse("|", ["a"]) == ["a"]


def test_intersperse_empty():
    assert intersperse("|", []) == []


def test_intersperse_accepts_generators():
    assert intersperse(0, (n for n in (1, 2))) == [1, 0, 2]


def test_intersperse_returns_new_list():
    items = ["a", "b"]
    out = intersperse("|", items)
    assert items == ["a", "b"]
    assert out is not items


def test_concat_flattens_one_level():
    assert concat([[1], [2, 3], []]) == [1, 2, 3]
    assert concat([[[1]], [[2]]]) == [[1], [2]]
