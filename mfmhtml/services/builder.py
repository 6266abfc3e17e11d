#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Document builder
================
The handful of DOM operations the renderer needs, backed by BeautifulSoup.

One builder owns one soup; create a fresh builder for every render call so
concurrent renders never share a document.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Union

from bs4 import BeautifulSoup, NavigableString, Tag

Node = Union[Tag, NavigableString]


# -----------------------------------------------------------------------------

class DocumentBuilder:

    def __init__(self) -> None:
        self._soup = BeautifulSoup("", "html.parser")

    def create_element(self, tag_name: str) -> Tag:
        return self._soup.new_tag(tag_name)

    def create_text(self, text: str) -> NavigableString:
        return self._soup.new_string(text)

    def append_child(self, parent: Tag, child: Node) -> None:
        parent.append(child)

    def set_attribute(self, element: Tag, name: str, value: str) -> None:
        element[name] = value

    def add_class(self, element: Tag, class_name: str) -> None:
        classes = element.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        if class_name not in classes:
            element["class"] = [*classes, class_name]

    def set_text(self, element: Tag, text: str) -> None:
        element.clear()
        element.append(self.create_text(text))

    def inject_markup(self, element: Tag, markup: str) -> None:
        """
        Parse *markup* as an HTML fragment and append it (innerHTML).

        Tags and attributes pass through as written.  Character references
        are decoded by the parser and serialized back with the minimal
        formatter, so ``&nbsp;`` comes out as a literal U+00A0 and only
        ``&amp;``, ``&lt;`` and ``&gt;`` survive as entities.  The rendered
        text is the same; the bytes differ from browser innerHTML.
        """
        fragment = BeautifulSoup(markup, "html.parser")
        for child in list(fragment.contents):
            element.append(child.extract())

    def serialize(self, element: Node) -> str:
        return str(element)


# -----------------------------------------------------------------------------
