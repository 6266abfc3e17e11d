#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Small sequence helpers used by the text renderer."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from itertools import chain
from typing import Iterable, TypeVar

T = TypeVar("T")


# -----------------------------------------------------------------------------

def concat(xss: Iterable[Iterable[T]]) -> list[T]:
    """Flatten one level: ``[[1], [2, 3]]`` → ``[1, 2, 3]``."""
    return list(chain.from_iterable(xss))


def intersperse(sep: T, xs: Iterable[T]) -> list[T]:
    """
    Place *sep* between consecutive items of *xs*.

    ``intersperse(0, [1, 2, 3])`` → ``[1, 0, 2, 0, 3]``.  The separator never
    leads or trails, and an empty input gives an empty list.
    """
    return concat([sep, x] for x in xs)[1:]


# -----------------------------------------------------------------------------
