# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Union strategies

A union strategy is consulted whenever two distinct representatives have
to be merged. It returns the key that becomes the shared representative
of the merged class. That key is usually one of the two inputs, but a
strategy may also hand back a new key (for instance a freshly allocated
id), in which case the UnionFind adds it before repointing.

A strategy that decides two classes must never merge raises
NotUnionableError; the UnionFind is then left untouched.
"""

from collections.abc import Callable, Hashable
from typing import Protocol, TypeVar

T = TypeVar("T", bound=Hashable)


class Union(Protocol[T]):
    def union(self, parent1: T, parent2: T) -> T:
        """
        Pick the new representative for two distinct representatives.

        Raises:
            NotUnionableError: if the two classes must stay apart
        """
        ...


class KeepFirst:
    """The representative of the first argument survives."""

    def union(self, parent1, parent2):
        return parent1


class KeepSecond:
    """The representative of the second argument survives."""

    def union(self, parent1, parent2):
        return parent2


class KeepSmallest:
    """
    The smaller representative survives.

    Gives the same partition and the same representatives regardless of
    argument order, at the cost of unbalanced trees. Keys must be orderable.
    """

    def union(self, parent1, parent2):
        return parent1 if parent1 < parent2 else parent2


class UnionFn:
    """Adapt a plain two-argument function to the Union protocol."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T, T], T]) -> None:
        self._fn = fn

    def union(self, parent1, parent2):
        return self._fn(parent1, parent2)

    def __repr__(self) -> str:
        return f"UnionFn({self._fn!r})"
