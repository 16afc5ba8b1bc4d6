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
Mapping capabilities

A UnionFind stores its parent pointers and its per-key metadata in key
mappings. The capabilities below describe what a backend has to offer;
backends implement them structurally, without inheriting from anything.

Capabilities:
- Mapping: lookup and update of existing keys
- GrowableMapping: insertion of previously absent keys
- ParentMapping: construction as an identity mapping (every key -> itself)
- RankMapping: construction as a zero mapping (every key -> 0)
"""

from collections.abc import Hashable, Iterable, Iterator
from enum import Enum
from typing import Protocol, Self, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class DuplicatePolicy(Enum):
    """What to do with a key repeated in an initial element set."""

    REJECT = "reject"
    LAST_WRITE_WINS = "last_write_wins"


class Mapping(Protocol[K, V]):
    def get(self, key: K) -> V | None:
        """Return the value mapped to key, or None if key is absent."""
        ...

    def set(self, key: K, value: V) -> None:
        """
        Overwrite the value of an existing key.

        Raises:
            MissingKeyError: if key is not present
        """
        ...

    def __contains__(self, key: object) -> bool: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[K]: ...

    def items(self) -> Iterator[tuple[K, V]]: ...

    def copy(self) -> Self: ...


class GrowableMapping(Mapping[K, V], Protocol[K, V]):
    def add(self, key: K, value: V) -> None:
        """
        Insert a previously absent key.

        Raises:
            DuplicateKeyError: if key is already present
        """
        ...

    def remove(self, key: K) -> None:
        """Drop a key. Only used to undo an insertion that could not complete."""
        ...


class ParentMapping(GrowableMapping[K, K], Protocol[K]):
    @classmethod
    def identity_map(
        cls, elems: Iterable[K], policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> Self:
        """Build a mapping where every element maps to itself."""
        ...

    def add_identity(self, key: K) -> None:
        """Shorthand for add(key, key)."""
        ...


class RankMapping(GrowableMapping[K, int], Protocol[K]):
    @classmethod
    def zero_map(
        cls, elems: Iterable[K], policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> Self:
        """Build a mapping where every element maps to rank 0."""
        ...
