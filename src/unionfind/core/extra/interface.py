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
Extra info strategies

A UnionFind can carry one piece of metadata per key next to its parent
pointers. The strategy decides what that metadata is and how it is built
for the initial element set and for keys added later.

Shipped strategies:
- NoExtra: no metadata at all; every operation trivially succeeds
- ByRank: a rank per key, used by union_by_rank to bound tree height
"""

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from typing import Self

from ..mapping import DuplicatePolicy, HashMapping


class Extra(ABC):
    # identifier used by snapshots and configuration
    name: str = ""

    @classmethod
    @abstractmethod
    def default_mapping(
        cls,
        elems: Iterable[Hashable],
        backend: type = HashMapping,
        policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> Self:
        """
        Build the initial metadata store for an element set.

        Raises:
            MappingError: if the backing mapping rejects the element set
        """

    @abstractmethod
    def contains(self, key: Hashable) -> bool:
        """Return True if metadata is stored for key."""

    @abstractmethod
    def default_value(self):
        """Metadata given to keys added without an explicit value."""

    @abstractmethod
    def copy(self) -> Self:
        """Return an independent copy of the store."""


class GrowableExtra(Extra):
    @abstractmethod
    def add(self, key: Hashable, value) -> None:
        """
        Store metadata for a newly added key.

        Raises:
            MappingError: if the key cannot be stored (e.g. it already exists)
        """

    @abstractmethod
    def remove(self, key: Hashable) -> None:
        """Drop the metadata of key. Only used to undo an incomplete add."""
