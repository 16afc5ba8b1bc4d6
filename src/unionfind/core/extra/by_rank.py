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

from collections.abc import Hashable, Iterable, Iterator
from typing import Self

from ..mapping import DuplicatePolicy, HashMapping, RankMapping
from .interface import GrowableExtra


class ByRank(GrowableExtra):
    """
    Extra info strategy holding a rank for every key.

    Ranks start at zero and never decrease. They are only meaningful on
    keys that are currently representatives.
    """

    __slots__ = ("_ranks",)

    name = "by_rank"

    def __init__(self, ranks: RankMapping) -> None:
        self._ranks = ranks

    @classmethod
    def default_mapping(
        cls,
        elems: Iterable[Hashable],
        backend: type = HashMapping,
        policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> Self:
        return cls(backend.zero_map(elems, policy))

    def rank(self, key: Hashable) -> int | None:
        return self._ranks.get(key)

    def set_rank(self, key: Hashable, rank: int) -> None:
        """
        Update the rank of an existing key.

        Raises:
            MissingKeyError: if key has no rank
            ValueError: if rank is lower than the current rank
        """
        current = self._ranks.get(key)
        if current is not None and rank < current:
            raise ValueError(f"Rank of {key!r} cannot decrease ({current} -> {rank})")
        self._ranks.set(key, rank)

    def ranks(self) -> Iterator[tuple[Hashable, int]]:
        return self._ranks.items()

    def contains(self, key: Hashable) -> bool:
        return key in self._ranks

    def default_value(self) -> int:
        return 0

    def add(self, key: Hashable, value: int = 0) -> None:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValueError(f"Rank must be a non-negative integer, got {value!r}")
        self._ranks.add(key, value)

    def remove(self, key: Hashable) -> None:
        self._ranks.remove(key)

    def copy(self) -> Self:
        return type(self)(self._ranks.copy())

    def __len__(self) -> int:
        return len(self._ranks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByRank):
            return NotImplemented
        return dict(self.ranks()) == dict(other.ranks())

    def __repr__(self) -> str:
        return f"ByRank({dict(self.ranks())!r})"
