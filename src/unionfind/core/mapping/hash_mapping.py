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
from typing import Generic, TypeVar

from ..exceptions import InvalidKeyError, duplicate_key, missing_key
from .interface import DuplicatePolicy

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class HashMapping(Generic[K, V]):
    """Dict backed mapping for arbitrary hashable keys."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[K, V] = {}

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[K, V]],
        policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> "HashMapping[K, V]":
        mapping = cls()
        for key, value in pairs:
            if policy is DuplicatePolicy.LAST_WRITE_WINS and key in mapping._data:
                mapping._data[key] = value
            else:
                mapping.add(key, value)
        return mapping

    @classmethod
    def identity_map(
        cls, elems: Iterable[K], policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> "HashMapping[K, K]":
        return cls.from_pairs(((elem, elem) for elem in elems), policy)

    @classmethod
    def zero_map(
        cls, elems: Iterable[K], policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> "HashMapping[K, int]":
        return cls.from_pairs(((elem, 0) for elem in elems), policy)

    def get(self, key: K) -> V | None:
        return self._data.get(key)

    def set(self, key: K, value: V) -> None:
        if key not in self._data:
            raise missing_key(key)
        self._data[key] = value

    def add(self, key: K, value: V) -> None:
        if key is None:
            raise InvalidKeyError("None cannot be used as a key", key=key)
        if key != key:
            # e.g. float("nan"); find walks parents until one equals itself
            raise InvalidKeyError(f"Key {key!r} is not equal to itself", key=key)
        if key in self._data:
            raise duplicate_key(key)
        self._data[key] = value

    def add_identity(self, key: K) -> None:
        self.add(key, key)

    def remove(self, key: K) -> None:
        self._data.pop(key, None)

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._data.items())

    def copy(self) -> "HashMapping[K, V]":
        clone = type(self)()
        clone._data.update(self._data)
        return clone

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashMapping):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
