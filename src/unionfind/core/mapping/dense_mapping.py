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
List backed mapping for dense, non-negative integer keys.

Slot ``i`` of the backing list holds the value for key ``i``. Keys that
were never inserted occupy a private sentinel, so the key set does not
have to be contiguous (``[8, 1, 2]`` is a valid key set), but memory is
proportional to the largest key.
"""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from ..exceptions import InvalidKeyError, duplicate_key, missing_key
from .interface import DuplicatePolicy

V = TypeVar("V")

_ABSENT = object()


def _is_index(key: object) -> bool:
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


class DenseMapping(Generic[V]):
    """Mapping from non-negative ints to values, stored in a list."""

    __slots__ = ("_slots", "_size")

    def __init__(self) -> None:
        self._slots: list = []
        self._size = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[int, V]],
        policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> "DenseMapping[V]":
        mapping = cls()
        for key, value in pairs:
            if policy is DuplicatePolicy.LAST_WRITE_WINS and key in mapping:
                mapping._slots[key] = value
            else:
                mapping.add(key, value)
        return mapping

    @classmethod
    def identity_map(
        cls, elems: Iterable[int], policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> "DenseMapping[int]":
        return cls.from_pairs(((elem, elem) for elem in elems), policy)

    @classmethod
    def zero_map(
        cls, elems: Iterable[int], policy: DuplicatePolicy = DuplicatePolicy.REJECT
    ) -> "DenseMapping[int]":
        return cls.from_pairs(((elem, 0) for elem in elems), policy)

    def get(self, key: int) -> V | None:
        if key not in self:
            return None
        return self._slots[key]

    def set(self, key: int, value: V) -> None:
        if key not in self:
            raise missing_key(key)
        self._slots[key] = value

    def add(self, key: int, value: V) -> None:
        if not _is_index(key):
            raise InvalidKeyError(
                f"Dense mappings only accept non-negative integer keys, got {key!r}",
                key=key,
            )
        if key < len(self._slots):
            if self._slots[key] is not _ABSENT:
                raise duplicate_key(key)
        else:
            self._slots.extend([_ABSENT] * (key + 1 - len(self._slots)))
        self._slots[key] = value
        self._size += 1

    def add_identity(self, key: int) -> None:
        self.add(key, key)

    def remove(self, key: int) -> None:
        if key not in self:
            return
        self._slots[key] = _ABSENT
        self._size -= 1
        while self._slots and self._slots[-1] is _ABSENT:
            self._slots.pop()

    def items(self) -> Iterator[tuple[int, V]]:
        for key, value in enumerate(self._slots):
            if value is not _ABSENT:
                yield key, value

    def copy(self) -> "DenseMapping[V]":
        clone = type(self)()
        clone._slots = list(self._slots)
        clone._size = self._size
        return clone

    def __contains__(self, key: object) -> bool:
        return (
            _is_index(key)
            and key < len(self._slots)
            and self._slots[key] is not _ABSENT
        )

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (key for key, _ in self.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
