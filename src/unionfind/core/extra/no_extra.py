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

from collections.abc import Hashable, Iterable
from typing import Self

from ..mapping import DuplicatePolicy, HashMapping
from .interface import GrowableExtra


class NoExtra(GrowableExtra):
    """Extra info strategy that stores nothing."""

    __slots__ = ()

    name = "none"

    @classmethod
    def default_mapping(
        cls,
        elems: Iterable[Hashable],
        backend: type = HashMapping,
        policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> Self:
        return cls()

    def contains(self, key: Hashable) -> bool:
        return False

    def default_value(self) -> None:
        return None

    def add(self, key: Hashable, value=None) -> None:
        pass

    def remove(self, key: Hashable) -> None:
        pass

    def copy(self) -> Self:
        return type(self)()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoExtra)

    def __repr__(self) -> str:
        return "NoExtra()"
