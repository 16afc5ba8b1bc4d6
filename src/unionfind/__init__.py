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
Generic disjoint-set (union-find) over arbitrary hashable keys.

    >>> from unionfind import ByRank, UnionFind
    >>> uf = UnionFind([0, 1, 2], extra=ByRank)
    >>> uf.union_by_rank(0, 2)
    <UnionStatus.PERFORMED_UNION: 'performed_union'>
    >>> uf.find(0) == uf.find(2)
    True
"""

from loguru import logger

from .core.config import UnionFindConfig
from .core.exceptions import (
    AddError,
    DuplicateKeyError,
    Elem1NotFoundError,
    Elem2NotFoundError,
    ElementNotFoundError,
    ExtraMismatchError,
    InvalidKeyError,
    MappingError,
    MappingSide,
    MissingKeyError,
    NewUnionFindError,
    NotUnionableError,
    SnapshotError,
    UnionError,
    UnionFindError,
    UnionOrAddError,
)
from .core.extra import ByRank, NoExtra
from .core.mapping import DenseMapping, DuplicatePolicy, HashMapping
from .core.snapshot import UnionFindSnapshot
from .core.union import KeepFirst, KeepSecond, KeepSmallest, UnionFn
from .core.union_find import UnionFind, UnionStatus

# silent until an application opts in (see core.logging.setup_logger)
logger.disable(__name__)

__all__ = [
    "AddError",
    "ByRank",
    "DenseMapping",
    "DuplicateKeyError",
    "DuplicatePolicy",
    "Elem1NotFoundError",
    "Elem2NotFoundError",
    "ElementNotFoundError",
    "ExtraMismatchError",
    "HashMapping",
    "InvalidKeyError",
    "KeepFirst",
    "KeepSecond",
    "KeepSmallest",
    "MappingError",
    "MappingSide",
    "MissingKeyError",
    "NewUnionFindError",
    "NoExtra",
    "NotUnionableError",
    "SnapshotError",
    "UnionError",
    "UnionFind",
    "UnionFindConfig",
    "UnionFindError",
    "UnionFindSnapshot",
    "UnionFn",
    "UnionOrAddError",
    "UnionStatus",
]
