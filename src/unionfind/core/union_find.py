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
UnionFind

A disjoint-set structure over arbitrary hashable keys. Every key maps to a
parent key; following parents from any key ends on a key that is its own
parent, the representative of the key's equivalence class.

Responsibilities:
- find / find_shorten: resolve the representative of a key, the latter
  with path compression
- union_by: merge two classes, letting a union strategy pick the new
  representative
- union_by_rank: merge two classes using ranks kept by the ByRank strategy
- add / add_with_extra / find_or_add: grow the key universe after
  construction without disturbing existing classes

Notes:
- Keys are never removed.
- None is not a valid key; find returns None for absent keys.
- The structure is not thread-safe. find is the only operation that
  does not mutate; everything else needs external synchronization.
"""

import math
from collections.abc import Hashable, Iterable, Iterator
from enum import Enum
from typing import Generic, TypeVar

from loguru import logger
from pydantic import ValidationError

from .config.union_find_config import UnionFindConfig
from .exceptions import (
    AddError,
    ExtraMismatchError,
    MappingError,
    MappingSide,
    NewUnionFindError,
    NotUnionableError,
    SnapshotError,
    UnionError,
    UnionFindError,
    UnionOrAddError,
    element_not_found,
)
from .extra import ByRank, Extra, GrowableExtra, NoExtra
from .mapping import DenseMapping, DuplicatePolicy, HashMapping
from .snapshot import UnionFindSnapshot
from .union import Union

T = TypeVar("T", bound=Hashable)

BACKENDS: dict[str, type] = {"hash": HashMapping, "dense": DenseMapping}
EXTRAS: dict[str, type[Extra]] = {"none": NoExtra, "by_rank": ByRank}


def _backend_name(backend: type) -> str:
    for name, cls in BACKENDS.items():
        if issubclass(backend, cls):
            return name
    raise SnapshotError(f"Backend {backend.__name__} cannot be snapshotted")


def _is_json_scalar(key: object) -> bool:
    if isinstance(key, float):
        return math.isfinite(key)
    return isinstance(key, (str, int))


class UnionStatus(Enum):
    """
    Outcome of a union.

    A union of two keys that already share a representative is not an
    error; it is reported as ALREADY_EQUIVALENT and changes nothing.
    """

    ALREADY_EQUIVALENT = "already_equivalent"
    PERFORMED_UNION = "performed_union"


class UnionFind(Generic[T]):
    """
    Disjoint-set forest with path compression and pluggable extra info.

    Args:
        elems: initial keys, each in a class of its own
        extra: extra info strategy (NoExtra or ByRank)
        backend: mapping backend used for parents and extra info
        duplicate_policy: how repeated keys in elems are treated

    Raises:
        NewUnionFindError: if either backing mapping cannot be built
    """

    __slots__ = ("_parent", "_extra")

    def __init__(
        self,
        elems: Iterable[T] = (),
        extra: type[Extra] = NoExtra,
        backend: type = HashMapping,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
    ) -> None:
        # consumed once per backing mapping
        elems = list(elems)

        try:
            parent = backend.identity_map(elems, duplicate_policy)
        except MappingError as e:
            raise NewUnionFindError(
                "Couldn't construct parent mapping",
                MappingSide.PARENT,
                details=e.message,
            ) from e

        try:
            extra_store = extra.default_mapping(elems, backend, duplicate_policy)
        except MappingError as e:
            raise NewUnionFindError(
                "Couldn't construct extra mapping",
                MappingSide.EXTRA,
                details=e.message,
            ) from e

        self._parent = parent
        self._extra = extra_store

        logger.debug(
            "Built union find: keys={count} backend={backend} extra={extra}",
            count=len(parent),
            backend=backend.__name__,
            extra=extra_store.name,
        )

    @classmethod
    def from_config(cls, elems: Iterable[T], config: UnionFindConfig) -> "UnionFind[T]":
        """Build a union find with the backend, extra info and duplicate policy of config."""
        return cls(
            elems,
            extra=EXTRAS[config.extra],
            backend=BACKENDS[config.backend],
            duplicate_policy=DuplicatePolicy(config.duplicate_policy),
        )

    @property
    def extra(self) -> Extra:
        """The extra info store, e.g. ByRank."""
        return self._extra

    @classmethod
    def _from_parts(cls, parent, extra: Extra) -> "UnionFind[T]":
        uf = cls.__new__(cls)
        uf._parent = parent
        uf._extra = extra
        return uf

    # ------------------------------------------------------------------
    # find
    # ------------------------------------------------------------------

    def find(self, elem: T) -> T | None:
        """
        Return the representative of elem, or None if elem is absent.

        Performs no path shortening, so it can be used on a structure that
        is shared with readers. Use find_shorten for amortized speed.
        """
        parent = self._parent.get(elem)
        if parent is None:
            return None

        while parent != elem:
            elem = parent
            parent = self._parent.get(elem)

        return parent

    def find_shorten(self, elem: T) -> T | None:
        """
        Return the representative of elem, or None if elem is absent.

        Every key visited on the way is repointed directly to the
        representative.
        """
        root = self.find(elem)
        if root is None:
            return None

        while elem != root:
            next_elem = self._parent.get(elem)
            if next_elem != root:
                self._parent.set(elem, root)
            elem = next_elem

        return root

    def equivalent(self, elem1: T, elem2: T) -> bool:
        """True if both keys are present and share a representative."""
        root1 = self.find_shorten(elem1)
        return root1 is not None and root1 == self.find_shorten(elem2)

    # ------------------------------------------------------------------
    # union
    # ------------------------------------------------------------------

    def _resolve_pair(self, elem1: T, elem2: T) -> tuple[T, T]:
        # both lookups fail before any path is compressed
        if elem1 not in self._parent:
            raise element_not_found(elem1, 1)
        if elem2 not in self._parent:
            raise element_not_found(elem2, 2)

        return self.find_shorten(elem1), self.find_shorten(elem2)

    def union_by(self, elem1: T, elem2: T, union: Union[T]) -> UnionStatus:
        """
        Merge the classes of elem1 and elem2, letting union pick the new representative.

        The strategy may return either representative, a key that is a
        member of one of the two classes, or a brand new key, which is then
        added with default extra info.

        Raises:
            Elem1NotFoundError / Elem2NotFoundError: if a key is absent
            NotUnionableError: if the strategy refuses the merge
            UnionError: if the strategy returns a key of an unrelated class
            AddError: if a new representative could not be added
        """
        parent1, parent2 = self._resolve_pair(elem1, elem2)
        return self._union_helper(parent1, parent2, union)

    def _union_helper(self, parent1: T, parent2: T, union: Union[T]) -> UnionStatus:
        if parent1 == parent2:
            return UnionStatus.ALREADY_EQUIVALENT

        try:
            res = union.union(parent1, parent2)
        except NotUnionableError as e:
            logger.debug(
                "Union refused: {first} / {second} ({reason})",
                first=repr(parent1),
                second=repr(parent2),
                reason=e.details,
            )
            raise

        if res not in self._parent:
            self.add(res)
        elif res != parent1 and res != parent2:
            if self.find_shorten(res) not in (parent1, parent2):
                raise UnionError(
                    f"Union strategy returned {res!r}, which belongs to neither class",
                    details=f"representatives were {parent1!r} and {parent2!r}",
                )
            # a member is promoted to representative of the merged class
            self._parent.set(res, res)

        if res != parent1 and res != parent2 and isinstance(self._extra, ByRank):
            # both old trees now hang one level below res
            height = max(self._extra.rank(parent1), self._extra.rank(parent2)) + 1
            self._extra.set_rank(res, max(height, self._extra.rank(res)))

        self._parent.set(parent1, res)
        self._parent.set(parent2, res)

        return UnionStatus.PERFORMED_UNION

    def _ranks(self) -> ByRank:
        if not isinstance(self._extra, ByRank):
            raise ExtraMismatchError(
                "Union by rank needs the ByRank extra info",
                details=f"this union find carries {type(self._extra).__name__}",
            )
        return self._extra

    def union_by_rank(self, elem1: T, elem2: T) -> UnionStatus:
        """
        Merge the classes of elem1 and elem2 by rank.

        The representative with the lower rank goes under the one with the
        higher rank. On a tie the first goes under the second and the
        second's rank grows by one.

        Raises:
            Elem1NotFoundError / Elem2NotFoundError: if a key is absent
            ExtraMismatchError: if the structure has no ranks
        """
        ranks = self._ranks()
        parent1, parent2 = self._resolve_pair(elem1, elem2)

        if parent1 == parent2:
            return UnionStatus.ALREADY_EQUIVALENT

        rank1 = ranks.rank(parent1)
        rank2 = ranks.rank(parent2)

        if rank1 < rank2:
            self._parent.set(parent1, parent2)
        elif rank1 > rank2:
            self._parent.set(parent2, parent1)
        else:
            self._parent.set(parent1, parent2)
            ranks.set_rank(parent2, rank2 + 1)

        return UnionStatus.PERFORMED_UNION

    def rank(self, elem: T) -> int | None:
        """Rank of elem, or None if absent. Only meaningful on representatives."""
        return self._ranks().rank(elem)

    # ------------------------------------------------------------------
    # growth
    # ------------------------------------------------------------------

    def add(self, elem: T) -> None:
        """
        Add elem as a class of its own with default extra info.

        Raises:
            AddError: if elem cannot be added; nothing is changed
        """
        self.add_with_extra(elem, self._growable_extra().default_value())

    def add_with_extra(self, elem: T, extra) -> None:
        """
        Add elem as a class of its own with the given extra info.

        Both backing mappings are checked before anything is inserted, and
        the parent insertion is undone if the extra insertion fails.

        Raises:
            AddError: if elem cannot be added; nothing is changed
        """
        extra_store = self._growable_extra()

        if elem in self._parent:
            raise AddError(
                "Couldn't add element to parent mapping",
                MappingSide.PARENT,
                key=elem,
                details=f"{elem!r} is already present",
            )
        if extra_store.contains(elem):
            raise AddError(
                "Couldn't add element to extra mapping",
                MappingSide.EXTRA,
                key=elem,
                details=f"{elem!r} already has extra info",
            )

        try:
            self._parent.add_identity(elem)
        except MappingError as e:
            raise AddError(
                "Couldn't add element to parent mapping",
                MappingSide.PARENT,
                key=elem,
                details=e.message,
            ) from e

        try:
            extra_store.add(elem, extra)
        except (MappingError, ValueError) as e:
            self._parent.remove(elem)
            raise AddError(
                "Couldn't add element to extra mapping",
                MappingSide.EXTRA,
                key=elem,
                details=str(e),
            ) from e

    def _growable_extra(self) -> GrowableExtra:
        if not isinstance(self._extra, GrowableExtra):
            raise ExtraMismatchError(
                f"{type(self._extra).__name__} does not support adding keys"
            )
        return self._extra

    def find_or_add(self, elem: T) -> T:
        """Representative of elem, adding elem as its own class if absent."""
        root = self.find(elem)
        if root is not None:
            return root

        self.add(elem)
        return elem

    def find_shorten_or_add(self, elem: T) -> T:
        """Like find_or_add, but compresses the path of a present key."""
        root = self.find_shorten(elem)
        if root is not None:
            return root

        self.add(elem)
        return elem

    def _add_missing(self, *elems: T) -> list[T]:
        added = []
        for elem in elems:
            if elem in self._parent:
                continue
            try:
                self.add(elem)
            except AddError as e:
                self._rollback(added)
                raise UnionOrAddError(
                    f"Couldn't add {elem!r} before union",
                    e.side,
                    key=elem,
                    details=e.details,
                ) from e
            added.append(elem)
        return added

    def _rollback(self, added: list[T]) -> None:
        for elem in reversed(added):
            self._parent.remove(elem)
            self._extra.remove(elem)

    def union_or_add_by(self, elem1: T, elem2: T, union: Union[T]) -> UnionStatus:
        """
        Add whichever of elem1 and elem2 is absent, then union_by.

        Keys added by this call are removed again if the union fails.

        Raises:
            UnionOrAddError: if a key could not be added
            NotUnionableError: if the strategy refuses the merge
        """
        added = self._add_missing(elem1, elem2)
        try:
            return self.union_by(elem1, elem2, union)
        except UnionFindError:
            self._rollback(added)
            raise

    def union_or_add_by_rank(self, elem1: T, elem2: T) -> UnionStatus:
        """Add whichever of elem1 and elem2 is absent, then union_by_rank."""
        self._ranks()
        self._add_missing(elem1, elem2)
        return self.union_by_rank(elem1, elem2)

    # ------------------------------------------------------------------
    # inspection
    # ------------------------------------------------------------------

    def classes(self) -> dict[T, list[T]]:
        """Map every representative to the keys of its class, in insertion order."""
        result: dict[T, list[T]] = {}
        for elem in self._parent:
            result.setdefault(self.find_shorten(elem), []).append(elem)
        return result

    def copy(self) -> "UnionFind[T]":
        return self._from_parts(self._parent.copy(), self._extra.copy())

    def __contains__(self, elem: object) -> bool:
        return elem in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def __iter__(self) -> Iterator[T]:
        return iter(self._parent)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(keys={len(self)}, extra={self._extra.name!r}, "
            f"classes={sum(1 for key, parent in self._parent.items() if key == parent)})"
        )

    # ------------------------------------------------------------------
    # snapshots
    # ------------------------------------------------------------------

    def to_snapshot(self) -> UnionFindSnapshot:
        ranks = None
        if isinstance(self._extra, ByRank):
            ranks = list(self._extra.ranks())

        return UnionFindSnapshot(
            backend=_backend_name(type(self._parent)),
            extra=self._extra.name,
            parent=list(self._parent.items()),
            ranks=ranks,
        )

    @classmethod
    def from_snapshot(cls, snapshot: UnionFindSnapshot) -> "UnionFind[T]":
        """
        Rebuild a union find from a snapshot.

        Raises:
            SnapshotError: if the snapshot cannot be loaded into its backend
        """
        backend = BACKENDS[snapshot.backend]
        try:
            parent = backend.from_pairs(snapshot.parent)
            if snapshot.extra == "by_rank":
                extra = ByRank(backend.from_pairs(snapshot.ranks))
            else:
                extra = NoExtra()
        except MappingError as e:
            raise SnapshotError(
                f"Snapshot does not fit the {snapshot.backend} backend",
                details=e.message,
            ) from e

        logger.debug(
            "Restored union find from snapshot: keys={count} extra={extra}",
            count=len(parent),
            extra=snapshot.extra,
        )
        return cls._from_parts(parent, extra)

    def to_json(self, **kwargs) -> str:
        """
        Serialize to JSON.

        Raises:
            SnapshotError: if a key is not a str, int, bool or finite float,
                since from_json could not restore it
        """
        for key in self._parent:
            if not _is_json_scalar(key):
                raise SnapshotError(
                    f"Key {key!r} cannot be written to JSON",
                    details="JSON snapshots need str, int, bool or finite float keys; "
                    "use to_snapshot for other hashable keys",
                )
        return self.to_snapshot().model_dump_json(**kwargs)

    @classmethod
    def from_json(cls, data: str | bytes) -> "UnionFind[T]":
        """
        Rebuild a union find from the output of to_json.

        Raises:
            SnapshotError: if data is not a valid snapshot
        """
        try:
            snapshot = UnionFindSnapshot.model_validate_json(data)
        except ValidationError as e:
            raise SnapshotError("Invalid union find snapshot", details=str(e)) from e
        return cls.from_snapshot(snapshot)
