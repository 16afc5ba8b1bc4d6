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

import math
import random

import pytest
from unionfind.core.config import UnionFindConfig
from unionfind.core.exceptions import (
    AddError,
    DuplicateKeyError,
    Elem1NotFoundError,
    Elem2NotFoundError,
    ElementNotFoundError,
    ExtraMismatchError,
    MappingSide,
    MissingKeyError,
    NewUnionFindError,
    NotUnionableError,
    UnionOrAddError,
    duplicate_key,
    not_unionable,
)
from unionfind.core.extra import ByRank, NoExtra
from unionfind.core.mapping import DenseMapping, DuplicatePolicy, HashMapping
from unionfind.core.union import KeepFirst, KeepSecond
from unionfind.core.union_find import UnionFind, UnionStatus

BACKENDS = [HashMapping, DenseMapping]

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


class RefusingExtra(NoExtra):
    @classmethod
    def default_mapping(cls, elems, backend=HashMapping, policy=DuplicatePolicy.REJECT):
        raise duplicate_key("extra")


class FailingAddExtra(NoExtra):
    def add(self, key, value=None):
        raise MissingKeyError("extra store is full", key=key)


class Refuse:
    def union(self, parent1, parent2):
        raise not_unionable(parent1, parent2)


def _finds(uf):
    return {key: uf.find(key) for key in uf}


def _parents(uf):
    return dict(uf.to_snapshot().parent)


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("backend", BACKENDS)
def test_new_keys_are_their_own_representatives(backend):
    uf = UnionFind(range(5), extra=ByRank, backend=backend)

    assert len(uf) == 5
    for key in range(5):
        assert key in uf
        assert uf.find(key) == key
        assert uf.rank(key) == 0


def test_construction_from_generator_fills_both_mappings():
    uf = UnionFind((key for key in range(3)), extra=ByRank)

    assert [uf.rank(key) for key in range(3)] == [0, 0, 0]


def test_duplicate_initial_keys_rejected():
    with pytest.raises(NewUnionFindError) as exc_info:
        UnionFind([1, 2, 1], extra=ByRank)

    assert exc_info.value.side is MappingSide.PARENT
    assert isinstance(exc_info.value.__cause__, DuplicateKeyError)


def test_duplicate_initial_keys_last_write_wins():
    uf = UnionFind(
        [1, 2, 1], extra=ByRank, duplicate_policy=DuplicatePolicy.LAST_WRITE_WINS
    )

    assert len(uf) == 2
    assert uf.rank(1) == 0


def test_extra_construction_failure_is_reported_as_extra():
    with pytest.raises(NewUnionFindError) as exc_info:
        UnionFind([1, 2], extra=RefusingExtra)

    assert exc_info.value.side is MappingSide.EXTRA


def test_dense_backend_rejects_foreign_keys():
    with pytest.raises(NewUnionFindError) as exc_info:
        UnionFind(["a"], backend=DenseMapping)

    assert exc_info.value.side is MappingSide.PARENT


def test_from_config():
    uf = UnionFind.from_config(
        [0, 1], UnionFindConfig(backend="dense", extra="none")
    )

    assert uf.to_snapshot().backend == "dense"
    with pytest.raises(ExtraMismatchError):
        uf.union_by_rank(0, 1)
    with pytest.raises(ExtraMismatchError):
        uf.rank(0)


# -----------------------------------------------------------------------------
# find
# -----------------------------------------------------------------------------


def test_find_absent_key():
    uf = UnionFind([1, 2])

    assert uf.find(3) is None
    assert uf.find_shorten(3) is None


def test_find_does_not_mutate():
    uf = UnionFind(range(4))
    for key in range(3):
        uf.union_by(key, key + 1, KeepSecond())

    before = _parents(uf)
    assert uf.find(0) == 3
    assert _parents(uf) == before


def test_find_shorten_compresses_path():
    uf = UnionFind(range(4))
    for key in range(3):
        uf.union_by(key, key + 1, KeepSecond())

    assert _parents(uf)[0] == 1

    assert uf.find_shorten(0) == 3
    parents = _parents(uf)
    assert parents[0] == 3
    assert parents[1] == 3
    assert parents[2] == 3


def test_find_handles_deep_chains():
    n = 5000
    uf = UnionFind(range(n))
    for key in range(n - 1):
        uf.union_by(key, key + 1, KeepSecond())

    assert uf.find(0) == n - 1
    assert uf.find_shorten(0) == n - 1


@pytest.mark.parametrize("seed", range(3))
def test_find_and_find_shorten_agree(seed):
    rng = random.Random(seed)
    uf = UnionFind(range(30), extra=ByRank)
    for _ in range(40):
        uf.union_by_rank(rng.randrange(30), rng.randrange(30))

    for key in range(30):
        expected = uf.find(key)
        assert uf.find_shorten(key) == expected
        assert uf.find(key) == expected


# -----------------------------------------------------------------------------
# union_by_rank
# -----------------------------------------------------------------------------


def test_grow():
    uf = UnionFind([0, 1, 2], extra=ByRank)
    uf.union_by_rank(0, 2)

    assert uf.find(0) == uf.find(2)
    assert uf.find(1) == 1

    uf.add(3)

    assert uf.find(0) == uf.find(2)
    assert uf.find(1) == 1
    assert uf.find(3) == 3

    uf.union_by_rank(3, 1)

    assert uf.find(0) == uf.find(2)
    assert uf.find(1) == uf.find(3)


@pytest.mark.parametrize("backend", BACKENDS)
def test_grow_non_consecutive(backend):
    uf = UnionFind([8, 1, 2], extra=ByRank, backend=backend)
    uf.union_by_rank(8, 2)

    assert uf.find(8) == uf.find(2)
    assert uf.find(1) == 1

    uf.add(9)

    assert uf.find(8) == uf.find(2)
    assert uf.find(1) == 1

    uf.union_by_rank(9, 1)

    assert uf.find(8) == uf.find(2)
    assert uf.find(1) == uf.find(9)


def test_union_by_rank_groups():
    uf = UnionFind(range(20), extra=ByRank)
    uf.union_by_rank(0, 1)
    uf.union_by_rank(2, 0)
    uf.union_by_rank(0, 3)

    assert uf.find(1) == uf.find(3)
    assert uf.find(2) != uf.find(8)
    assert uf.find(6) != uf.find(8)

    uf.union_by_rank(5, 6)
    uf.union_by_rank(7, 8)
    uf.union_by_rank(5, 7)

    assert uf.find(8) == uf.find(6)
    assert uf.find(2) != uf.find(8)

    uf.union_by_rank(10, 11)
    uf.union_by_rank(12, 13)
    uf.union_by_rank(11, 13)

    assert uf.find(10) == uf.find(12)

    uf.union_by_rank(14, 15)
    uf.union_by_rank(16, 17)
    uf.union_by_rank(14, 17)

    assert uf.find(15) == uf.find(16)


def test_union_by_rank_tie_goes_under_second():
    uf = UnionFind([0, 1, 2], extra=ByRank)

    assert uf.union_by_rank(0, 1) is UnionStatus.PERFORMED_UNION
    assert uf.find(0) == 1
    assert uf.rank(1) == 1
    assert uf.rank(0) == 0

    uf.union_by_rank(1, 2)
    assert uf.find(2) == 1
    assert uf.rank(1) == 1


def test_union_by_rank_lower_rank_goes_under_higher():
    uf = UnionFind(range(3), extra=ByRank)
    uf.union_by_rank(0, 1)

    uf.union_by_rank(2, 0)

    assert uf.find(2) == 1
    assert uf.rank(2) == 0


def test_union_by_rank_is_commutative():
    forward = UnionFind(range(6), extra=ByRank)
    backward = UnionFind(range(6), extra=ByRank)
    pairs = [(0, 1), (2, 3), (1, 3), (4, 5)]

    for a, b in pairs:
        forward.union_by_rank(a, b)
        backward.union_by_rank(b, a)

    for a in range(6):
        for b in range(6):
            assert (forward.find(a) == forward.find(b)) == (
                backward.find(a) == backward.find(b)
            )


def test_union_already_equivalent_changes_nothing():
    uf = UnionFind(range(5), extra=ByRank)
    uf.union_by_rank(0, 1)
    uf.union_by_rank(1, 2)
    before = _finds(uf)
    ranks = {key: uf.rank(key) for key in uf}

    assert uf.union_by_rank(2, 0) is UnionStatus.ALREADY_EQUIVALENT
    assert uf.union_by_rank(3, 3) is UnionStatus.ALREADY_EQUIVALENT
    assert _finds(uf) == before
    assert {key: uf.rank(key) for key in uf} == ranks


@pytest.mark.parametrize("seed", range(5))
def test_random_unions_match_naive_partition(seed):
    rng = random.Random(seed)
    n = 40
    uf = UnionFind(range(n), extra=ByRank)
    label = list(range(n))

    for _ in range(60):
        a, b = rng.randrange(n), rng.randrange(n)
        ranks_before = {key: uf.rank(key) for key in uf}

        status = uf.union_by_rank(a, b)

        same = label[a] == label[b]
        assert (status is UnionStatus.ALREADY_EQUIVALENT) == same
        if not same:
            old = label[b]
            label = [label[a] if value == old else value for value in label]

        # ranks never decrease
        for key, rank in ranks_before.items():
            assert uf.rank(key) >= rank

    for a in range(n):
        for b in range(n):
            assert (uf.find(a) == uf.find(b)) == (label[a] == label[b])


@pytest.mark.parametrize("seed", range(3))
def test_rank_bounded_by_log_of_class_size(seed):
    rng = random.Random(seed)
    uf = UnionFind(range(64), extra=ByRank)
    for _ in range(200):
        uf.union_by_rank(rng.randrange(64), rng.randrange(64))

    for root, members in uf.classes().items():
        assert uf.rank(root) <= math.floor(math.log2(len(members)))


# -----------------------------------------------------------------------------
# Lookup failures
# -----------------------------------------------------------------------------


@pytest.mark.parametrize("union", ["by_rank", "by"])
def test_union_on_absent_key_has_no_side_effects(union):
    uf = UnionFind(range(6), extra=ByRank)
    for a, b in [(0, 1), (1, 2), (3, 4)]:
        uf.union_by_rank(a, b)

    def run(a, b):
        if union == "by_rank":
            return uf.union_by_rank(a, b)
        return uf.union_by(a, b, KeepFirst())

    before = uf.to_snapshot()
    finds = _finds(uf)

    with pytest.raises(Elem1NotFoundError) as exc_info:
        run(99, 0)
    assert exc_info.value.key == 99
    assert exc_info.value.position == 1

    with pytest.raises(Elem2NotFoundError) as exc_info:
        run(0, 99)
    assert exc_info.value.position == 2

    with pytest.raises(ElementNotFoundError):
        run(98, 99)

    assert _finds(uf) == finds
    assert uf.to_snapshot() == before


# -----------------------------------------------------------------------------
# Growth
# -----------------------------------------------------------------------------


def test_add_preserves_existing_classes():
    uf = UnionFind(range(6), extra=ByRank)
    for a, b in [(0, 1), (2, 3), (1, 3)]:
        uf.union_by_rank(a, b)
    before = _finds(uf)

    for key in range(6, 12):
        uf.add(key)
        assert uf.find(key) == key
        assert uf.rank(key) == 0

    assert {key: uf.find(key) for key in range(6)} == before


def test_add_existing_key():
    uf = UnionFind([1, 2], extra=ByRank)

    with pytest.raises(AddError) as exc_info:
        uf.add(1)

    assert exc_info.value.side is MappingSide.PARENT
    assert exc_info.value.key == 1
    assert len(uf) == 2


def test_add_with_extra():
    uf = UnionFind([1], extra=ByRank)
    uf.add_with_extra(2, 3)

    assert uf.rank(2) == 3
    assert uf.find(2) == 2


def test_add_with_invalid_extra_is_rolled_back():
    uf = UnionFind([1], extra=ByRank)

    with pytest.raises(AddError) as exc_info:
        uf.add_with_extra(2, -1)

    assert exc_info.value.side is MappingSide.EXTRA
    assert 2 not in uf
    assert uf.rank(2) is None


def test_failed_extra_add_does_not_leave_parent_entry():
    uf = UnionFind([1, 2], extra=FailingAddExtra)

    with pytest.raises(AddError) as exc_info:
        uf.add(3)

    assert exc_info.value.side is MappingSide.EXTRA
    assert isinstance(exc_info.value.__cause__, MissingKeyError)
    assert 3 not in uf
    assert len(uf) == 2
    assert uf.find(3) is None


def test_add_invalid_key_for_backend():
    uf = UnionFind([0], extra=ByRank, backend=DenseMapping)

    with pytest.raises(AddError) as exc_info:
        uf.add("zero")

    assert exc_info.value.side is MappingSide.PARENT
    assert len(uf) == 1


def test_find_or_add():
    uf = UnionFind([1, 2], extra=ByRank)
    uf.union_by_rank(1, 2)

    assert uf.find_or_add(1) == uf.find(2)
    assert uf.find_or_add(7) == 7
    assert 7 in uf
    assert uf.rank(7) == 0
    assert len(uf) == 3


def test_find_shorten_or_add():
    uf = UnionFind(range(3))
    uf.union_by(0, 1, KeepSecond())
    uf.union_by(1, 2, KeepSecond())

    assert uf.find_shorten_or_add(0) == 2
    assert _parents(uf)[0] == 2
    assert uf.find_shorten_or_add("new") == "new"


def test_union_or_add_by_rank():
    uf = UnionFind(extra=ByRank)

    assert uf.union_or_add_by_rank("a", "b") is UnionStatus.PERFORMED_UNION
    assert uf.union_or_add_by_rank("b", "c") is UnionStatus.PERFORMED_UNION
    assert uf.union_or_add_by_rank("c", "a") is UnionStatus.ALREADY_EQUIVALENT
    assert len(uf) == 3


def test_union_or_add_by_rolls_back_on_refusal():
    uf = UnionFind([1])

    with pytest.raises(NotUnionableError):
        uf.union_or_add_by(1, 2, Refuse())

    assert 2 not in uf
    assert len(uf) == 1


def test_union_or_add_by_rolls_back_on_failed_add():
    uf = UnionFind([0], backend=DenseMapping)

    with pytest.raises(UnionOrAddError) as exc_info:
        uf.union_or_add_by(5, "x", KeepFirst())

    assert exc_info.value.side is MappingSide.PARENT
    assert exc_info.value.key == "x"
    assert 5 not in uf
    assert list(uf) == [0]


# -----------------------------------------------------------------------------
# Inspection
# -----------------------------------------------------------------------------


def test_classes():
    uf = UnionFind(range(5))
    uf.union_by(0, 2, KeepFirst())
    uf.union_by(1, 3, KeepFirst())

    assert uf.classes() == {0: [0, 2], 1: [1, 3], 4: [4]}


def test_equivalent():
    uf = UnionFind(["a", "b", "c"])
    uf.union_by("a", "b", KeepFirst())

    assert uf.equivalent("a", "b")
    assert not uf.equivalent("a", "c")
    assert not uf.equivalent("a", "z")
    assert not uf.equivalent("y", "z")


def test_copy_is_independent():
    uf = UnionFind(range(3), extra=ByRank)
    clone = uf.copy()
    clone.union_by_rank(0, 1)
    clone.add(3)

    assert uf.find(0) != uf.find(1)
    assert 3 not in uf
    assert clone.find(0) == clone.find(1)


def test_repr():
    uf = UnionFind(range(3), extra=ByRank)
    uf.union_by_rank(0, 1)

    assert repr(uf) == "UnionFind(keys=3, extra='by_rank', classes=2)"


def test_repr_leaves_paths_alone():
    uf = UnionFind(range(4), extra=ByRank)
    uf.union_by_rank(0, 1)
    uf.union_by_rank(2, 3)
    uf.union_by_rank(1, 3)
    before = uf.to_snapshot()

    assert "classes=1" in repr(uf)
    assert uf.to_snapshot() == before


def test_extra_property():
    ranked = UnionFind([1, 2], extra=ByRank)
    ranked.union_by_rank(1, 2)

    assert isinstance(ranked.extra, ByRank)
    assert ranked.extra.rank(2) == 1
    assert isinstance(UnionFind([1]).extra, NoExtra)

    with pytest.raises(AttributeError):
        ranked.extra = NoExtra()


def test_key_not_equal_to_itself_is_rejected():
    uf = UnionFind([1.0], extra=ByRank)

    with pytest.raises(AddError):
        uf.add(float("nan"))

    assert len(uf) == 1
    assert len(uf.extra) == 1
