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
Snapshots

A snapshot is an opaque, serializable copy of the internal state of a
UnionFind: its parent pointers and, for the by-rank strategy, its ranks.
Restoring a snapshot yields a structure with the same find result for
every key and the same rank for every key.

Snapshots are pydantic models, so they can be dumped to python objects
(any hashable key survives) or to JSON (keys must be JSON scalars:
str, int, float or bool).
"""

from typing import Any, Literal

from pydantic import BaseModel, model_validator


class UnionFindSnapshot(BaseModel):
    backend: Literal["hash", "dense"] = "hash"
    extra: Literal["none", "by_rank"] = "none"
    parent: list[tuple[Any, Any]]
    ranks: list[tuple[Any, int]] | None = None

    @model_validator(mode="after")
    def check_forest(self) -> "UnionFindSnapshot":
        try:
            parents = dict(self.parent)
        except TypeError as e:
            raise ValueError(f"snapshot keys must be hashable: {e}") from e

        if len(parents) != len(self.parent):
            raise ValueError("snapshot contains a key more than once")

        for key, parent in parents.items():
            if key is None:
                raise ValueError("None cannot be used as a key")
            if parent not in parents:
                raise ValueError(f"parent {parent!r} of {key!r} is not a key")

        # every walk has to end on a self-loop
        settled = set()
        for start in parents:
            path = []
            on_path = set()
            key = start
            while key not in settled and parents[key] != key:
                if key in on_path:
                    raise ValueError(f"parent pointers form a cycle through {key!r}")
                path.append(key)
                on_path.add(key)
                key = parents[key]
            settled.update(path)
            settled.add(key)

        if self.extra == "by_rank":
            if self.ranks is None:
                raise ValueError("by_rank snapshots need ranks")
            ranks = dict(self.ranks)
            if len(ranks) != len(self.ranks) or ranks.keys() != parents.keys():
                raise ValueError("ranks and parent pointers cover different keys")
            if any(rank < 0 for rank in ranks.values()):
                raise ValueError("ranks must be non-negative")
        elif self.ranks is not None:
            raise ValueError("ranks are only stored for by_rank snapshots")

        return self
