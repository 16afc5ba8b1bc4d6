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
Edge list input for the ufind commands.

One edge per line, two whitespace separated keys. A line with a single key
declares an isolated key. Blank lines and everything after ``#`` are
ignored.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

from ..core.config import UnionFindConfig
from ..core.exceptions import UnionFindError
from ..core.logging import time_block
from ..core.union import KeepFirst
from ..core.union_find import UnionFind


class EdgeFileError(UnionFindError):
    """Raised when an edge file cannot be parsed."""

    pass


def parse_edges(lines: Iterable[str], int_keys: bool = False) -> Iterator[tuple]:
    for lineno, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        tokens = line.split()
        if len(tokens) > 2:
            raise EdgeFileError(
                f"Line {lineno}: expected one or two keys, got {len(tokens)}",
                raw.rstrip("\n"),
            )

        if int_keys:
            try:
                tokens = [int(token) for token in tokens]
            except ValueError as e:
                raise EdgeFileError(f"Line {lineno}: {e}", raw.rstrip("\n")) from e

        yield tuple(tokens)


def build_from_edges(
    path: Path, config: UnionFindConfig, int_keys: bool = False
) -> UnionFind:
    """Read an edge file into a union find configured by config."""
    if not path.exists():
        raise EdgeFileError(f"Edge file not found: {path}")

    int_keys = int_keys or config.backend == "dense"
    uf = UnionFind.from_config((), config)
    edges = 0

    with time_block(f"building union find from {path}"), open(path) as f:
        for edge in parse_edges(f, int_keys):
            if len(edge) == 1:
                uf.find_or_add(edge[0])
                continue

            edges += 1
            if config.extra == "by_rank":
                uf.union_or_add_by_rank(*edge)
            else:
                uf.union_or_add_by(*edge, KeepFirst())

    logger.debug(
        "Read {edges} edges over {keys} keys from {path}",
        edges=edges,
        keys=len(uf),
        path=str(path),
    )
    return uf
