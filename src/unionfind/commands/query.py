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

from pathlib import Path

import typer

from unionfind.core.exceptions import SnapshotError
from unionfind.core.union_find import UnionFind
from unionfind.runtimeutil import handle_unionfind_exception


def _coerce(uf: UnionFind, key: str):
    # snapshots of integer keys come back as ints
    if key not in uf and key.lstrip("-").isdigit():
        return int(key)
    return key


@handle_unionfind_exception
def main(
    snapshot: Path = typer.Argument(..., help="JSON snapshot written by 'ufind snapshot'."),
    first: str = typer.Argument(..., help="First key."),
    second: str = typer.Argument(..., help="Second key."),
) -> None:
    """Tell whether two keys of a snapshot are equivalent.

    Exits with 0 when they are, 1 when they are not.
    """
    if not snapshot.exists():
        raise SnapshotError(f"Snapshot not found: {snapshot}")

    uf = UnionFind.from_json(snapshot.read_bytes())
    first_key, second_key = _coerce(uf, first), _coerce(uf, second)

    for key in (first_key, second_key):
        if key not in uf:
            typer.echo(f"{key} is not part of the snapshot")
            raise typer.Exit(code=1)

    if uf.find(first_key) == uf.find(second_key):
        typer.echo(f"{first_key} ~ {second_key}")
        return

    typer.echo(f"{first_key} !~ {second_key}")
    raise typer.Exit(code=1)
