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

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from unionfind.runtimeutil import handle_unionfind_exception

from .edges import build_from_edges


@handle_unionfind_exception
def main(
    ctx: typer.Context,
    edges: Path = typer.Argument(..., help="Edge file, one pair of keys per line."),
    int_keys: bool = typer.Option(
        False, "--int-keys", help="Parse keys as integers."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print classes as a JSON list of lists."
    ),
) -> None:
    """Print the equivalence classes induced by an edge file.

    Examples:
        # Show connected components as a table
        ufind components edges.txt

        # Machine readable output
        ufind components edges.txt --int-keys --json
    """
    uf = build_from_edges(edges, ctx.obj, int_keys)
    classes = sorted(uf.classes().values(), key=len, reverse=True)

    if as_json:
        typer.echo(json.dumps(classes))
        return

    table = Table(title=f"{len(classes)} classes over {len(uf)} keys")
    table.add_column("Representative", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Members")

    for members in classes:
        table.add_row(
            str(uf.find(members[0])),
            str(len(members)),
            ", ".join(str(member) for member in members),
        )

    Console().print(table)
