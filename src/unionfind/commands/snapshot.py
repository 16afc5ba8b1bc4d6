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
from loguru import logger

from unionfind.runtimeutil import handle_unionfind_exception

from .edges import build_from_edges


@handle_unionfind_exception
def main(
    ctx: typer.Context,
    edges: Path = typer.Argument(..., help="Edge file, one pair of keys per line."),
    out: Path = typer.Argument(..., help="Where to write the JSON snapshot."),
    int_keys: bool = typer.Option(
        False, "--int-keys", help="Parse keys as integers."
    ),
) -> None:
    """Build a union find from an edge file and save it as a JSON snapshot."""
    uf = build_from_edges(edges, ctx.obj, int_keys)
    out.write_text(uf.to_json(), encoding="utf-8")
    logger.info(f"Wrote snapshot of {len(uf)} keys to {out}")
