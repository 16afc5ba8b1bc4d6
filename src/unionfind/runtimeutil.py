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

import functools
import sys

import typer
from loguru import logger
from rich.console import Console

from unionfind.core.exceptions import UnionFindError

# exit code for errors reported by the library
ERROR_EXIT_CODE = 2


def handle_unionfind_exception(func):
    """Report UnionFindError raised by a command as a message and exit code 2."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UnionFindError as e:
            console = Console(stderr=True)
            console.print(f"[red]Error:[/red] {e.message}", highlight=False)
            if e.details:
                logger.debug(f"Details: {e.details}")
            raise typer.Exit(code=ERROR_EXIT_CODE) from e

    return wrapper


def ensure_utf8_output() -> None:
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")
