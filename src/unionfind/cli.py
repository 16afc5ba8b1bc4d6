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

from unionfind.commands import components, query, snapshot
from unionfind.constants import (
    APP_NAME,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from unionfind.core.config import ConfigLoader, UnionFindConfig
from unionfind.core.logging import setup_logger
from unionfind.runtimeutil import ensure_utf8_output, handle_unionfind_exception

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: equivalence classes over edge lists",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# Main cli commands
app.command(name="components")(components.main)
app.command(name="snapshot")(snapshot.main)
app.command(name="query")(query.main)


def load_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        UnionFindConfig,
        config_args,
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


@app.callback(invoke_without_command=True)
@handle_unionfind_exception
def main(
    ctx: typer.Context,
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    backend: str | None = typer.Option(
        None, "--backend", help="Mapping backend: hash or dense."
    ),
    extra: str | None = typer.Option(
        None, "--extra", help="Extra info strategy: none or by_rank."
    ),
    duplicate_policy: str | None = typer.Option(
        None,
        "--duplicate-policy",
        help="Repeated initial keys: reject or last_write_wins.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logs."
    ),
    silent: bool = typer.Option(
        False, "--silent", "-s", help="Only show errors."
    ),
) -> None:
    """
    Global setup callback. Loads the configuration used by commands
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    config, used_config_sources, _ = load_config(
        custom_config,
        backend=backend,
        extra=extra,
        duplicate_policy=duplicate_policy,
        # unset flags must not hide values from config files
        verbose=verbose or None,
        silent=silent or None,
    )

    setup_logger(ctx.invoked_subcommand, debug=config.verbose, silent=config.silent)
    logger.debug(f"Used {used_config_sources} to build config.")

    ctx.obj = config


def run_app():
    """Run the application."""
    ensure_utf8_output()
    app(prog_name="ufind")


if __name__ == "__main__":
    run_app()
