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
Logging configuration for the ufind command and other applications.

The library itself only emits records; nothing is shown until an
application calls setup_logger, which enables the unionfind logger and
installs a rich console sink plus a rotating file sink.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from unionfind.constants import APP_NAME, ENV_APP_PREFIX, LOG_DIR


class StructuredLogger:
    """Structured logging helper for consistent log formatting."""

    def __init__(self, command_name: str, log_dir: Path = LOG_DIR):
        self.command_name = command_name
        self.log_dir = log_dir
        self.console = Console(stderr=True)
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru with proper formatting and sinks."""
        # Clear existing sinks to avoid duplicates
        logger.remove()
        logger.enable(APP_NAME)

        log_level = os.getenv(f"{ENV_APP_PREFIX}LOG_LEVEL", "INFO").upper()
        console_level = os.getenv(
            f"{ENV_APP_PREFIX}CONSOLE_LOG_LEVEL", log_level
        ).upper()

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            self.console.print(text, markup=False, highlight=False)

        logger.add(console_sink, level=console_level, format="{message}", catch=True)

        self.log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = self.log_dir / f"{APP_NAME}_{timestamp}.log"

        logger.add(
            logfile,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            rotation="10 MB",
            retention="14 days",
            catch=True,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path:
        """Get the current log file path."""
        return self.logfile


def setup_logger(
    command_name: str,
    debug: bool = False,
    silent: bool = False,
    log_dir: Path = LOG_DIR,
) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Show debug records on the console
        silent: Only show errors on the console
        log_dir: Directory for log files

    Returns:
        Path to the log file
    """
    if debug:
        os.environ[f"{ENV_APP_PREFIX}LOG_LEVEL"] = "DEBUG"
        os.environ[f"{ENV_APP_PREFIX}CONSOLE_LOG_LEVEL"] = "DEBUG"
    elif silent:
        os.environ[f"{ENV_APP_PREFIX}CONSOLE_LOG_LEVEL"] = "ERROR"

    structured_logger = StructuredLogger(command_name, log_dir)
    return structured_logger.get_logfile()
