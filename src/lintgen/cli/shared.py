# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import typer

from ..logging import fail as core_fail
from ..logging import ok as core_ok


class ExitCode(IntEnum):
    """Process exit statuses reported by the CLI."""

    OK = 0
    FAILURE = 1
    USAGE_ERROR = 2
    FETCH_ERROR = 3
    DECODE_ERROR = 4


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = ExitCode.FAILURE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = int(exit_code)


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference."""

    return CLILogger(use_emoji=emoji)


def exit_with_error(logger: CLILogger, error: CLIError) -> typer.Exit:
    """Report *error* on stderr and return the ``typer.Exit`` to raise.

    Args:
        logger: Logger used to print the diagnostic.
        error: Failure to report.

    Returns:
        typer.Exit: Exit carrying the error's status code.
    """

    logger.fail(str(error))
    return typer.Exit(code=error.exit_code)


__all__ = ["CLIError", "CLILogger", "ExitCode", "build_cli_logger", "exit_with_error"]
