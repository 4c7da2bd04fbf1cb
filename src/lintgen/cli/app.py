# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from .generate import generate_command

app = typer.Typer(
    name="lintgen",
    help="Generate Cargo Clippy lint tables.",
    add_completion=False,
    no_args_is_help=False,
)
app.command(name="generate")(generate_command)


def main() -> None:
    """Run the Typer application."""

    app()


__all__ = ["app", "main"]
