# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that prints the generated lints table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .. import __version__
from ..catalog import CatalogDecodeError, CatalogFetchError, fetch_catalog
from ..classifier import ClassifyError, build_config
from ..constants import CATALOG_URL, CATALOG_URL_ENV, DEFAULT_TIMEOUT_SECONDS, TIMEOUT_ENV
from ..emitter import render
from ..logging import configure_debug_logging
from ..policy import Profile
from .models import GenerateOptions
from .shared import CLIError, CLILogger, ExitCode, build_cli_logger, exit_with_error

LOGGER = logging.getLogger(__name__)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def generate_fragment(options: GenerateOptions) -> str:
    """Fetch the catalog, classify it and return the rendered fragment.

    Args:
        options: Resolved command options.

    Returns:
        str: Lints table without the trailing newline.

    Raises:
        CLIError: When fetching, decoding or classification fails.
    """

    try:
        catalog = fetch_catalog(options.catalog_url, timeout=options.timeout)
    except CatalogFetchError as exc:
        raise CLIError(str(exc), exit_code=ExitCode.FETCH_ERROR) from exc
    except CatalogDecodeError as exc:
        raise CLIError(str(exc), exit_code=ExitCode.DECODE_ERROR) from exc

    try:
        config = build_config(catalog, options.profile, options.workspace)
    except ClassifyError as exc:
        raise CLIError(str(exc), exit_code=ExitCode.FAILURE) from exc
    LOGGER.debug("built config groups=%d", len(config.groups))
    return render(config, options.workspace)


def _write_output(logger: CLILogger, fragment: str, destination: Path | None) -> None:
    if destination is None:
        logger.echo(fragment)
        return
    try:
        destination.write_text(f"{fragment}\n", encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"cannot write {destination}: {exc.strerror}", exit_code=ExitCode.FAILURE) from exc
    logger.ok(f"wrote {destination}")


def generate_command(
    profile: Annotated[
        Profile,
        typer.Option("--profile", case_sensitive=False, help="Kind of crate the lints are generated for."),
    ],
    workspace: Annotated[
        bool,
        typer.Option("--workspace", help="Emit [workspace.lints.clippy] instead of [lints.clippy]."),
    ] = False,
    catalog_url: Annotated[
        str,
        typer.Option("--catalog-url", envvar=CATALOG_URL_ENV, help="URL of the Clippy lint catalog."),
    ] = CATALOG_URL,
    timeout: Annotated[
        float,
        typer.Option("--timeout", envvar=TIMEOUT_ENV, help="HTTP timeout in seconds."),
    ] = DEFAULT_TIMEOUT_SECONDS,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", dir_okay=False, help="Write the fragment to a file instead of stdout."),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log debug details to stderr.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in diagnostics.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Print a Cargo lints table generated from the published Clippy catalog."""

    del version
    logger = build_cli_logger(emoji=not no_emoji)
    try:
        options = GenerateOptions(
            profile=profile,
            workspace=workspace,
            catalog_url=catalog_url,
            timeout=timeout,
            output=output,
            debug=debug,
            emoji=not no_emoji,
        )
    except ValidationError as exc:
        message = "; ".join(error["msg"] for error in exc.errors())
        raise exit_with_error(logger, CLIError(message, exit_code=ExitCode.USAGE_ERROR)) from exc

    configure_debug_logging(options.debug)
    try:
        fragment = generate_fragment(options)
        _write_output(logger, fragment, options.output)
    except CLIError as exc:
        raise exit_with_error(logger, exc) from exc


__all__ = ["generate_command", "generate_fragment"]
