# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants shared across the generator."""

from __future__ import annotations

from typing import Final

CATALOG_URL: Final[str] = "https://rust-lang.github.io/rust-clippy/stable/lints.json"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
USER_AGENT: Final[str] = "lintgen/1.0"

CATALOG_URL_ENV: Final[str] = "LINTGEN_CATALOG_URL"
TIMEOUT_ENV: Final[str] = "LINTGEN_TIMEOUT"

PACKAGE_HEADER: Final[str] = "[lints.clippy]"
WORKSPACE_HEADER: Final[str] = "[workspace.lints.clippy]"

__all__ = [
    "CATALOG_URL",
    "CATALOG_URL_ENV",
    "DEFAULT_TIMEOUT_SECONDS",
    "PACKAGE_HEADER",
    "TIMEOUT_ENV",
    "USER_AGENT",
    "WORKSPACE_HEADER",
]
