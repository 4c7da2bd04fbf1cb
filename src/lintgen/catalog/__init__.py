# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lint catalog models and the HTTP source that produces them."""

from __future__ import annotations

from .errors import CatalogDecodeError, CatalogError, CatalogFetchError
from .loader import decode_catalog, fetch_catalog, parse_catalog
from .models import Catalog, CatalogEntry, LintGroup, LintLevel

__all__ = [
    "Catalog",
    "CatalogDecodeError",
    "CatalogEntry",
    "CatalogError",
    "CatalogFetchError",
    "LintGroup",
    "LintLevel",
    "decode_catalog",
    "fetch_catalog",
    "parse_catalog",
]
