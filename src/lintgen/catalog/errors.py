# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while obtaining the lint catalog."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for failures that prevent a catalog from being produced."""


class CatalogFetchError(CatalogError):
    """Raised when the catalog cannot be retrieved over HTTP."""


class CatalogDecodeError(CatalogError):
    """Raised when a catalog payload is not valid JSON or violates the entry schema."""


__all__ = ("CatalogDecodeError", "CatalogError", "CatalogFetchError")
