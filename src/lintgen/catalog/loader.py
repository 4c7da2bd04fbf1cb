# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Fetch and decode the published lint catalog."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, Final

import requests
from pydantic import TypeAdapter, ValidationError

from ..constants import CATALOG_URL, DEFAULT_TIMEOUT_SECONDS, USER_AGENT
from .errors import CatalogDecodeError, CatalogFetchError
from .models import Catalog, CatalogEntry

LOGGER = logging.getLogger(__name__)

_ENTRIES_ADAPTER: Final[TypeAdapter[list[CatalogEntry]]] = TypeAdapter(list[CatalogEntry])

HttpGet = Callable[..., requests.Response]


def decode_catalog(payload: Any) -> Catalog:
    """Validate a decoded JSON payload and return it as a :class:`Catalog`.

    Args:
        payload: JSON array of catalog records as produced by ``json.loads``.

    Returns:
        Catalog: Entries in the order the payload listed them.

    Raises:
        CatalogDecodeError: If the payload is not an array of valid entries.
    """

    try:
        entries = _ENTRIES_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise CatalogDecodeError(f"invalid catalog entry at {location}: {first['msg']}") from exc
    return Catalog.from_entries(entries)


def parse_catalog(text: str | bytes) -> Catalog:
    """Decode catalog JSON *text*.

    Raises:
        CatalogDecodeError: If *text* is not JSON or not a valid catalog.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogDecodeError(f"catalog is not valid JSON: {exc}") from exc
    return decode_catalog(payload)


def fetch_catalog(
    url: str = CATALOG_URL,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    get: HttpGet | None = None,
) -> Catalog:
    """Download and decode the lint catalog published at *url*.

    Args:
        url: Endpoint serving the catalog JSON array.
        timeout: Connect and read timeout in seconds.
        get: Optional ``requests.get`` compatible callable.

    Returns:
        Catalog: Decoded catalog entries.

    Raises:
        CatalogFetchError: If the request fails or returns a non-success status.
        CatalogDecodeError: If the response body is not a valid catalog.
    """

    http_get = get if get is not None else requests.get
    LOGGER.debug("fetching catalog url=%s timeout=%s", url, timeout)
    try:
        response = http_get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.RequestException as exc:
        raise CatalogFetchError(f"failed to fetch lint catalog from {url}: {exc}") from exc
    catalog = parse_catalog(response.content)
    LOGGER.debug("decoded catalog entries=%d", len(catalog))
    return catalog


__all__ = ["HttpGet", "decode_catalog", "fetch_catalog", "parse_catalog"]
