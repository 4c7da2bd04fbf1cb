# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog decoding and retrieval."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests

from lintgen.catalog import (
    CatalogDecodeError,
    CatalogFetchError,
    LintGroup,
    LintLevel,
    decode_catalog,
    fetch_catalog,
    parse_catalog,
)
from lintgen.constants import CATALOG_URL


@dataclass
class _FakeResponse:
    content: bytes
    status_code: int = 200

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


@dataclass
class _RecordingGet:
    response: _FakeResponse
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def __call__(self, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append((url, kwargs))
        return self.response


def test_decode_catalog_maps_level_and_ignores_unknown_fields() -> None:
    catalog = decode_catalog(
        [
            {"id": "dbg_macro", "group": "restriction", "level": "allow", "version": "1.34.0", "docs": "x"},
            {"id": "absurd_extreme_comparisons", "group": "correctness", "level": "deny", "version": "1.0.0"},
        ]
    )

    first, second = catalog.entries
    assert (first.id, first.group, first.default_level) == ("dbg_macro", LintGroup.RESTRICTION, LintLevel.ALLOW)
    assert second.group is LintGroup.CORRECTNESS
    assert catalog.ids_in_group(LintGroup.RESTRICTION) == ["dbg_macro"]
    assert catalog.contains("dbg_macro", LintGroup.RESTRICTION)
    assert not catalog.contains("dbg_macro", LintGroup.STYLE)


def test_decode_catalog_accepts_deprecated_group() -> None:
    catalog = decode_catalog([{"id": "old", "group": "deprecated", "level": "none", "version": "1.0.0"}])

    assert catalog.entries[0].default_level is LintLevel.NONE


@pytest.mark.parametrize(
    "record",
    [
        {"id": "x", "group": "Style", "level": "warn", "version": "1"},
        {"id": "x", "group": "style", "level": "forbid", "version": "1"},
        {"id": "x", "group": "style", "level": "warn"},
    ],
)
def test_decode_catalog_rejects_invalid_records(record: dict[str, str]) -> None:
    with pytest.raises(CatalogDecodeError, match="invalid catalog entry at 0"):
        decode_catalog([record])


def test_decode_catalog_rejects_non_array() -> None:
    with pytest.raises(CatalogDecodeError):
        decode_catalog({"id": "x"})


def test_parse_catalog_rejects_invalid_json() -> None:
    with pytest.raises(CatalogDecodeError, match="not valid JSON"):
        parse_catalog("[{")


def test_fetch_catalog_uses_default_url(policy_payload: list[dict[str, str]]) -> None:
    get = _RecordingGet(_FakeResponse(json.dumps(policy_payload).encode()))

    catalog = fetch_catalog(get=get, timeout=5)

    assert len(catalog) == len(policy_payload)
    url, kwargs = get.calls[0]
    assert url == CATALOG_URL
    assert kwargs["timeout"] == 5
    assert kwargs["headers"]["User-Agent"].startswith("lintgen/")


def test_fetch_catalog_wraps_http_errors() -> None:
    get = _RecordingGet(_FakeResponse(b"not found", status_code=404))

    with pytest.raises(CatalogFetchError, match="404"):
        fetch_catalog("https://example.invalid/lints.json", get=get)


def test_fetch_catalog_wraps_transport_errors() -> None:
    def _raise(url: str, **kwargs: Any) -> _FakeResponse:
        raise requests.ConnectionError("connection refused")

    with pytest.raises(CatalogFetchError, match="connection refused"):
        fetch_catalog(get=_raise)


def test_fetch_catalog_reports_bad_body() -> None:
    get = _RecordingGet(_FakeResponse(b"<html></html>"))

    with pytest.raises(CatalogDecodeError):
        fetch_catalog(get=get)
