# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from lintgen.catalog import Catalog, CatalogEntry, LintGroup, LintLevel
from lintgen.policy import (
    CARGO_ALLOWS,
    COMPLEXITY_ALLOWS,
    NURSERY_ALLOWS,
    PEDANTIC_ALLOWS,
    PERSONAL_CARGO_ALLOWS,
    RESTRICTION_EXCEPTIONS,
    STYLE_ALLOWS,
)

EXTRA_RESTRICTIONS = ("absolute_paths", "alloc_instead_of_core", "shadow_reuse")

CatalogFactory = Callable[[Iterable[tuple[str, LintGroup]]], Catalog]


def make_entry(lint_id: str, group: LintGroup) -> CatalogEntry:
    return CatalogEntry(id=lint_id, group=group, default_level=LintLevel.WARN, version="1.0.0")


@pytest.fixture
def make_catalog() -> CatalogFactory:
    """Return a factory building catalogs from ``(id, group)`` pairs."""

    def _factory(pairs: Iterable[tuple[str, LintGroup]]) -> Catalog:
        return Catalog.from_entries(make_entry(lint_id, group) for lint_id, group in pairs)

    return _factory


def policy_pairs() -> list[tuple[str, LintGroup]]:
    """Return ``(id, group)`` pairs covering every lint the policy names."""

    pairs: list[tuple[str, LintGroup]] = [("absurd_extreme_comparisons", LintGroup.CORRECTNESS)]
    pairs += [(lint, LintGroup.PEDANTIC) for lint in PEDANTIC_ALLOWS]
    pairs += [(lint, LintGroup.NURSERY) for lint in NURSERY_ALLOWS]
    pairs += [(lint, LintGroup.COMPLEXITY) for lint in COMPLEXITY_ALLOWS]
    pairs += [(lint, LintGroup.STYLE) for lint in STYLE_ALLOWS]
    pairs += [(lint, LintGroup.CARGO) for lint in CARGO_ALLOWS + PERSONAL_CARGO_ALLOWS]
    pairs.append((EXTRA_RESTRICTIONS[0], LintGroup.RESTRICTION))
    pairs += [(lint, LintGroup.RESTRICTION) for lint in RESTRICTION_EXCEPTIONS]
    pairs += [(lint, LintGroup.RESTRICTION) for lint in EXTRA_RESTRICTIONS[1:]]
    pairs.append(("almost_swapped", LintGroup.DEPRECATED))
    return pairs


@pytest.fixture
def policy_catalog(make_catalog: CatalogFactory) -> Catalog:
    """Return a catalog satisfying every lint named by the built-in policy."""

    return make_catalog(policy_pairs())


@pytest.fixture
def policy_payload() -> list[dict[str, str]]:
    """Return the JSON payload equivalent of :func:`policy_catalog`."""

    return [
        {"id": lint_id, "group": group.value, "level": "warn", "version": "1.0.0", "docs": "..."}
        for lint_id, group in policy_pairs()
    ]
