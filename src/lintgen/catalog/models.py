# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lint catalog data models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LintGroup(str, Enum):
    """Categories Clippy assigns to every lint."""

    CARGO = "cargo"
    COMPLEXITY = "complexity"
    CORRECTNESS = "correctness"
    NURSERY = "nursery"
    PEDANTIC = "pedantic"
    PERF = "perf"
    RESTRICTION = "restriction"
    STYLE = "style"
    SUSPICIOUS = "suspicious"
    DEPRECATED = "deprecated"

    def __str__(self) -> str:
        return self.value


class LintLevel(str, Enum):
    """Severity assigned to a lint or group in the generated configuration."""

    ALLOW = "allow"
    WARN = "warn"
    DENY = "deny"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


class CatalogEntry(BaseModel):
    """Single record of the upstream lint catalog.

    Only ``id`` and ``group`` drive classification; the remaining fields are
    kept so the upstream schema decodes without loss of validation.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    group: LintGroup
    default_level: LintLevel = Field(alias="level")
    version: str


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered, read-only view over decoded catalog entries."""

    entries: tuple[CatalogEntry, ...]

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry]) -> Catalog:
        return cls(entries=tuple(entries))

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def ids_in_group(self, group: LintGroup) -> list[str]:
        """Return ids belonging to *group* in catalog order, duplicates included."""

        return [entry.id for entry in self.entries if entry.group == group]

    def contains(self, lint_id: str, group: LintGroup) -> bool:
        """Return ``True`` when an entry matches both *lint_id* and *group*."""

        return any(entry.id == lint_id and entry.group == group for entry in self.entries)


__all__ = ["Catalog", "CatalogEntry", "LintGroup", "LintLevel"]
