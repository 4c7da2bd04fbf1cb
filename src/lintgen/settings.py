# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration model produced by the classifier and consumed by the emitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

from .catalog.models import LintGroup, LintLevel


@dataclass(frozen=True, slots=True)
class ExplicitPriority:
    """Priority written next to the level, e.g. ``priority = -1``."""

    value: int


@dataclass(frozen=True, slots=True)
class UnspecifiedPriority:
    """Marker for settings emitted as a bare level string."""


UNSPECIFIED: Final[UnspecifiedPriority] = UnspecifiedPriority()

PrioritySetting: TypeAlias = ExplicitPriority | UnspecifiedPriority


@dataclass(frozen=True, slots=True)
class SingleSetting:
    """Level assigned to one lint."""

    lint: str
    priority: PrioritySetting
    level: LintLevel

    @property
    def key(self) -> str:
        return self.lint


@dataclass(frozen=True, slots=True)
class GroupSetting:
    """Level assigned to an entire lint group."""

    group: LintGroup
    priority: PrioritySetting
    level: LintLevel

    @property
    def key(self) -> str:
        return self.group.value


Setting: TypeAlias = SingleSetting | GroupSetting


@dataclass(frozen=True, slots=True)
class ConfigGroup:
    """Block of settings rendered together under an optional comment."""

    comment: str | None
    settings: tuple[Setting, ...]


@dataclass(frozen=True, slots=True)
class Config:
    """Ordered sequence of config groups; the order is the output order."""

    groups: tuple[ConfigGroup, ...] = ()


@dataclass(frozen=True, slots=True)
class Exceptions:
    """Lints pulled out of an exhaustive split and the level they receive."""

    level: LintLevel
    lints: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ExhaustiveGroup:
    """Both halves of an exhaustive group split, each in catalog order."""

    defaults: tuple[SingleSetting, ...]
    exceptions: tuple[SingleSetting, ...]


def set_group(group: LintGroup, level: LintLevel, priority: PrioritySetting = UNSPECIFIED) -> GroupSetting:
    return GroupSetting(group=group, priority=priority, level=level)


def set_lint(lint: str, level: LintLevel, priority: PrioritySetting = UNSPECIFIED) -> SingleSetting:
    return SingleSetting(lint=lint, priority=priority, level=level)


__all__ = [
    "UNSPECIFIED",
    "Config",
    "ConfigGroup",
    "Exceptions",
    "ExhaustiveGroup",
    "ExplicitPriority",
    "GroupSetting",
    "PrioritySetting",
    "Setting",
    "SingleSetting",
    "UnspecifiedPriority",
    "set_group",
    "set_lint",
]
