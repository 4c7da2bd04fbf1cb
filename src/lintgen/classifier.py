# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Classify catalog lints into the ordered config groups of the fragment."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .catalog.models import Catalog, LintGroup, LintLevel
from .policy import (
    ENABLED_GROUPS,
    GROUP_PRIORITY,
    RESTRICTION_DEFAULT_LEVEL,
    RESTRICTION_EXCEPTION_LEVEL,
    RESTRICTION_EXCEPTIONS,
    Profile,
    allow_overrides,
)
from .settings import (
    Config,
    ConfigGroup,
    Exceptions,
    ExhaustiveGroup,
    ExplicitPriority,
    SingleSetting,
    set_group,
    set_lint,
)

LOGGER = logging.getLogger(__name__)


class ClassifyError(RuntimeError):
    """Raised when the policy names a lint the catalog does not place in the expected group."""

    def __init__(self, message: str, *, lint_id: str, group: LintGroup) -> None:
        """Initialise the error with the offending lint and group.

        Args:
            message: Human-readable diagnostic.
            lint_id: Lint identifier named by the policy.
            group: Group the policy expected the lint to belong to.
        """

        super().__init__(message)
        self.lint_id = lint_id
        self.group = group


class UnknownLintInGroupError(ClassifyError):
    """An allow override lists a lint missing from its group."""

    def __init__(self, lint_id: str, group: LintGroup) -> None:
        super().__init__(f"lint {lint_id} not in group {group.value}", lint_id=lint_id, group=group)


class ExceptionNotInGroupError(ClassifyError):
    """An exhaustive split exception lists a lint missing from the split group."""

    def __init__(self, lint_id: str, group: LintGroup) -> None:
        super().__init__(f"lint {lint_id} not part of group {group.value}", lint_id=lint_id, group=group)


def allow_lints(catalog: Catalog, group: LintGroup, lints: Iterable[str]) -> tuple[SingleSetting, ...]:
    """Return ``allow`` settings for *lints* after checking each belongs to *group*.

    Args:
        catalog: Decoded lint catalog.
        group: Group every lint in *lints* must belong to.
        lints: Lint identifiers in output order.

    Returns:
        tuple[SingleSetting, ...]: One setting per lint, in the given order.

    Raises:
        UnknownLintInGroupError: For the first lint not found under *group*.
    """

    settings: list[SingleSetting] = []
    for lint_id in lints:
        if not catalog.contains(lint_id, group):
            raise UnknownLintInGroupError(lint_id, group)
        settings.append(set_lint(lint_id, LintLevel.ALLOW))
    return tuple(settings)


def split_group_exhaustive(
    catalog: Catalog,
    group: LintGroup,
    default_level: LintLevel,
    exceptions: Exceptions,
) -> ExhaustiveGroup:
    """Partition every lint of *group* into default-level and exception-level settings.

    Every exception must name a lint of *group*; the check runs before any
    setting is produced. Both halves keep catalog order and are never sorted.
    A lint listed twice in *exceptions* still yields a single setting.

    Args:
        catalog: Decoded lint catalog.
        group: Group to split.
        default_level: Level for lints not listed in *exceptions*.
        exceptions: Lints to pull out and the level they receive.

    Returns:
        ExhaustiveGroup: ``defaults`` and ``exceptions`` halves.

    Raises:
        ExceptionNotInGroupError: For the first exception absent from *group*.
    """

    members = catalog.ids_in_group(group)
    member_set = set(members)
    for lint_id in exceptions.lints:
        if lint_id not in member_set:
            raise ExceptionNotInGroupError(lint_id, group)

    excepted = set(exceptions.lints)
    defaults: list[SingleSetting] = []
    selected: list[SingleSetting] = []
    for lint_id in members:
        if lint_id in excepted:
            selected.append(set_lint(lint_id, exceptions.level))
        else:
            defaults.append(set_lint(lint_id, default_level))
    LOGGER.debug(
        "split group=%s members=%d exceptions=%d defaults=%d",
        group.value,
        len(members),
        len(selected),
        len(defaults),
    )
    return ExhaustiveGroup(defaults=tuple(defaults), exceptions=tuple(selected))


def build_config(catalog: Catalog, profile: Profile, workspace: bool = False) -> Config:
    """Assemble the full lint configuration for *profile*.

    The restriction split is validated first, then each allow override list
    in output order; the first failure aborts the build.

    Args:
        catalog: Decoded lint catalog.
        profile: Project profile selecting the cargo overrides.
        workspace: Accepted for symmetry with :func:`lintgen.emitter.render`; unused here.

    Returns:
        Config: Eight config groups in output order.

    Raises:
        ClassifyError: When the policy disagrees with the catalog.
    """

    del workspace
    restriction = split_group_exhaustive(
        catalog,
        LintGroup.RESTRICTION,
        RESTRICTION_DEFAULT_LEVEL,
        Exceptions(level=RESTRICTION_EXCEPTION_LEVEL, lints=RESTRICTION_EXCEPTIONS),
    )
    enabled = ConfigGroup(
        comment="enabled groups",
        settings=tuple(set_group(group, level, ExplicitPriority(GROUP_PRIORITY)) for group, level in ENABLED_GROUPS),
    )
    overrides = tuple(
        ConfigGroup(comment=override.comment, settings=allow_lints(catalog, override.group, override.lints))
        for override in allow_overrides(profile)
    )
    return Config(
        groups=(
            enabled,
            *overrides,
            ConfigGroup(comment="selected restrictions", settings=restriction.exceptions),
            ConfigGroup(comment="restrictions explicit allows", settings=restriction.defaults),
        )
    )


__all__ = [
    "ClassifyError",
    "ExceptionNotInGroupError",
    "UnknownLintInGroupError",
    "allow_lints",
    "build_config",
    "split_group_exhaustive",
]
