# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render a :class:`~lintgen.settings.Config` as a Cargo lints table."""

from __future__ import annotations

from io import StringIO

from .constants import PACKAGE_HEADER, WORKSPACE_HEADER
from .settings import Config, ExplicitPriority, Setting


def render_setting(setting: Setting) -> str:
    """Return the single TOML line for *setting*, without a newline."""

    priority = setting.priority
    if isinstance(priority, ExplicitPriority):
        return f'{setting.key} = {{ level = "{setting.level.value}", priority = {priority.value} }}'
    return f'{setting.key} = "{setting.level.value}"'


def render(config: Config, workspace: bool = False) -> str:
    """Return the lints table for *config*.

    The header line always ends with a newline; config groups are separated
    by one blank line and the final setting line is left unterminated.

    Args:
        config: Classified settings in output order.
        workspace: Emit ``[workspace.lints.clippy]`` instead of ``[lints.clippy]``.

    Returns:
        str: Rendered fragment.
    """

    buffer = StringIO()
    buffer.write(WORKSPACE_HEADER if workspace else PACKAGE_HEADER)
    buffer.write("\n")
    last_index = len(config.groups) - 1
    for index, group in enumerate(config.groups):
        if group.comment is not None:
            buffer.write(f"# {group.comment}\n")
        buffer.write("\n".join(render_setting(setting) for setting in group.settings))
        if index == last_index:
            continue
        # an empty group contributes only the separator newline
        buffer.write("\n\n" if group.settings else "\n")
    return buffer.getvalue()


__all__ = ["render", "render_setting"]
