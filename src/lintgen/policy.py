# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Built-in lint policy.

The policy is code, not configuration: every list here is validated against
the fetched catalog on each run so upstream renames fail loudly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .catalog.models import LintGroup, LintLevel


class Profile(str, Enum):
    """Kind of project the fragment is generated for."""

    PUBLISH = "publish"
    PERSONAL = "personal"


@dataclass(frozen=True, slots=True)
class AllowOverride:
    """Lints of one group that are always allowed."""

    comment: str
    group: LintGroup
    lints: tuple[str, ...]


GROUP_PRIORITY: Final[int] = -1

ENABLED_GROUPS: Final[tuple[tuple[LintGroup, LintLevel], ...]] = (
    (LintGroup.CORRECTNESS, LintLevel.DENY),
    (LintGroup.SUSPICIOUS, LintLevel.WARN),
    (LintGroup.STYLE, LintLevel.WARN),
    (LintGroup.COMPLEXITY, LintLevel.WARN),
    (LintGroup.PERF, LintLevel.WARN),
    (LintGroup.CARGO, LintLevel.WARN),
    (LintGroup.PEDANTIC, LintLevel.WARN),
    (LintGroup.NURSERY, LintLevel.WARN),
)

PEDANTIC_ALLOWS: Final[tuple[str, ...]] = (
    "too_many_lines",
    "must_use_candidate",
    "map_unwrap_or",
    "missing_errors_doc",
    "if_not_else",
)
NURSERY_ALLOWS: Final[tuple[str, ...]] = (
    "missing_const_for_fn",
    "option_if_let_else",
    "redundant_pub_crate",
)
COMPLEXITY_ALLOWS: Final[tuple[str, ...]] = ("too_many_arguments",)
STYLE_ALLOWS: Final[tuple[str, ...]] = ("new_without_default", "redundant_closure")
CARGO_ALLOWS: Final[tuple[str, ...]] = ("multiple_crate_versions",)
# Personal crates are never published, so package metadata is not required.
PERSONAL_CARGO_ALLOWS: Final[tuple[str, ...]] = ("cargo_common_metadata",)

RESTRICTION_DEFAULT_LEVEL: Final[LintLevel] = LintLevel.ALLOW
RESTRICTION_EXCEPTION_LEVEL: Final[LintLevel] = LintLevel.WARN
RESTRICTION_EXCEPTIONS: Final[tuple[str, ...]] = (
    "allow_attributes",
    "allow_attributes_without_reason",
    "arithmetic_side_effects",
    "as_conversions",
    "assertions_on_result_states",
    "cfg_not_test",
    "clone_on_ref_ptr",
    "create_dir",
    "dbg_macro",
    "decimal_literal_representation",
    "default_numeric_fallback",
    "deref_by_slicing",
    "disallowed_script_idents",
    "else_if_without_else",
    "empty_drop",
    "empty_enum_variants_with_brackets",
    "empty_structs_with_brackets",
    "exit",
    "filetype_is_file",
    "float_arithmetic",
    "float_cmp_const",
    "fn_to_numeric_cast_any",
    "format_push_string",
    "get_unwrap",
    "indexing_slicing",
    "infinite_loop",
    "inline_asm_x86_att_syntax",
    "inline_asm_x86_intel_syntax",
    "integer_division",
    "iter_over_hash_type",
    "large_include_file",
    "let_underscore_must_use",
    "let_underscore_untyped",
    "little_endian_bytes",
    "lossy_float_literal",
    "map_err_ignore",
    "mem_forget",
    "missing_assert_message",
    "missing_asserts_for_indexing",
    "mixed_read_write_in_expression",
    "modulo_arithmetic",
    "multiple_inherent_impl",
    "multiple_unsafe_ops_per_block",
    "mutex_atomic",
    "panic",
    "partial_pub_fields",
    "pattern_type_mismatch",
    "print_stderr",
    "print_stdout",
    "pub_without_shorthand",
    "rc_buffer",
    "rc_mutex",
    "redundant_type_annotations",
    "renamed_function_params",
    "rest_pat_in_fully_bound_structs",
    "same_name_method",
    "self_named_module_files",
    "semicolon_inside_block",
    "str_to_string",
    "string_add",
    "string_lit_chars_any",
    "string_slice",
    "string_to_string",
    "suspicious_xor_used_as_pow",
    "tests_outside_test_module",
    "todo",
    "try_err",
    "undocumented_unsafe_blocks",
    "unimplemented",
    "unnecessary_safety_comment",
    "unnecessary_safety_doc",
    "unnecessary_self_imports",
    "unneeded_field_pattern",
    "unseparated_literal_suffix",
    "unused_result_ok",
    "unwrap_used",
    "use_debug",
    "verbose_file_reads",
)


def allow_overrides(profile: Profile) -> tuple[AllowOverride, ...]:
    """Return the per-group allow lists for *profile* in output order."""

    cargo = CARGO_ALLOWS + (PERSONAL_CARGO_ALLOWS if profile is Profile.PERSONAL else ())
    return (
        AllowOverride("pedantic overrides", LintGroup.PEDANTIC, PEDANTIC_ALLOWS),
        AllowOverride("nursery overrides", LintGroup.NURSERY, NURSERY_ALLOWS),
        AllowOverride("complexity overrides", LintGroup.COMPLEXITY, COMPLEXITY_ALLOWS),
        AllowOverride("style overrides", LintGroup.STYLE, STYLE_ALLOWS),
        AllowOverride("cargo overrides", LintGroup.CARGO, cargo),
    )


__all__ = [
    "CARGO_ALLOWS",
    "COMPLEXITY_ALLOWS",
    "ENABLED_GROUPS",
    "GROUP_PRIORITY",
    "NURSERY_ALLOWS",
    "PEDANTIC_ALLOWS",
    "PERSONAL_CARGO_ALLOWS",
    "RESTRICTION_DEFAULT_LEVEL",
    "RESTRICTION_EXCEPTIONS",
    "RESTRICTION_EXCEPTION_LEVEL",
    "STYLE_ALLOWS",
    "AllowOverride",
    "Profile",
    "allow_overrides",
]
