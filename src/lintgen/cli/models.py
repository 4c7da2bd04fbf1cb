# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option models for the generate command."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import CATALOG_URL, DEFAULT_TIMEOUT_SECONDS
from ..policy import Profile


class GenerateOptions(BaseModel):
    """Resolved CLI options for a single generator run."""

    model_config = ConfigDict(frozen=True)

    profile: Profile
    workspace: bool = False
    catalog_url: str = CATALOG_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    output: Path | None = None
    debug: bool = False
    emoji: bool = True

    @field_validator("catalog_url")
    @classmethod
    def _require_http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("catalog URL must use http or https")
        return value


__all__ = ["GenerateOptions"]
