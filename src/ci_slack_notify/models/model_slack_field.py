# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack attachment field model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSlackField(BaseModel):
    """A title/value pair displayed inside an attachment.

    ``short`` selects two-up layout (True) or full width (False) and is
    always serialized.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str = Field(..., description="Field label.")
    value: str = Field(..., description="Field value.")
    short: bool = Field(default=False, description="Render two-up instead of full width.")


__all__: list[str] = ["ModelSlackField"]
