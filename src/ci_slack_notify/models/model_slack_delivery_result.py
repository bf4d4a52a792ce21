# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of a successful webhook delivery."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelSlackDeliveryResult(BaseModel):
    """Outcome of a webhook POST that returned a status below 299."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int = Field(..., description="HTTP status code.")
    status_line: str = Field(..., description="Status code and reason, e.g. '200 OK'.")
    duration_ms: float = Field(..., ge=0.0, description="Request duration.")


__all__: list[str] = ["ModelSlackDeliveryResult"]
