# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notifier Error Context Model.

Bundles the structured fields shared by notifier errors so error
constructors keep a short parameter list.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelNotifierErrorContext(BaseModel):
    """Structured context for notifier errors.

    Attributes:
        operation: Operation being performed (validate_config, serialize, post)
        target_name: Redacted target endpoint or resource name
        variable: Environment variable involved in a configuration error

    Example:
        >>> context = ModelNotifierErrorContext(
        ...     operation="validate_config",
        ...     variable="SLACK_WEBHOOK",
        ... )
        >>> raise ConfigurationError("SLACK_WEBHOOK is required", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (validate_config, serialize, post)",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Redacted target endpoint or resource name",
    )
    variable: Optional[str] = Field(
        default=None,
        description="Environment variable involved in the failure",
    )


__all__ = ["ModelNotifierErrorContext"]
