# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes attached to notifier errors."""

from enum import Enum


class EnumNotifierErrorCode(str, Enum):
    """Classification of notifier failures.

    Each concrete error class fixes its own code. ``NOTIFIER_ERROR`` is the
    neutral default of the base class.
    """

    NOTIFIER_ERROR = "NOTIFIER_ERROR"
    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"
    DELIVERY_FAILED = "DELIVERY_FAILED"
