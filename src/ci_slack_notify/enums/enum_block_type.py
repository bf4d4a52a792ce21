# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack Block Kit block type enumeration."""

from enum import Enum


class EnumBlockType(str, Enum):
    """Block types emitted by the notifier."""

    HEADER = "header"
    SECTION = "section"
    DIVIDER = "divider"
