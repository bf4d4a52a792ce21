# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack text object type enumeration."""

from enum import Enum


class EnumTextType(str, Enum):
    """Text object types for Block Kit text payloads."""

    PLAIN_TEXT = "plain_text"
    MARKDOWN = "mrkdwn"
