# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for ci_slack_notify."""

from ci_slack_notify.enums.enum_block_type import EnumBlockType
from ci_slack_notify.enums.enum_message_variant import EnumMessageVariant
from ci_slack_notify.enums.enum_notifier_error_code import EnumNotifierErrorCode
from ci_slack_notify.enums.enum_text_type import EnumTextType

__all__: list[str] = [
    "EnumBlockType",
    "EnumMessageVariant",
    "EnumNotifierErrorCode",
    "EnumTextType",
]
