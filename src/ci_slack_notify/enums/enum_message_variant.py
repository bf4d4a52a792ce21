# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Message variant enumeration.

Selects which part of the webhook payload carries the notification content:

- BLOCKS: Block Kit blocks (header, sections, divider).
- ATTACHMENT: a single legacy attachment with color, author and fields.
  Requires SLACK_MESSAGE.
"""

from enum import Enum


class EnumMessageVariant(str, Enum):
    """Payload layout produced for a notification."""

    BLOCKS = "blocks"
    ATTACHMENT = "attachment"

    @property
    def requires_message(self) -> bool:
        """Whether SLACK_MESSAGE must be set for this variant."""
        return self is EnumMessageVariant.ATTACHMENT
