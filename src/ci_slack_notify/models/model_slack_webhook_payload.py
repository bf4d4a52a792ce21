# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack incoming webhook payload model.

Absent optional values are ``None`` and are dropped from the wire by
``to_wire()``. Empty strings are real values and are kept, so callers
that want a key omitted must pass ``None``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ci_slack_notify.models.model_slack_attachment import ModelSlackAttachment
from ci_slack_notify.models.model_slack_block import ModelSlackBlock


class ModelSlackWebhookPayload(BaseModel):
    """Top-level incoming webhook envelope.

    Example:
        >>> payload = ModelSlackWebhookPayload(
        ...     username="ci-bot",
        ...     blocks=[ModelSlackBlock.header("Deploy")],
        ... )
        >>> sorted(payload.to_wire())
        ['blocks', 'unfurl_links', 'username']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str | None = None
    username: str | None = None
    icon_url: str | None = None
    icon_emoji: str | None = None
    channel: str | None = None
    unfurl_links: bool = Field(default=False, description="Always serialized.")
    attachments: list[ModelSlackAttachment] | None = None
    blocks: list[ModelSlackBlock] | None = None

    def to_wire(self) -> dict[str, object]:
        """Return the JSON-ready dict with absent optional keys omitted."""
        return self.model_dump(mode="json", exclude_none=True)


__all__: list[str] = ["ModelSlackWebhookPayload"]
