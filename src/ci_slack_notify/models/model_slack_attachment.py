# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Legacy Slack attachment model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ci_slack_notify.models.model_slack_field import ModelSlackField


class ModelSlackAttachment(BaseModel):
    """Legacy message decoration with color, author identity and fields.

    Attributes:
        fallback: Plain-text summary shown by clients that cannot render
            attachments. Always serialized.
        pretext: Text shown above the attachment.
        color: Sidebar color (``good``, ``warning``, ``danger`` or hex).
        author_name: Author display name.
        author_link: URL the author name links to.
        author_icon: Small author avatar URL.
        footer: Footer text.
        fields: Ordered title/value pairs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    fallback: str = Field(..., description="Plain-text summary.")
    pretext: str | None = None
    color: str | None = None
    author_name: str | None = None
    author_link: str | None = None
    author_icon: str | None = None
    footer: str | None = None
    fields: list[ModelSlackField] | None = None


__all__: list[str] = ["ModelSlackAttachment"]
