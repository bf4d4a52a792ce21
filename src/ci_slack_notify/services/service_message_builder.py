# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Webhook payload assembly.

Turns a ``ModelNotifierConfig`` into a ``ModelSlackWebhookPayload`` for
one of the message variants. Everything here is pure: no environment
reads and no I/O.

Variants:
    - BLOCKS: header, message, description, context fields, run links,
      divider and footer as Block Kit blocks.
    - ATTACHMENT: a single legacy attachment carrying the ordered field
      list from ``assemble_fields``.
"""

from __future__ import annotations

import logging
from typing import Final

from ci_slack_notify.enums import EnumMessageVariant, EnumTextType
from ci_slack_notify.errors import ConfigurationError, ModelNotifierErrorContext
from ci_slack_notify.models import (
    ModelNotifierConfig,
    ModelSlackAttachment,
    ModelSlackBlock,
    ModelSlackBlockAccessory,
    ModelSlackWebhookPayload,
)
from ci_slack_notify.models.model_notifier_config import ENV_VARIABLES
from ci_slack_notify.services.service_field_assembly import (
    assemble_context_fields,
    assemble_fields,
)

logger = logging.getLogger(__name__)

__all__: list[str] = [
    "FOOTER_TEXT",
    "build_attachment",
    "build_blocks",
    "build_payload",
    "validate_required",
]

FOOTER_TEXT: Final[str] = (
    "<https://github.com/rtCamp/github-actions-library"
    "|Powered By rtCamp's GitHub Actions Library>"
)

# (label, config attribute) for informational sections after the run link.
_INFO_SECTIONS: Final[tuple[tuple[str, str], ...]] = (
    ("Run UUID", "run_uuid"),
    ("PSE Version", "pse_version"),
    ("BI (Metabase)", "bi_link"),
    ("BigQuery", "bq_link"),
)


def _labelled_section(label: str, value: str) -> str:
    return f"*{label}:*\n{value}"


def validate_required(config: ModelNotifierConfig, variant: EnumMessageVariant) -> None:
    """Raise ConfigurationError when a required variable is missing or empty.

    Args:
        config: Notifier configuration
        variant: Message variant being built

    Raises:
        ConfigurationError: SLACK_WEBHOOK is empty, or SLACK_MESSAGE is
            empty for a variant that requires it.
    """
    required = ["webhook_url"]
    if variant.requires_message:
        required.append("message")

    for attribute in required:
        if not getattr(config, attribute):
            variable = ENV_VARIABLES[attribute]
            raise ConfigurationError(
                f"{variable} is required",
                context=ModelNotifierErrorContext(
                    operation="validate_config",
                    variable=variable,
                ),
                variant=variant.value,
            )


def build_blocks(config: ModelNotifierConfig) -> list[ModelSlackBlock]:
    """Assemble the Block Kit block list for a notification.

    Minimal mode drops only the context-field sections. The header block
    is omitted when there is no title, and each info section when its
    value is empty, so block indices shift with the configuration:
    callers should locate blocks by type or text rather than position.
    """
    blocks: list[ModelSlackBlock] = []
    if config.title:
        blocks.append(ModelSlackBlock.header(config.title))

    blocks.append(ModelSlackBlock.section(config.message_or_summary))
    blocks.append(
        ModelSlackBlock.section(config.description_text, EnumTextType.PLAIN_TEXT)
    )
    blocks.extend(
        ModelSlackBlock.section(_labelled_section(field.title, field.value))
        for field in assemble_context_fields(config)
    )

    accessory = None
    if config.actor_icon is not None:
        accessory = ModelSlackBlockAccessory(
            image_url=config.actor_icon,
            alt_text=config.github_actor or "",
        )
    blocks.append(
        ModelSlackBlock.section(
            _labelled_section("Actions URL", config.actions_url),
            accessory=accessory,
        )
    )

    for label, attribute in _INFO_SECTIONS:
        value = getattr(config, attribute)
        if value:
            blocks.append(ModelSlackBlock.section(_labelled_section(label, value)))

    blocks.append(ModelSlackBlock.divider())
    blocks.append(ModelSlackBlock.section(FOOTER_TEXT))
    return blocks


def build_attachment(config: ModelNotifierConfig) -> ModelSlackAttachment:
    """Assemble the legacy attachment for a notification."""
    return ModelSlackAttachment(
        fallback=config.message_or_summary,
        color=config.color_value,
        author_name=config.github_actor or None,
        author_link=config.actor_link,
        author_icon=config.actor_icon,
        footer=FOOTER_TEXT,
        fields=assemble_fields(config),
    )


def build_payload(
    config: ModelNotifierConfig,
    variant: EnumMessageVariant = EnumMessageVariant.BLOCKS,
) -> ModelSlackWebhookPayload:
    """Validate the configuration and build the webhook payload.

    Args:
        config: Notifier configuration
        variant: Which payload layout to produce

    Returns:
        Payload with either ``blocks`` or ``attachments`` populated.
        Display overrides set to the empty string are omitted.

    Raises:
        ConfigurationError: A required variable is missing.
    """
    validate_required(config, variant)

    envelope: dict[str, object] = {
        "username": config.username or None,
        "icon_url": config.icon_url or None,
        "icon_emoji": config.icon_emoji or None,
        "channel": config.channel or None,
    }
    if variant is EnumMessageVariant.ATTACHMENT:
        payload = ModelSlackWebhookPayload(
            **envelope, attachments=[build_attachment(config)]
        )
    else:
        payload = ModelSlackWebhookPayload(**envelope, blocks=build_blocks(config))

    logger.debug(
        "Assembled Slack payload",
        extra={
            "variant": variant.value,
            "minimal": config.minimal,
            "block_count": len(payload.blocks or []),
            "attachment_count": len(payload.attachments or []),
        },
    )
    return payload
