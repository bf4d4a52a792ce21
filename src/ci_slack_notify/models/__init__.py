# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pydantic models for configuration, webhook payloads and results."""

from ci_slack_notify.models.model_notifier_config import ModelNotifierConfig
from ci_slack_notify.models.model_slack_attachment import ModelSlackAttachment
from ci_slack_notify.models.model_slack_block import (
    ModelSlackBlock,
    ModelSlackBlockAccessory,
    ModelSlackBlockText,
)
from ci_slack_notify.models.model_slack_delivery_result import (
    ModelSlackDeliveryResult,
)
from ci_slack_notify.models.model_slack_field import ModelSlackField
from ci_slack_notify.models.model_slack_webhook_payload import (
    ModelSlackWebhookPayload,
)

__all__: list[str] = [
    "ModelNotifierConfig",
    "ModelSlackAttachment",
    "ModelSlackBlock",
    "ModelSlackBlockAccessory",
    "ModelSlackBlockText",
    "ModelSlackDeliveryResult",
    "ModelSlackField",
    "ModelSlackWebhookPayload",
]
