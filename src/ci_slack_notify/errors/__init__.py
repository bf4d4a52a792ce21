# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notifier Errors Module.

Exports:
    ModelNotifierErrorContext: Configuration model for bundled error context
    NotifierError: Base notifier error class
    ConfigurationError: Required configuration missing (exit 1)
    DeliveryError: Webhook transport or HTTP failure (exit 2)
    SerializationError: Payload encoding failure (exit 2)

Example::

    from ci_slack_notify.errors import DeliveryError, ModelNotifierErrorContext

    context = ModelNotifierErrorContext(operation="post", target_name=redacted_url)
    raise DeliveryError("Error on message: 500 Internal Server Error", context=context)
"""

from ci_slack_notify.errors.model_notifier_error_context import (
    ModelNotifierErrorContext,
)
from ci_slack_notify.errors.notifier_errors import (
    ConfigurationError,
    DeliveryError,
    NotifierError,
    SerializationError,
)

__all__: list[str] = [
    "ConfigurationError",
    "DeliveryError",
    "ModelNotifierErrorContext",
    "NotifierError",
    "SerializationError",
]
