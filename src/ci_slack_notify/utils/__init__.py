# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for ci_slack_notify.

    - util_error_sanitization: webhook URL redaction for logs and diagnostics
"""

from ci_slack_notify.utils.util_error_sanitization import (
    redact_webhook_url,
    sanitize_error_message,
)

__all__: list[str] = [
    "redact_webhook_url",
    "sanitize_error_message",
]
