# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Delivery handlers."""

from ci_slack_notify.handlers.handler_slack_webhook import HandlerSlackWebhook

__all__: list[str] = ["HandlerSlackWebhook"]
