# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""CI Slack notifier - post CI run status to a Slack incoming webhook.

Reads CI metadata from the process environment, assembles a Slack
webhook payload (Block Kit blocks or a legacy attachment) and delivers
it with one HTTP POST.

Key Components:
    - ModelNotifierConfig: single snapshot of the environment
    - services: ordered field rules and payload assembly
    - HandlerSlackWebhook: JSON encoding and delivery
    - cli: ``ci-slack-notify`` entry point and exit-code mapping
"""

__all__: list[str] = []
