# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ci-slack-notify CLI - post a CI status notification to Slack.

Usage
-----
    SLACK_WEBHOOK=https://hooks.slack.com/services/T/B/X \\
    SLACK_TITLE="Deploy" SLACK_MESSAGE="Deploy finished" \\
        ci-slack-notify

    SLACK_VARIANT=attachment ci-slack-notify --verbose

Input
-----
The environment is the whole input surface (see
``ModelNotifierConfig``). ``--variant`` defaults to ``SLACK_VARIANT``.

Exit Codes
----------
    0   delivered; the response status line is printed to stdout
    1   required configuration missing (SLACK_WEBHOOK, or SLACK_MESSAGE
        for the attachment variant) or an unknown SLACK_VARIANT; no HTTP
        call is made
    2   delivery failed (malformed webhook URL, transport error, or HTTP
        status >= 299)
"""

from __future__ import annotations

import logging
import sys

import click

from ci_slack_notify.enums import EnumMessageVariant
from ci_slack_notify.errors import (
    ConfigurationError,
    DeliveryError,
    ModelNotifierErrorContext,
)
from ci_slack_notify.handlers import HandlerSlackWebhook
from ci_slack_notify.models import ModelNotifierConfig
from ci_slack_notify.services import build_payload

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = "ci_slack_notify"


def _build_handler(webhook_url: str) -> HandlerSlackWebhook:
    """Create the delivery handler for the configured webhook."""
    return HandlerSlackWebhook(webhook_url)


def _resolve_variant(value: str) -> EnumMessageVariant:
    """Parse ``--variant``/``SLACK_VARIANT`` case-insensitively.

    Raises:
        ConfigurationError: The value names no known layout.
    """
    try:
        return EnumMessageVariant(value.strip().lower())
    except ValueError:
        choices = ", ".join(v.value for v in EnumMessageVariant)
        raise ConfigurationError(
            f"SLACK_VARIANT must be one of: {choices} (got {value!r})",
            context=ModelNotifierErrorContext(
                operation="validate_config",
                variable="SLACK_VARIANT",
            ),
        ) from None


@click.command()
@click.option(
    "--variant",
    type=str,
    default=EnumMessageVariant.BLOCKS.value,
    envvar="SLACK_VARIANT",
    show_default=True,
    help="Payload layout: 'blocks' (Block Kit) or 'attachment' (legacy).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log the assembled payload and delivery details.",
)
def cli(variant: str, verbose: bool) -> None:
    """Post a CI status notification to a Slack incoming webhook.

    All message content is read from environment variables.
    """
    if verbose:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG)

    config = ModelNotifierConfig.from_env()

    try:
        payload = build_payload(config, _resolve_variant(variant))
    except ConfigurationError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        sys.exit(exc.exit_code)

    # build_payload has already rejected an empty webhook URL.
    handler = _build_handler(config.webhook_url or "")
    try:
        result = handler.send(payload)
    except DeliveryError as exc:
        click.echo(f"Error sending message: {exc}", err=True)
        sys.exit(exc.exit_code)

    click.echo(result.status_line)


def main() -> None:
    """Entry point for ci-slack-notify CLI."""
    logging.basicConfig(level=logging.WARNING)
    cli()


__all__ = ["cli", "main"]
