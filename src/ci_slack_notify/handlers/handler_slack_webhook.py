# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack Webhook Handler - single best-effort delivery.

Serializes a ``ModelSlackWebhookPayload`` to JSON and POSTs it once to a
Slack incoming webhook.

Handler Responsibilities:
    - Encode the payload (absent optional keys omitted)
    - Issue one synchronous POST with ``Content-Type: application/json``
    - Classify the outcome: status < 299 is success, anything else or a
      transport failure raises ``DeliveryError``
    - Keep the webhook URL out of logs, errors and ``repr()``

There is no retry and no backoff. The calling CI step owns retry policy.
"""

from __future__ import annotations

import json
import logging
import time

import httpx

from ci_slack_notify.errors import (
    DeliveryError,
    ModelNotifierErrorContext,
    SerializationError,
)
from ci_slack_notify.models import ModelSlackDeliveryResult, ModelSlackWebhookPayload
from ci_slack_notify.utils import redact_webhook_url, sanitize_error_message

logger = logging.getLogger(__name__)

# Responses at or above this status are delivery failures.
_ERROR_STATUS_THRESHOLD: int = 299

_JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


class HandlerSlackWebhook:
    """Delivers one payload to a Slack incoming webhook.

    Attributes:
        _webhook_url: Target webhook URL (bearer credential)
        _http_client: Optional caller-owned httpx.Client. When omitted a
            client is created per ``send`` call and closed afterwards.

    Example:
        >>> handler = HandlerSlackWebhook("https://hooks.slack.com/services/T/B/X")
        >>> # result = handler.send(payload)
        >>> # print(result.status_line)
    """

    def __init__(
        self,
        webhook_url: str,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._http_client = http_client

    def __repr__(self) -> str:
        """Mask the webhook URL to prevent accidental exposure in logs/tracebacks."""
        return f"<{type(self).__name__} target={redact_webhook_url(self._webhook_url)}>"

    def _context(self, operation: str) -> ModelNotifierErrorContext:
        return ModelNotifierErrorContext(
            operation=operation,
            target_name=redact_webhook_url(self._webhook_url),
        )

    def serialize(self, payload: ModelSlackWebhookPayload) -> bytes:
        """Encode the payload as UTF-8 JSON.

        Raises:
            SerializationError: The payload could not be encoded.
        """
        try:
            return json.dumps(payload.to_wire()).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Failed to encode payload: {exc}",
                context=self._context("serialize"),
            ) from exc

    def send(self, payload: ModelSlackWebhookPayload) -> ModelSlackDeliveryResult:
        """POST the payload once and classify the response.

        Args:
            payload: Webhook payload to deliver

        Returns:
            ModelSlackDeliveryResult for a response status below 299.

        Raises:
            SerializationError: The payload could not be encoded.
            DeliveryError: Transport failure, a malformed webhook URL, or a
                response status of 299 or above. ``status_code`` is set for
                HTTP failures.
        """
        body = self.serialize(payload)
        target = redact_webhook_url(self._webhook_url)
        logger.debug(
            "Sending payload to Slack",
            extra={"target": target, "body": body.decode("utf-8")},
        )

        start_time = time.perf_counter()
        if self._http_client is not None:
            response = self._post(self._http_client, body)
        else:
            with httpx.Client() as client:
                response = self._post(client, body)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status_line = f"{response.status_code} {response.reason_phrase}".strip()
        if response.status_code >= _ERROR_STATUS_THRESHOLD:
            logger.warning(
                "Slack webhook rejected message",
                extra={
                    "target": target,
                    "status_code": response.status_code,
                    "duration_ms": round(duration_ms, 2),
                },
            )
            raise DeliveryError(
                f"Error on message: {status_line}",
                context=self._context("post"),
                status_code=response.status_code,
            )

        logger.info(
            "Slack message delivered",
            extra={
                "target": target,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return ModelSlackDeliveryResult(
            status_code=response.status_code,
            status_line=status_line,
            duration_ms=duration_ms,
        )

    def _post(self, client: httpx.Client, body: bytes) -> httpx.Response:
        try:
            return client.post(self._webhook_url, content=body, headers=_JSON_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DeliveryError(
                f"Slack webhook request failed: "
                f"{sanitize_error_message(exc, self._webhook_url)}",
                context=self._context("post"),
            ) from exc


__all__: list[str] = ["HandlerSlackWebhook"]
