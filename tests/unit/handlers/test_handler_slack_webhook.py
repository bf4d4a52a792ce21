# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for HandlerSlackWebhook.

Tests the webhook handler's delivery contract:
- JSON encoding with absent keys omitted
- Single POST with application/json content type
- Status classification (< 299 success, >= 299 DeliveryError)
- Transport failures surfaced as DeliveryError without leaking the URL

All tests use httpx.MockTransport to avoid external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest

from ci_slack_notify.enums import EnumNotifierErrorCode
from ci_slack_notify.errors import DeliveryError, SerializationError
from ci_slack_notify.handlers import HandlerSlackWebhook
from ci_slack_notify.models import ModelSlackBlock, ModelSlackWebhookPayload


@pytest.fixture
def payload() -> ModelSlackWebhookPayload:
    """Create a small blocks payload."""
    return ModelSlackWebhookPayload(
        username="ci-bot",
        blocks=[ModelSlackBlock.header("Deploy"), ModelSlackBlock.section("done")],
    )


class TestSerialize:
    """Tests for payload encoding."""

    def test_serialize_omits_absent_keys(
        self, webhook_url: str, payload: ModelSlackWebhookPayload
    ) -> None:
        body = json.loads(HandlerSlackWebhook(webhook_url).serialize(payload))

        assert body == {
            "username": "ci-bot",
            "unfurl_links": False,
            "blocks": [
                {"type": "header", "text": {"type": "plain_text", "text": "Deploy"}},
                {"type": "section", "text": {"type": "mrkdwn", "text": "done"}},
            ],
        }

    def test_serialize_failure_raises_serialization_error(
        self, webhook_url: str, payload: ModelSlackWebhookPayload
    ) -> None:
        handler = HandlerSlackWebhook(webhook_url)

        with patch(
            "ci_slack_notify.handlers.handler_slack_webhook.json.dumps",
            side_effect=TypeError("not serializable"),
        ):
            with pytest.raises(SerializationError) as info:
                handler.serialize(payload)

        assert isinstance(info.value, DeliveryError)
        assert info.value.error_code == EnumNotifierErrorCode.SERIALIZATION_FAILED
        assert info.value.exit_code == 2


class TestSend:
    """Tests for delivery and status classification."""

    def test_success(
        self,
        webhook_url: str,
        payload: ModelSlackWebhookPayload,
        make_transport: Callable[..., object],
    ) -> None:
        recorder = make_transport(200)
        handler = HandlerSlackWebhook(webhook_url, http_client=recorder.client())

        result = handler.send(payload)

        assert result.status_code == 200
        assert result.status_line == "200 OK"
        assert result.duration_ms >= 0
        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == webhook_url
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content)["username"] == "ci-bot"

    @pytest.mark.parametrize("status_code", [200, 201, 204, 298])
    def test_statuses_below_299_succeed(
        self,
        webhook_url: str,
        payload: ModelSlackWebhookPayload,
        make_transport: Callable[..., object],
        status_code: int,
    ) -> None:
        recorder = make_transport(status_code)
        handler = HandlerSlackWebhook(webhook_url, http_client=recorder.client())

        assert handler.send(payload).status_code == status_code

    @pytest.mark.parametrize(
        ("status_code", "status_line"),
        [
            (299, "299"),
            (400, "400 Bad Request"),
            (404, "404 Not Found"),
            (500, "500 Internal Server Error"),
        ],
    )
    def test_statuses_from_299_fail(
        self,
        webhook_url: str,
        payload: ModelSlackWebhookPayload,
        make_transport: Callable[..., object],
        status_code: int,
        status_line: str,
    ) -> None:
        recorder = make_transport(status_code, "no_service")
        handler = HandlerSlackWebhook(webhook_url, http_client=recorder.client())

        with pytest.raises(DeliveryError) as info:
            handler.send(payload)

        assert status_line in str(info.value)
        assert info.value.status_code == status_code
        assert info.value.context["status_code"] == status_code
        assert info.value.context["operation"] == "post"
        assert len(recorder.requests) == 1

    def test_no_retry_on_failure(
        self,
        webhook_url: str,
        payload: ModelSlackWebhookPayload,
        make_transport: Callable[..., object],
    ) -> None:
        recorder = make_transport(503)
        handler = HandlerSlackWebhook(webhook_url, http_client=recorder.client())

        with pytest.raises(DeliveryError):
            handler.send(payload)

        assert len(recorder.requests) == 1

    def test_transport_error(
        self, webhook_url: str, payload: ModelSlackWebhookPayload
    ) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(f"connection refused for {request.url}")

        client = httpx.Client(transport=httpx.MockTransport(refuse))
        handler = HandlerSlackWebhook(webhook_url, http_client=client)

        with pytest.raises(DeliveryError) as info:
            handler.send(payload)

        message = str(info.value)
        assert "ConnectError" in message
        assert "T/B/X" not in message
        assert info.value.status_code is None
        assert isinstance(info.value.__cause__, httpx.ConnectError)

    def test_malformed_url_raises_delivery_error(
        self, payload: ModelSlackWebhookPayload
    ) -> None:
        handler = HandlerSlackWebhook("http://[::1/x")

        with pytest.raises(DeliveryError) as info:
            handler.send(payload)

        assert "Slack webhook request failed" in str(info.value)
        assert info.value.exit_code == 2
        assert info.value.status_code is None
        assert isinstance(info.value.__cause__, httpx.InvalidURL)

    def test_owned_client_is_created_per_send(
        self,
        webhook_url: str,
        payload: ModelSlackWebhookPayload,
        make_transport: Callable[..., object],
    ) -> None:
        recorder = make_transport(200)
        handler = HandlerSlackWebhook(webhook_url)

        with patch(
            "ci_slack_notify.handlers.handler_slack_webhook.httpx.Client",
            return_value=recorder.client(),
        ) as client_cls:
            result = handler.send(payload)

        client_cls.assert_called_once_with()
        assert result.status_code == 200
        assert len(recorder.requests) == 1


class TestRepr:
    """Tests for credential masking."""

    def test_repr_masks_webhook_url(self, webhook_url: str) -> None:
        text = repr(HandlerSlackWebhook(webhook_url))

        assert "T/B/X" not in text
        assert "hooks.example" in text
