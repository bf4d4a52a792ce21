# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for ci_slack_notify tests."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from ci_slack_notify.models.model_notifier_config import ENV_MINIMAL, ENV_VARIABLES

WEBHOOK_URL = "https://hooks.example/T/B/X"


@pytest.fixture(autouse=True)
def _clear_notifier_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every recognised variable from the environment for test isolation.

    CI runners export GITHUB_* variables and developers may have SLACK_*
    set in their shell; neither may leak into configuration snapshots.
    """
    for variable in (*ENV_VARIABLES.values(), ENV_MINIMAL, "SLACK_VARIANT"):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture
def webhook_url() -> str:
    """Return test webhook URL."""
    return WEBHOOK_URL


class RecordingTransport:
    """httpx.MockTransport wrapper that keeps every request it answers."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._record)

    def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport)


@pytest.fixture
def make_transport() -> Callable[[int], RecordingTransport]:
    """Factory for a recording transport answering with a fixed status."""

    def factory(status_code: int = 200, text: str = "ok") -> RecordingTransport:
        return RecordingTransport(lambda request: httpx.Response(status_code, text=text))

    return factory
