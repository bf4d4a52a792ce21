# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ModelNotifierConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ci_slack_notify.models import ModelNotifierConfig
from ci_slack_notify.models.model_notifier_config import ENV_VARIABLES


class TestFromEnv:
    """Tests for environment snapshotting."""

    def test_unset_variables_are_none(self) -> None:
        config = ModelNotifierConfig.from_env({})

        for field in ENV_VARIABLES:
            assert getattr(config, field) is None
        assert config.minimal is False

    def test_empty_string_is_preserved(self) -> None:
        config = ModelNotifierConfig.from_env({"SLACK_CHANNEL": "", "UUID": ""})

        assert config.channel == ""
        assert config.run_uuid == ""

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_WEBHOOK", "https://hooks.example/T/B/X")
        monkeypatch.setenv("MSG_MINIMAL", "true")

        config = ModelNotifierConfig.from_env()

        assert config.webhook_url == "https://hooks.example/T/B/X"
        assert config.minimal is True

    def test_config_is_frozen(self) -> None:
        config = ModelNotifierConfig.from_env({})

        with pytest.raises(ValidationError):
            config.title = "changed"  # type: ignore[misc]


class TestDerivedValues:
    """Tests for computed properties."""

    def test_defaults_apply_only_when_unset(self) -> None:
        unset = ModelNotifierConfig.from_env({})
        empty = ModelNotifierConfig.from_env({"SLACK_DESCRIPTION": "", "SLACK_COLOR": ""})

        assert unset.description_text == "Links to results below"
        assert unset.color_value == "good"
        assert empty.description_text == ""
        assert empty.color_value == ""

    def test_actions_url(self) -> None:
        config = ModelNotifierConfig.from_env(
            {
                "GITHUB_SERVER_URL": "https://github.com",
                "GITHUB_REPOSITORY": "acme/widgets",
                "GITHUB_RUN_ID": "42",
                "GITHUB_RUN_ATTEMPT": "3",
            }
        )

        assert config.actions_url == (
            "https://github.com/acme/widgets/actions/runs/42/attempts/3"
        )

    def test_actor_urls(self) -> None:
        config = ModelNotifierConfig.from_env({"GITHUB_ACTOR": "octocat"})

        assert config.actor_link == "http://github.com/octocat"
        assert config.actor_icon == "http://github.com/octocat.png?size=32"

    def test_actor_urls_absent_without_actor(self) -> None:
        config = ModelNotifierConfig.from_env({"GITHUB_ACTOR": ""})

        assert config.actor_link is None
        assert config.actor_icon is None

    def test_fallback_summary(self) -> None:
        config = ModelNotifierConfig.from_env(
            {
                "GITHUB_ACTION": "notify",
                "GITHUB_ACTOR": "octocat",
                "GITHUB_EVENT_NAME": "push",
                "GITHUB_REF": "refs/heads/main",
                "GITHUB_REPOSITORY": "acme/widgets",
                "GITHUB_WORKFLOW": "ci",
            }
        )

        assert config.fallback_summary.splitlines() == [
            "GITHUB_ACTION=notify",
            "GITHUB_ACTOR=octocat",
            "GITHUB_EVENT_NAME=push",
            "GITHUB_REF=refs/heads/main",
            "GITHUB_REPOSITORY=acme/widgets",
            "GITHUB_WORKFLOW=ci",
        ]
        assert config.message_or_summary == config.fallback_summary

    def test_message_wins_over_summary(self) -> None:
        config = ModelNotifierConfig.from_env({"SLACK_MESSAGE": "hi"})

        assert config.message_or_summary == "hi"
