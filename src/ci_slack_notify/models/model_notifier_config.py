# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notifier configuration model.

The notifier reads its whole input surface from the process environment
exactly once, at startup, into this model. Assembly and delivery take
the model as an argument and never touch ``os.environ`` themselves.

Unset variables become ``None``. Variables set to the empty string stay
``""``. Conditional fields treat both as "not present"; defaults such as
``SLACK_DESCRIPTION`` and ``SLACK_COLOR`` apply only when the variable
is unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

__all__: list[str] = [
    "DEFAULT_COLOR",
    "DEFAULT_DESCRIPTION",
    "ENV_VARIABLES",
    "ModelNotifierConfig",
]

DEFAULT_DESCRIPTION: Final[str] = "Links to results below"
DEFAULT_COLOR: Final[str] = "good"

_GITHUB_PROFILE_URL: Final[str] = "http://github.com/"

# Model field -> environment variable.
ENV_VARIABLES: Final[dict[str, str]] = {
    "webhook_url": "SLACK_WEBHOOK",
    "icon_url": "SLACK_ICON",
    "icon_emoji": "SLACK_ICON_EMOJI",
    "channel": "SLACK_CHANNEL",
    "username": "SLACK_USERNAME",
    "title": "SLACK_TITLE",
    "message": "SLACK_MESSAGE",
    "description": "SLACK_DESCRIPTION",
    "color": "SLACK_COLOR",
    "pull_request_url": "PULL_REQUEST_URL",
    "pse_url": "PSE_URL",
    "pse_ip": "PSE_IP",
    "pse_version": "PSE_VERSION",
    "site_name": "SITE_NAME",
    "site_title": "SITE_TITLE",
    "host_name": "HOST_NAME",
    "host_title": "HOST_TITLE",
    "run_uuid": "UUID",
    "bi_link": "BI_LINK",
    "bq_link": "BQ_LINK",
    "github_actor": "GITHUB_ACTOR",
    "github_server_url": "GITHUB_SERVER_URL",
    "github_repository": "GITHUB_REPOSITORY",
    "github_run_id": "GITHUB_RUN_ID",
    "github_run_attempt": "GITHUB_RUN_ATTEMPT",
    "github_action": "GITHUB_ACTION",
    "github_event_name": "GITHUB_EVENT_NAME",
    "github_ref": "GITHUB_REF",
    "github_workflow": "GITHUB_WORKFLOW",
}

ENV_MINIMAL: Final[str] = "MSG_MINIMAL"


class ModelNotifierConfig(BaseModel):
    """Immutable snapshot of the notifier's environment.

    Attributes mirror the variables in ``ENV_VARIABLES``; ``minimal`` is
    True only when ``MSG_MINIMAL`` is exactly ``"true"``.

    Example:
        >>> config = ModelNotifierConfig.from_env(
        ...     {"SLACK_WEBHOOK": "https://hooks.example/T/B/X", "MSG_MINIMAL": "true"}
        ... )
        >>> config.minimal
        True
        >>> config.description_text
        'Links to results below'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    webhook_url: str | None = Field(default=None, description="POST target URL.")
    icon_url: str | None = None
    icon_emoji: str | None = None
    channel: str | None = None
    username: str | None = None
    title: str | None = None
    message: str | None = None
    description: str | None = None
    color: str | None = None
    minimal: bool = Field(default=False, description="Collapse to a title/message pair.")
    pull_request_url: str | None = None
    pse_url: str | None = None
    pse_ip: str | None = None
    pse_version: str | None = None
    site_name: str | None = None
    site_title: str | None = None
    host_name: str | None = None
    host_title: str | None = None
    run_uuid: str | None = None
    bi_link: str | None = None
    bq_link: str | None = None
    github_actor: str | None = None
    github_server_url: str | None = None
    github_repository: str | None = None
    github_run_id: str | None = None
    github_run_attempt: str | None = None
    github_action: str | None = None
    github_event_name: str | None = None
    github_ref: str | None = None
    github_workflow: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ModelNotifierConfig:
        """Create config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            ModelNotifierConfig populated from the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {
            field: env.get(variable) for field, variable in ENV_VARIABLES.items()
        }
        values["minimal"] = env.get(ENV_MINIMAL) == "true"
        return cls(**values)

    @property
    def description_text(self) -> str:
        """SLACK_DESCRIPTION, or the default when the variable is unset."""
        return DEFAULT_DESCRIPTION if self.description is None else self.description

    @property
    def color_value(self) -> str:
        """SLACK_COLOR, or ``"good"`` when the variable is unset."""
        return DEFAULT_COLOR if self.color is None else self.color

    @property
    def actions_url(self) -> str:
        """URL of the current workflow run attempt."""
        return (
            f"{self.github_server_url or ''}/{self.github_repository or ''}"
            f"/actions/runs/{self.github_run_id or ''}"
            f"/attempts/{self.github_run_attempt or ''}"
        )

    @property
    def actor_link(self) -> str | None:
        """GitHub profile URL of the actor, or None without an actor."""
        if not self.github_actor:
            return None
        return _GITHUB_PROFILE_URL + self.github_actor

    @property
    def actor_icon(self) -> str | None:
        """32px GitHub avatar URL of the actor, or None without an actor."""
        link = self.actor_link
        return None if link is None else f"{link}.png?size=32"

    @property
    def fallback_summary(self) -> str:
        """Plain-text run summary used when no explicit message is supplied."""
        pairs = (
            ("GITHUB_ACTION", self.github_action),
            ("GITHUB_ACTOR", self.github_actor),
            ("GITHUB_EVENT_NAME", self.github_event_name),
            ("GITHUB_REF", self.github_ref),
            ("GITHUB_REPOSITORY", self.github_repository),
            ("GITHUB_WORKFLOW", self.github_workflow),
        )
        return "\n".join(f"{name}={value or ''}" for name, value in pairs)

    @property
    def message_or_summary(self) -> str:
        return self.message or self.fallback_summary
