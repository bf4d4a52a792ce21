# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Ordered field assembly for CI notifications.

Fields are produced by a fixed tuple of rules. Each rule pairs a
predicate over the configuration with a builder returning zero or more
fields; rules are evaluated top to bottom and their output concatenated,
so a rule's position in ``FIELD_RULES`` is its position in the message:

    1. site/host pair        (HOST_NAME set)
    2. Pull Request URL      (PULL_REQUEST_URL set)
    3. PSE URL               (PSE_URL set)
    4. PSE IP                (PSE_IP set)
    5. mandatory run fields  (Actions URL, PSE Version, title/message)

Minimal mode bypasses the rules and yields the single title/message field.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from ci_slack_notify.models import ModelNotifierConfig, ModelSlackField

__all__: list[str] = [
    "CONTEXT_FIELD_RULES",
    "FIELD_RULES",
    "FieldRule",
    "assemble_context_fields",
    "assemble_fields",
]


class FieldRule(NamedTuple):
    """A named (predicate, builder) pair."""

    name: str
    applies: Callable[[ModelNotifierConfig], bool]
    build: Callable[[ModelNotifierConfig], list[ModelSlackField]]


def _title_message_field(config: ModelNotifierConfig) -> ModelSlackField:
    return ModelSlackField(
        title=config.title or "",
        value=config.message or "",
        short=False,
    )


def _site_host_fields(config: ModelNotifierConfig) -> list[ModelSlackField]:
    return [
        ModelSlackField(
            title=config.site_title or "", value=config.site_name or "", short=True
        ),
        ModelSlackField(
            title=config.host_title or "", value=config.host_name or "", short=True
        ),
    ]


def _labelled(
    title: str, attribute: str
) -> Callable[[ModelNotifierConfig], list[ModelSlackField]]:
    def build(config: ModelNotifierConfig) -> list[ModelSlackField]:
        return [ModelSlackField(title=title, value=getattr(config, attribute) or "")]

    return build


def _is_set(attribute: str) -> Callable[[ModelNotifierConfig], bool]:
    return lambda config: bool(getattr(config, attribute))


def _run_fields(config: ModelNotifierConfig) -> list[ModelSlackField]:
    return [
        ModelSlackField(title="Actions URL", value=config.actions_url),
        ModelSlackField(title="PSE Version", value=config.pse_version or ""),
        _title_message_field(config),
    ]


# Conditional fields that describe where and what ran.
CONTEXT_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("site_host", _is_set("host_name"), _site_host_fields),
    FieldRule(
        "pull_request_url",
        _is_set("pull_request_url"),
        _labelled("Pull Request URL", "pull_request_url"),
    ),
    FieldRule("pse_url", _is_set("pse_url"), _labelled("PSE URL", "pse_url")),
    FieldRule("pse_ip", _is_set("pse_ip"), _labelled("PSE IP", "pse_ip")),
)

FIELD_RULES: tuple[FieldRule, ...] = (
    *CONTEXT_FIELD_RULES,
    FieldRule("run", lambda config: True, _run_fields),
)


def _collect(
    rules: tuple[FieldRule, ...], config: ModelNotifierConfig
) -> list[ModelSlackField]:
    fields: list[ModelSlackField] = []
    for rule in rules:
        if rule.applies(config):
            fields.extend(rule.build(config))
    return fields


def assemble_context_fields(config: ModelNotifierConfig) -> list[ModelSlackField]:
    """Return the conditional site/host, pull request and PSE fields.

    Empty in minimal mode.
    """
    if config.minimal:
        return []
    return _collect(CONTEXT_FIELD_RULES, config)


def assemble_fields(config: ModelNotifierConfig) -> list[ModelSlackField]:
    """Return the full ordered field list for an attachment.

    Args:
        config: Notifier configuration

    Returns:
        Exactly one title/message field in minimal mode, otherwise the
        concatenated output of ``FIELD_RULES``.
    """
    if config.minimal:
        return [_title_message_field(config)]
    return _collect(FIELD_RULES, config)
