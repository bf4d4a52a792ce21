# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pure assembly services: ordered fields, blocks, attachments, payloads."""

from ci_slack_notify.services.service_field_assembly import (
    FIELD_RULES,
    FieldRule,
    assemble_context_fields,
    assemble_fields,
)
from ci_slack_notify.services.service_message_builder import (
    build_attachment,
    build_blocks,
    build_payload,
    validate_required,
)

__all__: list[str] = [
    "FIELD_RULES",
    "FieldRule",
    "assemble_context_fields",
    "assemble_fields",
    "build_attachment",
    "build_blocks",
    "build_payload",
    "validate_required",
]
