# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Slack Block Kit models.

Only the subset of Block Kit the notifier emits is modelled: header,
section and divider blocks with an optional text object and an optional
image accessory.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ci_slack_notify.enums import EnumBlockType, EnumTextType


class ModelSlackBlockText(BaseModel):
    """Text object carried by a header or section block."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: EnumTextType = Field(..., description="plain_text or mrkdwn.")
    text: str = Field(..., description="Text content.")


class ModelSlackBlockAccessory(BaseModel):
    """Image accessory rendered to the right of a section."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["image"] = "image"
    image_url: str = Field(..., description="Image URL.")
    alt_text: str = Field(..., description="Alternative text for the image.")


class ModelSlackBlock(BaseModel):
    """A single Block Kit display unit.

    Invariants:
        - divider blocks carry neither text nor accessory
        - header blocks carry plain_text text and no accessory
        - section blocks carry text
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: EnumBlockType = Field(..., description="Block type tag.")
    text: ModelSlackBlockText | None = Field(default=None, description="Text payload.")
    accessory: ModelSlackBlockAccessory | None = Field(
        default=None, description="Optional image accessory."
    )

    @model_validator(mode="after")
    def validate_shape(self) -> ModelSlackBlock:
        if self.type is EnumBlockType.DIVIDER:
            if self.text is not None or self.accessory is not None:
                raise ValueError("divider blocks cannot carry text or accessory")
        elif self.text is None:
            raise ValueError(f"{self.type.value} blocks require text")
        elif self.type is EnumBlockType.HEADER:
            if self.text.type is not EnumTextType.PLAIN_TEXT:
                raise ValueError("header blocks require plain_text text")
            if self.accessory is not None:
                raise ValueError("header blocks cannot carry an accessory")
        return self

    @classmethod
    def header(cls, text: str) -> ModelSlackBlock:
        return cls(
            type=EnumBlockType.HEADER,
            text=ModelSlackBlockText(type=EnumTextType.PLAIN_TEXT, text=text),
        )

    @classmethod
    def section(
        cls,
        text: str,
        text_type: EnumTextType = EnumTextType.MARKDOWN,
        accessory: ModelSlackBlockAccessory | None = None,
    ) -> ModelSlackBlock:
        return cls(
            type=EnumBlockType.SECTION,
            text=ModelSlackBlockText(type=text_type, text=text),
            accessory=accessory,
        )

    @classmethod
    def divider(cls) -> ModelSlackBlock:
        return cls(type=EnumBlockType.DIVIDER)


__all__: list[str] = [
    "ModelSlackBlock",
    "ModelSlackBlockAccessory",
    "ModelSlackBlockText",
]
