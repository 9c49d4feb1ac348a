from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from .base import SchemaObject


class Paragraph(SchemaObject):
    """One normalized run of text."""

    type: Literal["paragraph"] = "paragraph"
    content: str


class Blockquote(SchemaObject):
    """Nested block, rendered with a ``>`` prefix on each line."""

    type: Literal["blockquote"] = "blockquote"
    items: list[Description] = Field(default_factory=list)


class List(SchemaObject):
    """Unordered sequence of normalized text items."""

    type: Literal["list"] = "list"
    items: list[str] = Field(default_factory=list)


Description = Annotated[
    Union[Paragraph, Blockquote, List],
    Field(discriminator="type"),
]

Blockquote.model_rebuild()
