from __future__ import annotations

import pydantic

from .base import SchemaObject
from .description import Description


class Field(SchemaObject):
    """A documented attribute of an entity or parameter of a method.

    Attributes:
        name: Attribute name exactly as documented (e.g. ``"chat_id"``).
        type: Normalized type expression (e.g. ``"number | string"``).
        is_required: ``True``/``False`` when the table has a *Required*
            column, ``None`` when it does not (required-ness unknown).
        description: Description paragraphs from the table cell.
    """

    name: str
    type: str
    is_required: bool | None = pydantic.Field(default=None, alias="isRequired")
    description: list[Description] = pydantic.Field(default_factory=list)


class FieldOverride(SchemaObject):
    """Partial correction of one field; unset attributes keep the scraped value."""

    type: str | None = None
    is_required: bool | None = pydantic.Field(default=None, alias="isRequired")
    description: list[Description] | None = None


Overrides = dict[str, FieldOverride]
