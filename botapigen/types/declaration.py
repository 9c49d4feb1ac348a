from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field as ModelField

from .base import SchemaObject
from .field import Field


class UnionDeclaration(SchemaObject):
    """Closed set of named alternatives, e.g. ``InputMedia``."""

    type: Literal["union"] = "union"
    members: list[str] = ModelField(default_factory=list)


class InterfaceDeclaration(SchemaObject):
    """Fully specified shape that bypasses extraction."""

    type: Literal["interface"] = "interface"
    fields: list[Field] = ModelField(default_factory=list)


Declaration = Annotated[
    Union[UnionDeclaration, InterfaceDeclaration],
    ModelField(discriminator="type"),
]
