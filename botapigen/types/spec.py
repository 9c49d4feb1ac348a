from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError

from botapigen.exceptions import CatalogueError

from .base import SchemaObject
from .declaration import Declaration
from .field import FieldOverride


class TypeSpec(SchemaObject):
    """A named entity of the reference to resolve.

    When ``declaration`` is set the entity is never looked up in the
    document: the declaration is rendered as is.
    """

    name: str
    declaration: Declaration | None = None
    overrides: dict[str, FieldOverride] = Field(default_factory=dict)


class MethodSpec(SchemaObject):
    """A remote operation. ``return_type`` is read from the ``type`` key."""

    name: str
    return_type: str = Field(alias="type")
    declaration: Declaration | None = None
    overrides: dict[str, FieldOverride] = Field(default_factory=dict)

    @property
    def parameters_name(self) -> str:
        """``sendMessage`` -> ``SendMessageParameters``."""
        return f"{self.name[:1].upper()}{self.name[1:]}Parameters"


class Catalogue(SchemaObject):
    """Contents of the declaration file: every type and method of interest."""

    types: list[TypeSpec] = Field(default_factory=list)
    methods: list[MethodSpec] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, source: str = "<data>") -> Catalogue:
        """Validate in-memory catalogue data.

        Raises:
            CatalogueError: ``data`` does not match the catalogue schema.
                ``source`` names it in the message.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise CatalogueError(source, str(exc)) from exc
