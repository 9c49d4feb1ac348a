from __future__ import annotations

from pydantic import Field as ModelField

from botapigen.enums import DeclarationKind

from .base import SchemaObject
from .description import Description
from .field import Field
from .spec import MethodSpec, TypeSpec


class ResolvedOutput(SchemaObject):
    """What extraction produced for one section.

    ``fields`` is ``None`` when the section has no field table at all,
    and an empty list when it has one without rows.
    """

    fields: list[Field] | None = None
    description: list[Description] = ModelField(default_factory=list)


class _Resolved(SchemaObject):
    output: ResolvedOutput = ModelField(default_factory=ResolvedOutput)

    def _fields(self, spec: TypeSpec | MethodSpec) -> list[Field]:
        declaration = spec.declaration
        if declaration is not None and declaration.type == DeclarationKind.INTERFACE:
            return declaration.fields
        return self.output.fields or []


class ResolvedType(_Resolved):
    spec: TypeSpec

    @property
    def fields(self) -> list[Field]:
        return self._fields(self.spec)


class ResolvedMethod(_Resolved):
    spec: MethodSpec

    @property
    def fields(self) -> list[Field]:
        return self._fields(self.spec)

    @property
    def has_parameters(self) -> bool:
        """A parameter object exists for a union declaration or a non-empty field list."""
        declaration = self.spec.declaration
        if declaration is not None and declaration.type == DeclarationKind.UNION:
            return True
        return bool(self.fields)
