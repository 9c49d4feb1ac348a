"""Rendering of resolved schemas as TypeScript declarations.

Output layout (see ``render_schema``)::

    /** ... */
    export interface Update { ... }

    export type InputMedia = InputMediaPhoto | InputMediaVideo;

    /** `getUpdates` parameters */
    export interface GetUpdatesParameters { ... }

    export default abstract class AbstractApi {
        abstract getUpdates(parameters?: GetUpdatesParameters): Promise<Update[]>;
    }
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from botapigen.config import GeneratorConfig
from botapigen.enums import DeclarationKind
from botapigen.parser import Schema
from botapigen.types import (
    Field,
    FieldOverride,
    Paragraph,
    ResolvedMethod,
    ResolvedOutput,
    ResolvedType,
    TypeSpec,
)

from .comments import render_description
from .optional import OPTIONAL_MARKER, looks_optional


def apply_override(field: Field, override: FieldOverride | None) -> Field:
    """Merge attribute by attribute: a set override attribute wins."""
    if override is None:
        return field
    return field.model_copy(
        update={
            "type": override.type if override.type is not None else field.type,
            "is_required": (
                override.is_required
                if override.is_required is not None
                else field.is_required
            ),
            "description": (
                override.description
                if override.description is not None
                else field.description
            ),
        }
    )


def is_optional(field: Field, optional_marker: str = OPTIONAL_MARKER) -> bool:
    """Explicitly not required, or described as optional. Either signal suffices."""
    return field.is_required is False or looks_optional(field.description, optional_marker)


def render_field(field: Field, optional_marker: str = OPTIONAL_MARKER) -> str:
    mark = "?" if is_optional(field, optional_marker) else ""
    return (
        f"{render_description(field.description, 1)}"
        f"\t{field.name}{mark}: {field.type};\n"
    )


def render_interface(
    name: str,
    fields: Sequence[Field],
    overrides: Mapping[str, FieldOverride] | None = None,
    optional_marker: str = OPTIONAL_MARKER,
) -> str:
    overrides = overrides or {}
    body = "\n".join(
        render_field(apply_override(field, overrides.get(field.name)), optional_marker)
        for field in fields
    )
    return f"export interface {name} {{\n{body}}}\n"


def render_type(resolved: ResolvedType, optional_marker: str = OPTIONAL_MARKER) -> str:
    spec = resolved.spec
    result = render_description(resolved.output.description)
    declaration = spec.declaration

    if declaration is None:
        return result + render_interface(
            spec.name, resolved.fields, spec.overrides, optional_marker
        )
    if declaration.type == DeclarationKind.UNION:
        return result + f"export type {spec.name} = {' | '.join(declaration.members)};\n"
    return result + render_interface(spec.name, declaration.fields, None, optional_marker)


def render_method_parameters(
    resolved: ResolvedMethod,
    optional_marker: str = OPTIONAL_MARKER,
) -> str | None:
    """Parameter interface of a method, or ``None`` when it takes no parameters."""
    if not resolved.has_parameters:
        return None

    spec = resolved.spec
    parameters = ResolvedType(
        spec=TypeSpec(
            name=spec.parameters_name,
            declaration=spec.declaration,
            overrides=spec.overrides,
        ),
        output=ResolvedOutput(
            fields=resolved.output.fields,
            description=[Paragraph(content=f"`{spec.name}` parameters")],
        ),
    )
    return render_type(parameters, optional_marker)


def render_signature(resolved: ResolvedMethod) -> str:
    spec = resolved.spec
    parameters = (
        f"parameters?: {spec.parameters_name}" if resolved.has_parameters else ""
    )
    return (
        f"{render_description(resolved.output.description, 1)}"
        f"\tabstract {spec.name}({parameters}): Promise<{spec.return_type}>;\n"
    )


def render_methods(methods: Sequence[ResolvedMethod], class_name: str = "AbstractApi") -> str:
    body = "\n".join(render_signature(method) for method in methods)
    return f"export default abstract class {class_name} {{\n{body}}}\n"


def render_schema(schema: Schema, config: GeneratorConfig | None = None) -> str:
    """Types, then parameter interfaces, then the abstract class; one blank line apart."""
    config = config or GeneratorConfig()
    marker = config.optional_marker

    blocks = [render_type(resolved, marker) for resolved in schema.types]
    blocks.extend(
        block
        for block in (render_method_parameters(method, marker) for method in schema.methods)
        if block is not None
    )
    blocks.append(render_methods(schema.methods, config.class_name))
    return "\n".join(blocks)
