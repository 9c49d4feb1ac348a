from .base import SchemaObject
from .declaration import Declaration, InterfaceDeclaration, UnionDeclaration
from .description import Blockquote, Description, List, Paragraph
from .field import Field, FieldOverride, Overrides
from .resolved import ResolvedMethod, ResolvedOutput, ResolvedType
from .spec import Catalogue, MethodSpec, TypeSpec

__all__ = [
    "Blockquote",
    "Catalogue",
    "Declaration",
    "Description",
    "Field",
    "FieldOverride",
    "InterfaceDeclaration",
    "List",
    "MethodSpec",
    "Overrides",
    "Paragraph",
    "ResolvedMethod",
    "ResolvedOutput",
    "ResolvedType",
    "SchemaObject",
    "TypeSpec",
    "UnionDeclaration",
]
