from .assembler import Schema, SchemaAssembler, gather_in_order
from .blocks import get_description
from .context import ExtractionContext
from .diagnostics import Diagnostic, Diagnostics
from .markup import parse_text
from .page import Page
from .sections import parse_content
from .tables import get_fields
from .type_expr import is_ambiguous, parse_type

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "ExtractionContext",
    "Page",
    "Schema",
    "SchemaAssembler",
    "gather_in_order",
    "get_description",
    "get_fields",
    "is_ambiguous",
    "parse_content",
    "parse_text",
    "parse_type",
]
