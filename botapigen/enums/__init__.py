from .declaration_kind import DeclarationKind
from .description_kind import DescriptionKind
from .diagnostic_kind import DiagnosticKind

__all__ = [
    "DeclarationKind",
    "DescriptionKind",
    "DiagnosticKind",
]
