from enum import StrEnum


class DeclarationKind(StrEnum):
    """Explicit declaration shape supplied by the catalogue."""

    UNION = "union"
    INTERFACE = "interface"
