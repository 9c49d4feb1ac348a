from enum import StrEnum


class DescriptionKind(StrEnum):
    """Block kind of a ``Description`` item."""

    PARAGRAPH = "paragraph"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
