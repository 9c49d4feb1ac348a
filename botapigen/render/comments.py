from __future__ import annotations

from collections.abc import Sequence

from botapigen.enums import DescriptionKind
from botapigen.types import Description


def description_lines(description: Sequence[Description]) -> list[str | None]:
    """Flatten a description into comment lines.

    ``None`` stands for a blank separator line, emitted between top-level
    items but not after the last one.
    """
    lines: list[str | None] = []
    for index, item in enumerate(description):
        if item.type == DescriptionKind.PARAGRAPH:
            lines.append(item.content)
        elif item.type == DescriptionKind.BLOCKQUOTE:
            lines.extend(
                f"> {line}" if line else ">"
                for line in description_lines(item.items)
            )
        elif item.type == DescriptionKind.LIST:
            lines.extend(f"- {entry}" for entry in item.items)

        if index < len(description) - 1:
            lines.append(None)
    return lines


def render_description(description: Sequence[Description] | None, indent: int = 0) -> str:
    """Render a ``/** ... */`` doc comment; empty string for no description."""
    if not description:
        return ""

    prefix = "\t" * indent
    body = [
        f" * {line}" if line else " *"
        for line in description_lines(description)
    ]
    return "".join(f"{prefix}{line}\n" for line in ["/**", *body, " */"])
