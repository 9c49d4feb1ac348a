from __future__ import annotations

from collections.abc import Sequence

from botapigen.config import GeneratorConfig
from botapigen.enums import DescriptionKind
from botapigen.types import Description

OPTIONAL_MARKER: str = GeneratorConfig.model_fields["optional_marker"].default


def looks_optional(
    description: Sequence[Description] | None,
    marker: str = OPTIONAL_MARKER,
) -> bool:
    """True when the leading paragraph says the field is optional.

    The reference only states optionality in prose ("_Optional_. ..."),
    so this is a text match, not a structured flag.
    """
    if not description:
        return False
    first = description[0]
    return first.type == DescriptionKind.PARAGRAPH and marker in first.content
