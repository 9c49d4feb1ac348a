from __future__ import annotations

import asyncio
import logging

from bs4.element import Tag

from botapigen.enums import DiagnosticKind
from botapigen.types import Field

from .blocks import get_paragraphs
from .context import ExtractionContext
from .type_expr import is_ambiguous, parse_type

logger = logging.getLogger(__name__)


async def _get_field(ctx: ExtractionContext, row: Tag) -> Field | None:
    cells: list[Tag | None] = list(await ctx.page.children(row, "td"))

    # Types have no "Required" column: keep the columns aligned and leave
    # required-ness unknown instead of false.
    if len(cells) == 3:
        cells.insert(2, None)
    elif len(cells) != 4:
        if cells:
            ctx.report(
                DiagnosticKind.STRUCTURAL_ANOMALY,
                f"table row with {len(cells)} cells skipped",
            )
        return None

    name_cell, type_cell, required_cell, description_cell = cells

    name, raw_type, description = await asyncio.gather(
        ctx.page.text(name_cell),
        ctx.page.inner_html(type_cell),
        get_paragraphs(ctx, description_cell),
    )

    is_required: bool | None = None
    if required_cell is not None:
        is_required = (await ctx.page.text(required_cell)).strip() == ctx.config.required_marker

    type_expr = parse_type(raw_type)
    if is_ambiguous(raw_type):
        ctx.report(
            DiagnosticKind.TYPE_GRAMMAR_AMBIGUITY,
            f"{name.strip()}: {raw_type.strip()!r} read as {type_expr!r}",
        )

    return Field(
        name=name.strip(),
        type=type_expr,
        is_required=is_required,
        description=description,
    )


async def get_fields(ctx: ExtractionContext, table: Tag | None) -> list[Field] | None:
    """One ``Field`` per table row, in row order; ``None`` without a table."""
    if table is None:
        return None

    rows = await ctx.page.rows(table)
    parsed = await asyncio.gather(*(_get_field(ctx, row) for row in rows))

    fields: list[Field] = []
    seen: set[str] = set()
    for field in parsed:
        if field is None:
            continue
        if field.name in seen:
            ctx.report(
                DiagnosticKind.STRUCTURAL_ANOMALY,
                f"duplicate field {field.name!r} skipped",
            )
            continue
        seen.add(field.name)
        fields.append(field)

    logger.debug("%s: %d field(s)", ctx.entity, len(fields))
    return fields
