from __future__ import annotations

import asyncio

from bs4.element import Tag

from botapigen.enums import DiagnosticKind
from botapigen.types import ResolvedOutput

from .blocks import get_description
from .context import ExtractionContext
from .tables import get_fields


async def parse_content(ctx: ExtractionContext) -> ResolvedOutput:
    """Extract fields and description of the section titled ``ctx.entity``.

    A missing heading is reported and yields an empty output: the caller
    decides whether an entity without documentation is acceptable.
    """
    heading = await ctx.page.find_heading(ctx.entity, ctx.config.heading_tag)
    if heading is None:
        ctx.report(DiagnosticKind.MISSING_SECTION, "heading not found")
        return ResolvedOutput()

    nodes = await ctx.page.section(heading, ctx.config.boundary_tags)
    tags = await asyncio.gather(*(ctx.page.tag_name(node) for node in nodes))

    table: Tag | None = None
    blocks: list[Tag] = []
    for node, tag in zip(nodes, tags):
        if tag != "table":
            blocks.append(node)
        elif table is None:
            table = node
        else:
            ctx.report(DiagnosticKind.STRUCTURAL_ANOMALY, "extra field table ignored")

    fields, description = await asyncio.gather(
        get_fields(ctx, table),
        get_description(ctx, blocks),
    )
    return ResolvedOutput(fields=fields, description=description)
