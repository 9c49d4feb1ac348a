from __future__ import annotations

import asyncio
import re

from bs4.element import Tag

from botapigen.enums import DiagnosticKind
from botapigen.types import Blockquote, Description, List, Paragraph

from .context import ExtractionContext
from .markup import parse_text

_LINE_BREAKS = re.compile(r"(?:<br\s*/?>)+")


async def get_paragraphs(ctx: ExtractionContext, node: Tag) -> list[Paragraph]:
    """One ``Paragraph`` per ``<br>``-separated fragment of *node*."""
    content = await ctx.page.inner_html(node)
    return [
        Paragraph(content=parse_text(fragment.strip(), ctx.config.base_url))
        for fragment in _LINE_BREAKS.split(content)
        if fragment.strip()
    ]


async def get_blockquote(ctx: ExtractionContext, node: Tag) -> Blockquote:
    children = await ctx.page.children(node)
    return Blockquote(items=await get_description(ctx, children))


async def get_list(ctx: ExtractionContext, node: Tag) -> List:
    items = await ctx.page.children(node, "li")
    contents = await asyncio.gather(*(ctx.page.inner_html(item) for item in items))
    return List(
        items=[parse_text(content.strip(), ctx.config.base_url) for content in contents],
    )


async def _classify(ctx: ExtractionContext, node: Tag) -> list[Description]:
    tag = await ctx.page.tag_name(node)

    if tag == "p":
        return list(await get_paragraphs(ctx, node))
    if tag == "blockquote":
        return [await get_blockquote(ctx, node)]
    if tag == "ul":
        return [await get_list(ctx, node)]

    markup = await ctx.page.outer_html(node)
    ctx.report(
        DiagnosticKind.STRUCTURAL_ANOMALY,
        f"unexpected <{tag}> block skipped: {markup[:200]}",
    )
    return []


async def get_description(ctx: ExtractionContext, nodes: list[Tag]) -> list[Description]:
    """Classify sibling block nodes into paragraphs, quotes and lists, in order.

    Unknown block tags are reported and contribute nothing; the remaining
    nodes are still processed.
    """
    blocks = await asyncio.gather(*(_classify(ctx, node) for node in nodes))
    return [item for block in blocks for item in block]
