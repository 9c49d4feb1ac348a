from __future__ import annotations

import logging
from dataclasses import dataclass

from botapigen.config import GeneratorConfig
from botapigen.parser import Diagnostics, Page, SchemaAssembler
from botapigen.render import render_schema
from botapigen.types import Catalogue

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    text: str
    diagnostics: Diagnostics


async def generate(
    html: str | Page,
    catalogue: Catalogue,
    config: GeneratorConfig | None = None,
) -> GenerationResult:
    """Extract every catalogue entity from *html* and render the declarations.

    Usage::

        html = Path("api.html").read_text(encoding="utf-8")
        result = await generate(html, load_catalogue("api.json"))
        print(result.text)
        if result.diagnostics.has_errors:
            ...
    """
    config = config or GeneratorConfig()
    page = html if isinstance(html, Page) else Page.from_html(html)

    assembler = SchemaAssembler(page, config=config)
    schema = await assembler.assemble(catalogue)
    text = render_schema(schema, config)

    logger.debug("Rendered %d chars", len(text))
    return GenerationResult(text=text, diagnostics=schema.diagnostics)
