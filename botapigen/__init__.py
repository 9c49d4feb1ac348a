"""
botapigen - Typed declarations generated from the Bot API HTML reference.

Usage::

    import asyncio
    from pathlib import Path

    from botapigen import generate, load_catalogue

    async def main():
        html = Path("api.html").read_text(encoding="utf-8")
        result = await generate(html, load_catalogue("api.json"))
        Path("AbstractApi.ts").write_text(result.text, encoding="utf-8")

    asyncio.run(main())
"""

import logging

from botapigen.__meta__ import __version__
from botapigen.catalogue import load_catalogue
from botapigen.client.downloader import download_reference
from botapigen.config import GeneratorConfig
from botapigen.generator import GenerationResult, generate
from botapigen.parser.assembler import SchemaAssembler
from botapigen.parser.page import Page

logging.getLogger("botapigen").addHandler(logging.NullHandler())


def enable_debug() -> None:
    """Enable DEBUG logging for all botapigen components.

    Adds a StreamHandler with a timestamped formatter to the
    ``botapigen`` logger.  Call once at startup::

        import botapigen
        botapigen.enable_debug()
    """
    logger = logging.getLogger("botapigen")
    logger.setLevel(logging.DEBUG)
    if not any(
        isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.NullHandler)
        for h in logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)


__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "Page",
    "SchemaAssembler",
    "__version__",
    "download_reference",
    "enable_debug",
    "generate",
    "load_catalogue",
]
