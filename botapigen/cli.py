"""Command line entry point.

Usage::

    python -m botapigen download -o api.html
    python -m botapigen generate api.html api.json -o AbstractApi.ts
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import botapigen
from botapigen.catalogue import load_catalogue
from botapigen.client import download_reference
from botapigen.config import GeneratorConfig
from botapigen.exceptions import BotAPIGenError
from botapigen.generator import generate
from botapigen.parser import Page

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_EXTRACTION_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="botapigen",
        description="Generate typed Bot API declarations from the HTML reference",
    )
    parser.add_argument("--version", action="version", version=botapigen.__version__)
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--base-url", help="Reference address (env: BOTAPIGEN_BASE_URL)")
    commands = parser.add_subparsers(dest="command", required=True)

    download = commands.add_parser("download", help="Fetch the reference content block")
    download.add_argument("url", nargs="?", help="Page URL (default: --base-url)")
    download.add_argument("-o", "--output", help="Write to file instead of stdout")
    download.add_argument("--timeout", type=float, help="HTTP timeout in seconds")

    gen = commands.add_parser("generate", help="Render declarations from a saved reference")
    gen.add_argument("api_html", help="Saved reference markup")
    gen.add_argument("catalogue", help="Declaration file (JSON)")
    gen.add_argument("-o", "--output", help="Write to file instead of stdout")
    gen.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with {EXIT_EXTRACTION_FAILED} if any entity failed to extract",
    )
    return parser


def _write(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


async def _download(args: argparse.Namespace, config: GeneratorConfig) -> int:
    html = await download_reference(args.url, config=config)
    _write(html, args.output)
    return 0


async def _generate(args: argparse.Namespace, config: GeneratorConfig) -> int:
    page = Page.from_file(args.api_html)
    catalogue = load_catalogue(args.catalogue)

    result = await generate(page, catalogue, config)
    _write(result.text, args.output)

    if args.strict and result.diagnostics.has_errors:
        return EXIT_EXTRACTION_FAILED
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        botapigen.enable_debug()
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    config = GeneratorConfig.from_env(
        base_url=args.base_url,
        timeout=getattr(args, "timeout", None),
    )
    command = _download if args.command == "download" else _generate

    try:
        return asyncio.run(command(args, config))
    except BotAPIGenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
