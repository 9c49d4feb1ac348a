"""Download the reference and regenerate declarations in one go.

Usage:
    python examples/generate_declarations.py AbstractApi.ts
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import botapigen
from botapigen import download_reference, generate, load_catalogue

HERE = Path(__file__).resolve().parent


async def main(output: Path) -> int:
    html = await download_reference()
    result = await generate(html, load_catalogue(HERE / "catalogue.json"))

    output.write_text(result.text, encoding="utf-8")
    for item in result.diagnostics:
        print(item, file=sys.stderr)

    lines = result.text.count("\n")
    print(f"Wrote {output} ({lines} lines, {len(result.diagnostics)} diagnostics)")
    return 1 if result.diagnostics.has_errors else 0


if __name__ == "__main__":
    botapigen.enable_debug()
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("AbstractApi.ts")
    sys.exit(asyncio.run(main(target)))
