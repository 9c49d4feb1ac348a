"""Read-only async view over the reference document.

Every query is a coroutine so that extraction code is written against
the same interface whether the document lives in memory (``Page`` over
BeautifulSoup) or behind a slower backend.  Nodes are plain
``bs4.Tag`` objects borrowed from the tree and never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from botapigen.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


class Page:
    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> Page:
        return cls(BeautifulSoup(html, "html.parser"))

    @classmethod
    def from_file(cls, path: str | Path) -> Page:
        path = Path(path)
        try:
            html = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentLoadError(str(path), str(exc)) from exc
        logger.debug("Loaded %s (%d chars)", path, len(html))
        return cls.from_html(html)

    # ── node queries ──────────────────────────────────────────────────

    async def children(self, node: Tag, name: str | None = None) -> list[Tag]:
        """Direct element children, optionally only those named *name*."""
        return [
            child
            for child in node.children
            if isinstance(child, Tag) and (name is None or child.name == name)
        ]

    async def rows(self, table: Tag) -> list[Tag]:
        """Body rows of a table (``tbody > tr``, or ``tr`` when there is no tbody)."""
        bodies = await self.children(table, "tbody")
        if not bodies:
            return await self.children(table, "tr")
        rows: list[Tag] = []
        for body in bodies:
            rows.extend(await self.children(body, "tr"))
        return rows

    async def tag_name(self, node: Tag) -> str:
        return node.name.lower()

    async def inner_html(self, node: Tag) -> str:
        return node.decode_contents()

    async def outer_html(self, node: Tag) -> str:
        return str(node)

    async def text(self, node: Tag) -> str:
        return node.get_text()

    # ── section queries ───────────────────────────────────────────────

    async def find_heading(self, name: str, tag: str = "h4") -> Tag | None:
        """First *tag* element whose text equals *name*."""
        for heading in self.soup.find_all(tag):
            if heading.get_text().strip() == name:
                return heading
        return None

    async def section(
        self,
        heading: Tag,
        boundary_tags: Iterable[str] = ("h3", "h4", "hr"),
    ) -> list[Tag]:
        """Sibling elements between *heading* and the next boundary element.

        A heading with no boundary after it yields an empty section.
        """
        boundaries = set(boundary_tags)
        nodes: list[Tag] = []
        for sibling in heading.next_siblings:
            if not isinstance(sibling, Tag):
                continue
            if sibling.name in boundaries:
                return nodes
            nodes.append(sibling)
        return []
