"""Per-run collector of recovered problems.

Extraction never raises out of the batch.  Whatever it had to skip or
guess is recorded here instead, and the caller decides what to do
with it (print it, fail a ``--strict`` run, ignore it)::

    diagnostics = Diagnostics()
    schema = await SchemaAssembler(page, diagnostics=diagnostics).assemble(catalogue)
    for item in diagnostics.by_kind(DiagnosticKind.MISSING_SECTION):
        print(item)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from botapigen.enums import DiagnosticKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    entity: str | None = None

    def __str__(self) -> str:
        if self.entity:
            return f"[{self.kind}] {self.entity}: {self.message}"
        return f"[{self.kind}] {self.message}"


class Diagnostics:
    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        *,
        entity: str | None = None,
        exc_info: BaseException | None = None,
    ) -> Diagnostic:
        item = Diagnostic(kind=kind, message=message, entity=entity)
        self._items.append(item)
        level = (
            logging.ERROR
            if kind == DiagnosticKind.EXTRACTION_FAILURE
            else logging.WARNING
        )
        logger.log(level, "%s", item, exc_info=exc_info)
        return item

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [item for item in self._items if item.kind == kind]

    @property
    def has_errors(self) -> bool:
        return any(item.kind == DiagnosticKind.EXTRACTION_FAILURE for item in self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
