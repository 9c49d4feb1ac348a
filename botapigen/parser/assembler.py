"""Schema assembly: one concurrent extraction task per declared entity.

Usage::

    page = Page.from_file("api.html")
    catalogue = load_catalogue("api.json")

    schema = await SchemaAssembler(page).assemble(catalogue)
    for resolved in schema.types:
        print(resolved.spec.name, len(resolved.fields))
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from botapigen.config import GeneratorConfig
from botapigen.enums import DiagnosticKind
from botapigen.exceptions import ExtractionFailure
from botapigen.types import (
    Catalogue,
    Declaration,
    MethodSpec,
    ResolvedMethod,
    ResolvedOutput,
    ResolvedType,
    TypeSpec,
)

from .context import ExtractionContext
from .diagnostics import Diagnostics
from .page import Page
from .sections import parse_content

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def gather_in_order(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
) -> list[R]:
    """Run *worker* on every item concurrently and wait for all of them.

    Results follow the order of *items*, not completion order.  *worker*
    is expected to handle its own errors; an exception escaping it
    propagates after the remaining tasks finish.
    """
    return list(await asyncio.gather(*(worker(item) for item in items)))


@dataclass
class Schema:
    """Resolved types and methods of one run plus what went wrong on the way."""

    types: list[ResolvedType]
    methods: list[ResolvedMethod]
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class SchemaAssembler:
    def __init__(
        self,
        page: Page,
        config: GeneratorConfig | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self.page = page
        self.config = config or GeneratorConfig()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    async def extract(self, name: str, declaration: Declaration | None = None) -> ResolvedOutput:
        """Extract one section; never raises.

        Entities with an explicit declaration are not looked up at all.  A
        failing extraction is reported and yields an empty field list.
        """
        if declaration is not None:
            return ResolvedOutput()

        ctx = ExtractionContext(
            page=self.page,
            entity=name,
            config=self.config,
            diagnostics=self.diagnostics,
        )
        try:
            return await parse_content(ctx)
        except Exception as exc:
            failure = ExtractionFailure(name, exc)
            self.diagnostics.report(
                DiagnosticKind.EXTRACTION_FAILURE,
                str(failure),
                entity=name,
                exc_info=exc,
            )
            return ResolvedOutput(fields=[])

    async def _resolve_type(self, spec: TypeSpec) -> ResolvedType:
        output = await self.extract(spec.name, spec.declaration)
        return ResolvedType(spec=spec, output=output)

    async def _resolve_method(self, spec: MethodSpec) -> ResolvedMethod:
        output = await self.extract(spec.name, spec.declaration)
        return ResolvedMethod(spec=spec, output=output)

    async def resolve_types(self, specs: Sequence[TypeSpec]) -> list[ResolvedType]:
        return await gather_in_order(specs, self._resolve_type)

    async def resolve_methods(self, specs: Sequence[MethodSpec]) -> list[ResolvedMethod]:
        return await gather_in_order(specs, self._resolve_method)

    async def assemble(self, catalogue: Catalogue) -> Schema:
        types, methods = await asyncio.gather(
            self.resolve_types(catalogue.types),
            self.resolve_methods(catalogue.methods),
        )
        logger.info(
            "Resolved %d type(s) and %d method(s), %d diagnostic(s)",
            len(types),
            len(methods),
            len(self.diagnostics),
        )
        return Schema(types=types, methods=methods, diagnostics=self.diagnostics)
