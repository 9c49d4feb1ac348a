from __future__ import annotations

from dataclasses import dataclass, field

from botapigen.config import GeneratorConfig
from botapigen.enums import DiagnosticKind

from .diagnostics import Diagnostics
from .page import Page


@dataclass
class ExtractionContext:
    """Everything one entity's extraction task needs.

    Attributes:
        page: Document being read.
        entity: Name of the type or method whose section is extracted.
        config: Markers, tags and the link base.
        diagnostics: Collector shared by the whole run.
    """

    page: Page
    entity: str
    config: GeneratorConfig = field(default_factory=GeneratorConfig)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def report(self, kind: DiagnosticKind, message: str) -> None:
        self.diagnostics.report(kind, message, entity=self.entity)
