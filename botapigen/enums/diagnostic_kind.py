from enum import StrEnum


class DiagnosticKind(StrEnum):
    """Category of a recovered problem reported during a run.

    Only ``EXTRACTION_FAILURE`` marks an entity whose output is incomplete;
    the others describe documentation drift worth a look.
    """

    STRUCTURAL_ANOMALY = "structural_anomaly"
    MISSING_SECTION = "missing_section"
    EXTRACTION_FAILURE = "extraction_failure"
    TYPE_GRAMMAR_AMBIGUITY = "type_grammar_ambiguity"
