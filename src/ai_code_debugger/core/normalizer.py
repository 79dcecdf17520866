"""Normalization of a loosely typed record into the fixed response shape."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from ai_code_debugger.core.synthesis import (
    RESULT_SIZE,
    derive_snapshot,
    synthesize_alternatives,
    synthesize_resources,
)
from ai_code_debugger.models.analysis import (
    AnalysisRequest,
    Explanation,
    FinalAnalysis,
    LooseAnalysisRecord,
    SuggestedFix,
)
from ai_code_debugger.utils.logging import LogEventNames

log = structlog.get_logger()


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def project_complexity(value: Any) -> str | None:
    """Render the complexity label; "Low" is deliberately hidden."""
    if value is None or value == "Low":
        return None
    return f"Complexity: {value}"


class AnalysisNormalizer:
    """Builds a FinalAnalysis from whatever the model returned.

    Missing alternatives and learning resources are padded to three,
    extras are dropped, and a variable snapshot is derived from the code
    when the model did not supply one. Passthrough fields are copied
    as-is; the fallback record guarantees they exist when parsing failed.

    Example:
        normalizer = AnalysisNormalizer()
        analysis = normalizer.normalize(record, request)
        assert len(analysis.alternatives) == 3
    """

    def normalize(self, record: LooseAnalysisRecord, request: AnalysisRequest) -> FinalAnalysis:
        """Produce the final analysis for ``request`` from ``record``."""
        supplied_alternatives = _as_list(record.get("alternatives"))
        supplied_resources = _as_list(record.get("learningResources"))

        alternatives = synthesize_alternatives(
            request.code, request.language, supplied_alternatives
        )
        resources = synthesize_resources(request.language, request.code, supplied_resources)

        if len(supplied_alternatives) < RESULT_SIZE or len(supplied_resources) < RESULT_SIZE:
            log.debug(
                LogEventNames.RESULT_PADDED,
                alternatives_supplied=len(supplied_alternatives),
                resources_supplied=len(supplied_resources),
            )

        return FinalAnalysis(
            error_type=record.get("errorType"),
            severity=record.get("severity"),
            explanation=Explanation(
                english=record.get("explanationEnglish"),
                hindi=record.get("explanationHindi"),
            ),
            root_cause=record.get("rootCause"),
            suggested_fix=SuggestedFix(
                code=record.get("fixedCode"),
                explanation=record.get("fixExplanation"),
            ),
            complexity=project_complexity(record.get("complexity")),
            confidence=record.get("confidence"),
            alternatives=tuple(alternatives),
            learning_resources=tuple(resources),
            learning_tip=record.get("learningTip"),
            variable_snapshot=self.resolve_snapshot(record, request),
        )

    def resolve_snapshot(
        self, record: LooseAnalysisRecord, request: AnalysisRequest
    ) -> dict[str, Any] | None:
        """Use the model's snapshot if it has entries, else derive one.

        Returns None when neither source yields any variable.
        """
        supplied = record.get("variableSnapshot")
        if isinstance(supplied, Mapping) and supplied:
            return {str(name): value for name, value in supplied.items()}

        derived = derive_snapshot(request.code, request.language)
        return derived or None
