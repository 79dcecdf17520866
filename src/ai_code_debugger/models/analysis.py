"""Data models for code analysis requests and results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..utils.errors import InvalidRequestError

# Loosely typed record parsed from a model response. Any key may be absent.
LooseAnalysisRecord = dict[str, Any]


@dataclass(frozen=True)
class AnalysisRequest:
    """Code snippet submitted for analysis."""

    code: str
    language: str
    error_message: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AnalysisRequest":
        """Build a request from a JSON-style payload.

        Accepts ``errorMessage`` or ``error_message`` for the optional error.

        Raises:
            InvalidRequestError: If code or language is missing or blank.
        """
        error_message = payload.get("errorMessage", payload.get("error_message"))
        request = cls(
            code=payload.get("code") or "",
            language=payload.get("language") or "",
            error_message=error_message or None,
        )
        request.validate()
        return request

    def validate(self) -> None:
        """Reject requests without code or language.

        Raises:
            InvalidRequestError: If code or language is missing or blank.
        """
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidRequestError("Code and language are required")
        if not isinstance(self.language, str) or not self.language.strip():
            raise InvalidRequestError("Code and language are required")

    @property
    def language_key(self) -> str:
        """Lower-cased language identifier used for table lookups."""
        return self.language.strip().lower()


@dataclass(frozen=True)
class Explanation:
    """Bilingual explanation of the problem."""

    english: Any
    hindi: Any


@dataclass(frozen=True)
class SuggestedFix:
    """Corrected code with a short rationale."""

    code: Any
    explanation: Any


_SYNTHESIZED = object()


def _render_source(source: Any) -> Any:
    return dict(source) if isinstance(source, Mapping) else source


@dataclass(frozen=True)
class Alternative:
    """An alternative implementation of the submitted code.

    Entries the model supplied keep their original value in ``source`` and
    render back unchanged; only synthesized entries use the three fields.
    """

    title: Any
    code: Any
    explanation: Any
    source: Any = field(default=_SYNTHESIZED, compare=False, repr=False)

    @classmethod
    def from_entry(cls, entry: Any) -> "Alternative":
        """Wrap a model-supplied entry without validating it."""
        if isinstance(entry, Alternative):
            return entry
        if isinstance(entry, Mapping):
            return cls(
                title=entry.get("title", ""),
                code=entry.get("code", ""),
                explanation=entry.get("explanation", ""),
                source=entry,
            )
        return cls(title="", code="", explanation="", source=entry)

    def to_dict(self) -> Any:
        if self.source is not _SYNTHESIZED:
            return _render_source(self.source)
        return {"title": self.title, "code": self.code, "explanation": self.explanation}


@dataclass(frozen=True)
class LearningResource:
    """A pointer to material on the concepts used in the code."""

    title: Any
    description: Any
    source: Any = field(default=_SYNTHESIZED, compare=False, repr=False)

    @classmethod
    def from_entry(cls, entry: Any) -> "LearningResource":
        """Wrap a model-supplied entry without validating it."""
        if isinstance(entry, LearningResource):
            return entry
        if isinstance(entry, Mapping):
            return cls(
                title=entry.get("title", ""),
                description=entry.get("description", ""),
                source=entry,
            )
        return cls(title="", description="", source=entry)

    def to_dict(self) -> Any:
        if self.source is not _SYNTHESIZED:
            return _render_source(self.source)
        return {"title": self.title, "description": self.description}


@dataclass(frozen=True)
class FinalAnalysis:
    """Fixed-shape analysis returned to the caller.

    ``alternatives`` and ``learning_resources`` always hold exactly three
    entries. ``complexity`` is None when the model rated the code "Low".
    ``variable_snapshot`` is None when no variables could be found.
    """

    error_type: Any
    severity: Any
    explanation: Explanation
    root_cause: Any
    suggested_fix: SuggestedFix
    complexity: str | None
    confidence: Any
    alternatives: tuple[Alternative, ...]
    learning_resources: tuple[LearningResource, ...]
    learning_tip: Any
    variable_snapshot: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase response shape."""
        result: dict[str, Any] = {
            "errorType": self.error_type,
            "severity": self.severity,
            "explanation": {
                "english": self.explanation.english,
                "hindi": self.explanation.hindi,
            },
            "rootCause": self.root_cause,
            "suggestedFix": {
                "code": self.suggested_fix.code,
                "explanation": self.suggested_fix.explanation,
            },
            "complexity": self.complexity,
            "confidence": self.confidence,
            "alternatives": [alt.to_dict() for alt in self.alternatives],
        }
        if self.variable_snapshot:
            result["variableSnapshot"] = dict(self.variable_snapshot)
        result["learningResources"] = [res.to_dict() for res in self.learning_resources]
        result["learningTip"] = self.learning_tip
        return result
