"""Tests for AnalysisNormalizer."""

from typing import Any

import pytest

from ai_code_debugger.core.extractor import build_fallback_record
from ai_code_debugger.core.normalizer import AnalysisNormalizer, project_complexity
from ai_code_debugger.models.analysis import AnalysisRequest


@pytest.fixture
def normalizer() -> AnalysisNormalizer:
    """Create an AnalysisNormalizer instance."""
    return AnalysisNormalizer()


class TestListCompletion:
    """Test that alternatives and resources always have three entries."""

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 4, 7])
    def test_always_three_entries(
        self,
        normalizer: AnalysisNormalizer,
        python_request: AnalysisRequest,
        count: int,
    ) -> None:
        """Test padding and truncation for any supplied count."""
        record = {
            "alternatives": [
                {"title": f"alt {i}", "code": "", "explanation": ""} for i in range(count)
            ],
            "learningResources": [{"title": f"res {i}", "description": ""} for i in range(count)],
        }

        analysis = normalizer.normalize(record, python_request)

        assert len(analysis.alternatives) == 3
        assert len(analysis.learning_resources) == 3

    def test_missing_lists_are_filled(
        self, normalizer: AnalysisNormalizer, python_request: AnalysisRequest
    ) -> None:
        """Test a record with neither list present."""
        analysis = normalizer.normalize({}, python_request)

        assert analysis.alternatives[0].title == "Add Error Handling"
        assert analysis.learning_resources[0].title == "Python Exception Handling"

    def test_non_list_values_are_treated_as_absent(
        self, normalizer: AnalysisNormalizer, python_request: AnalysisRequest
    ) -> None:
        """Test that a malformed list field is replaced by padding."""
        record = {"alternatives": "use a try block", "learningResources": None}

        analysis = normalizer.normalize(record, python_request)

        assert [alt.title for alt in analysis.alternatives] == [
            "Add Error Handling",
            "Add Input Validation",
            "Add Type Checking",
        ]

    def test_one_supplied_alternative_for_python(
        self, normalizer: AnalysisNormalizer, python_request: AnalysisRequest
    ) -> None:
        """Test that padding after one entry uses validation then runtime type checking."""
        record = {"alternatives": [{"title": "Cast", "code": "str(x)", "explanation": "cast"}]}

        analysis = normalizer.normalize(record, python_request)

        assert analysis.alternatives[0].title == "Cast"
        assert analysis.alternatives[1].title == "Add Input Validation"
        assert analysis.alternatives[2].title == "Add Type Checking"
        assert "isinstance" in analysis.alternatives[2].code


class TestVariableSnapshot:
    """Test snapshot resolution."""

    def test_supplied_snapshot_used_verbatim(
        self, normalizer: AnalysisNormalizer, python_request: AnalysisRequest
    ) -> None:
        """Test that a non-empty model snapshot is kept."""
        record = {"variableSnapshot": {"result": "None"}}

        analysis = normalizer.normalize(record, python_request)

        assert analysis.variable_snapshot == {"result": "None"}

    def test_empty_snapshot_is_derived(
        self, normalizer: AnalysisNormalizer, python_request: AnalysisRequest
    ) -> None:
        """Test that an empty model snapshot falls back to derivation."""
        analysis = normalizer.normalize({"variableSnapshot": {}}, python_request)

        assert analysis.variable_snapshot == {"x": "5", "y": "'hello'"}

    def test_snapshot_omitted_when_nothing_found(self, normalizer: AnalysisNormalizer) -> None:
        """Test that no variables produce no snapshot key in the output."""
        request = AnalysisRequest(code="int main() { return 0; }", language="c")

        analysis = normalizer.normalize({}, request)

        assert analysis.variable_snapshot is None
        assert "variableSnapshot" not in analysis.to_dict()


class TestComplexity:
    """Test complexity projection."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Low", None),
            ("Medium", "Complexity: Medium"),
            ("High", "Complexity: High"),
            ("low", "Complexity: low"),
            (None, None),
        ],
    )
    def test_project_complexity(self, value: Any, expected: str | None) -> None:
        """Test that only an exact "Low" is hidden."""
        assert project_complexity(value) == expected


class TestPassthrough:
    """Test fields copied from the record."""

    def test_complete_record(
        self,
        normalizer: AnalysisNormalizer,
        python_request: AnalysisRequest,
        complete_record: dict[str, Any],
    ) -> None:
        """Test that every passthrough field lands in the output."""
        result = normalizer.normalize(complete_record, python_request).to_dict()

        assert result["errorType"] == "Type Error"
        assert result["severity"] == "critical"
        assert result["explanation"] == {
            "english": complete_record["explanationEnglish"],
            "hindi": complete_record["explanationHindi"],
        }
        assert result["rootCause"] == "Adding int and str"
        assert result["suggestedFix"] == {
            "code": complete_record["fixedCode"],
            "explanation": "Convert x to str first",
        }
        assert result["complexity"] == "Complexity: High"
        assert result["confidence"] == 92
        assert result["alternatives"] == complete_record["alternatives"]
        assert result["learningResources"] == complete_record["learningResources"]
        assert result["variableSnapshot"] == {"x": "5", "y": "'hello'"}
        assert result["learningTip"] == complete_record["learningTip"]

    def test_fallback_record(
        self, normalizer: AnalysisNormalizer, python_request: AnalysisRequest
    ) -> None:
        """Test normalizing the fallback record."""
        record = build_fallback_record(python_request.code)

        analysis = normalizer.normalize(record, python_request)

        assert analysis.error_type == "Analysis Error"
        assert analysis.suggested_fix.code == python_request.code
        assert analysis.complexity == "Complexity: Medium"
        assert analysis.confidence == 50
        assert len(analysis.alternatives) == 3
        assert analysis.variable_snapshot == {"x": "5", "y": "'hello'"}
