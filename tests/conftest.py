"""Shared test fixtures for AI Code Debugger."""

import json
from typing import Any

import pytest

from ai_code_debugger.models.analysis import AnalysisRequest


class FakeLLM:
    """In-memory LLMProvider returning a canned response or raising."""

    def __init__(self, response: str = "", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    @property
    def model_name(self) -> str:
        return "fake-model"

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def python_request() -> AnalysisRequest:
    """A Python snippet with a type error."""
    return AnalysisRequest(
        code="x = 5\ny = 'hello'\nprint(x + y)",
        language="python",
        error_message="TypeError: unsupported operand type(s) for +: 'int' and 'str'",
    )


@pytest.fixture
def javascript_request() -> AnalysisRequest:
    """A JavaScript snippet reading a property of undefined."""
    return AnalysisRequest(
        code="const user = undefined;\nlet name = user.name;\nconsole.log(name);",
        language="javascript",
    )


@pytest.fixture
def complete_record() -> dict[str, Any]:
    """A well-formed model record with every field populated."""
    return {
        "errorType": "Type Error",
        "severity": "critical",
        "rootCause": "Adding int and str",
        "explanationEnglish": "You cannot add a number to a string.",
        "explanationHindi": "आप संख्या को स्ट्रिंग में नहीं जोड़ सकते।",
        "fixedCode": "x = 5\ny = 'hello'\nprint(str(x) + y)",
        "fixExplanation": "Convert x to str first",
        "complexity": "High",
        "confidence": 92,
        "alternatives": [
            {"title": "Use f-string", "code": "print(f'{x}{y}')", "explanation": "Formats both"},
            {"title": "Use format", "code": "print('{}{}'.format(x, y))", "explanation": "Old"},
            {"title": "Use join", "code": "print(''.join([str(x), y]))", "explanation": "Join"},
        ],
        "variableSnapshot": {"x": "5", "y": "'hello'"},
        "learningResources": [
            {"title": "Python Types", "description": "Built-in types"},
            {"title": "String Formatting", "description": "f-strings"},
            {"title": "TypeError", "description": "When it is raised"},
        ],
        "learningTip": "Convert types explicitly before combining them.",
    }


@pytest.fixture
def complete_response(complete_record: dict[str, Any]) -> str:
    """Model text containing the complete record as pure JSON."""
    return json.dumps(complete_record, ensure_ascii=False)


@pytest.fixture
def fake_llm(complete_response: str) -> FakeLLM:
    """A fake provider returning the complete response."""
    return FakeLLM(response=complete_response)


@pytest.fixture
def llm_factory() -> type[FakeLLM]:
    """Return the FakeLLM class for tests that need a custom response or error."""
    return FakeLLM
