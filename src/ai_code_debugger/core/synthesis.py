"""Deterministic filler content for incomplete model responses.

The model is asked for exactly three alternatives and three learning
resources but often returns fewer. The helpers here pad those lists from
fixed archetypes and a per-language resource table, and derive a textual
variable snapshot from simple assignments when the model gave none.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from types import MappingProxyType
from typing import Any

from ai_code_debugger.models.analysis import Alternative, LearningResource

RESULT_SIZE = 3

DEFAULT_RESOURCE_LANGUAGE = "javascript"

LANGUAGE_RESOURCES: MappingProxyType[str, tuple[LearningResource, ...]] = MappingProxyType(
    {
        "javascript": (
            LearningResource(
                "JavaScript Error Handling",
                "Learn about try-catch and error handling patterns",
            ),
            LearningResource(
                "JavaScript Best Practices",
                "Modern JavaScript coding standards and patterns",
            ),
            LearningResource("Debugging JavaScript", "Tools and techniques for debugging JS code"),
        ),
        "typescript": (
            LearningResource("TypeScript Type System", "Understanding TypeScript's type checking"),
            LearningResource("TypeScript Best Practices", "Writing type-safe TypeScript code"),
            LearningResource(
                "TypeScript Error Handling",
                "Handling errors in TypeScript applications",
            ),
        ),
        "python": (
            LearningResource("Python Exception Handling", "Learn about Python's try-except blocks"),
            LearningResource("Python Best Practices", "PEP 8 and Python coding standards"),
            LearningResource("Python Debugging", "Using pdb and debugging tools in Python"),
        ),
        "java": (
            LearningResource("Java Exception Handling", "Understanding Java's exception hierarchy"),
            LearningResource("Java Best Practices", "Writing clean and maintainable Java code"),
            LearningResource("Java Debugging", "Using IDE debuggers and logging in Java"),
        ),
        "cpp": (
            LearningResource("C++ Error Handling", "Exception handling and error codes in C++"),
            LearningResource("C++ Best Practices", "Modern C++ coding standards"),
            LearningResource("C++ Debugging", "Using GDB and other C++ debugging tools"),
        ),
        "c": (
            LearningResource("C Error Handling", "Error codes and errno in C programming"),
            LearningResource("C Best Practices", "Writing safe and efficient C code"),
            LearningResource("C Debugging", "Using GDB and Valgrind for C debugging"),
        ),
    }
)

# Language families for snapshot derivation
SCRIPTING_LANGUAGES = frozenset({"python"})
INFERRED_LANGUAGES = frozenset({"javascript", "typescript"})

PYTHON_ASSIGNMENT = re.compile(r"^([A-Za-z_]\w*)[ \t]*=(?!=)[ \t]*(\S[^\n]*)$", re.MULTILINE)
DECLARATION = re.compile(r"\b(?:let|const|var)\s+([A-Za-z_$][\w$]*)\s*=\s*([^;\n]+)")


def _head(code: str, count: int) -> list[str]:
    return code.split("\n")[:count]


def _error_handling_archetype(code: str, language: str) -> Alternative:
    lines = _head(code, 3)
    if language == "python":
        body = "\n    ".join(lines)
        snippet = f"try:\n    {body}\nexcept Exception as error:\n    print(error)"
    else:
        body = "\n  ".join(lines)
        snippet = f"try {{\n  {body}\n}} catch (error) {{\n  console.error(error)\n}}"
    return Alternative(
        title="Add Error Handling",
        code=snippet,
        explanation="Wrap code in try-catch to handle potential errors gracefully",
    )


def _input_validation_archetype(code: str, language: str) -> Alternative:
    head = "\n".join(_head(code, 2))
    if language == "python":
        guard = (
            "# Add validation before processing\n"
            "if data is None:\n"
            "    raise ValueError('Invalid input')"
        )
    else:
        guard = (
            "// Add validation before processing\n"
            "if (input === null || input === undefined) {\n"
            "  throw new Error('Invalid input')\n"
            "}"
        )
    return Alternative(
        title="Add Input Validation",
        code=f"{guard}\n{head}",
        explanation="Validate inputs before processing to prevent runtime errors",
    )


def _type_checking_archetype(code: str, language: str) -> Alternative:
    if language == "typescript":
        snippet = (
            "// Use TypeScript types\n"
            "function processData(data: string[]): void {\n"
            "  // Implementation\n"
            "}"
        )
    elif language == "python":
        snippet = (
            "# Add runtime type checking\n"
            "if not isinstance(data, list):\n"
            "    raise TypeError('Expected list')"
        )
    else:
        snippet = (
            "// Add runtime type checking\n"
            "if (typeof data !== 'object') {\n"
            "  throw new TypeError('Expected array')\n"
            "}"
        )
    return Alternative(
        title="Add Type Checking",
        code=snippet,
        explanation="Add type checking to catch type-related errors early",
    )


ARCHETYPES = (
    _error_handling_archetype,
    _input_validation_archetype,
    _type_checking_archetype,
)


def synthesize_alternatives(
    code: str,
    language: str,
    existing: Sequence[Any] = (),
) -> list[Alternative]:
    """Pad ``existing`` to exactly three alternatives.

    Archetypes fill the slots from ``len(existing)`` onward, so one
    existing entry is followed by input validation and type checking.

    Args:
        code: Submitted code the archetypes are built from.
        language: Declared language of the code.
        existing: Alternatives the model already supplied.

    Returns:
        Exactly three alternatives.
    """
    language = language.strip().lower()
    alternatives = [Alternative.from_entry(entry) for entry in existing[:RESULT_SIZE]]
    while len(alternatives) < RESULT_SIZE:
        alternatives.append(ARCHETYPES[len(alternatives)](code, language))
    return alternatives


def synthesize_resources(
    language: str,
    code: str,
    existing: Sequence[Any] = (),
) -> list[LearningResource]:
    """Pad ``existing`` to exactly three learning resources.

    Unknown languages use the JavaScript table.
    """
    table = LANGUAGE_RESOURCES.get(
        language.strip().lower(), LANGUAGE_RESOURCES[DEFAULT_RESOURCE_LANGUAGE]
    )
    resources = [LearningResource.from_entry(entry) for entry in existing[:RESULT_SIZE]]
    while len(resources) < RESULT_SIZE:
        resources.append(table[len(resources)])
    return resources


def derive_snapshot(code: str, language: str) -> dict[str, str]:
    """Read variable assignments out of the code as text.

    Python uses top-level ``name = value`` lines; JavaScript and TypeScript
    use ``let``/``const``/``var`` declarations. The value is the right-hand
    side as written, not an evaluated result. Later assignments win.
    """
    language = language.strip().lower()
    if language in SCRIPTING_LANGUAGES:
        pattern = PYTHON_ASSIGNMENT
    elif language in INFERRED_LANGUAGES:
        pattern = DECLARATION
    else:
        return {}

    snapshot: dict[str, str] = {}
    for match in pattern.finditer(code):
        snapshot[match.group(1)] = match.group(2).strip()
    return snapshot
