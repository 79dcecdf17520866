"""Core business logic components.

- ResponseExtractor: Locates and repairs the JSON object in a model response
- AnalysisNormalizer: Pads and projects the record into the final shape
- CodeDebugger: Orchestrates validation, the model call and both stages
"""

from ai_code_debugger.core.debugger import CodeDebugger, analyze_code
from ai_code_debugger.core.extractor import ResponseExtractor, build_fallback_record
from ai_code_debugger.core.normalizer import AnalysisNormalizer
from ai_code_debugger.core.synthesis import (
    derive_snapshot,
    synthesize_alternatives,
    synthesize_resources,
)

__all__ = [
    "AnalysisNormalizer",
    "CodeDebugger",
    "ResponseExtractor",
    "analyze_code",
    "build_fallback_record",
    "derive_snapshot",
    "synthesize_alternatives",
    "synthesize_resources",
]
