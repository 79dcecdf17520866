"""Data models and transfer objects."""

from .analysis import (
    Alternative,
    AnalysisRequest,
    Explanation,
    FinalAnalysis,
    LearningResource,
    LooseAnalysisRecord,
    SuggestedFix,
)

__all__ = [
    # Request
    "AnalysisRequest",
    # Result models
    "Alternative",
    "Explanation",
    "FinalAnalysis",
    "LearningResource",
    "LooseAnalysisRecord",
    "SuggestedFix",
]
