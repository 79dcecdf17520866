"""Prompt template for the code analysis request."""

from __future__ import annotations

from ai_code_debugger.models.analysis import AnalysisRequest

OUTPUT_SCHEMA = """{
  "errorType": "Brief error title (max 60 chars) or 'No Errors Found' if code is correct",
  "severity": "critical" | "warning" | "info",
  "rootCause": "Brief root cause explanation (max 100 chars). If no errors, write 'Code is syntactically correct and performs as expected.'",
  "explanationEnglish": "Brief explanation in English (max 150 chars). If no errors, explain what the code does.",
  "explanationHindi": "Brief explanation in Hindi (max 150 chars). If no errors, explain what the code does in Hindi.",
  "fixedCode": "The corrected code or improved version. If no errors, return the same code or suggest minor improvements.",
  "fixExplanation": "Brief fix explanation (max 100 chars). If no errors, write 'No fixes needed' or suggest improvements.",
  "complexity": "Low" | "Medium" | "High",
  "confidence": 85-99 (number),
  "alternatives": [
    {
      "title": "Brief title (max 30 chars)",
      "code": "Alternative code solution or improvement",
      "explanation": "Brief description (max 80 chars)"
    }
  ] (provide EXACTLY 3 alternatives specific to this code),
  "variableSnapshot": {
    "variableName": "value"
  } (extract ACTUAL variables with their values from THIS code),
  "learningResources": [
    {"title": "Resource title (max 50 chars)", "description": "Brief description (max 80 chars)"}
  ] (provide EXACTLY 3 resources relevant to THIS specific code's concepts),
  "learningTip": "Brief learning tip (max 150 chars) relevant to this SPECIFIC code"
}"""

INSTRUCTIONS = """Important:
- Keep ALL text brief to fit UI layout
- ALWAYS provide EXACTLY 3 alternatives relevant to THIS specific code
- ALWAYS provide EXACTLY 3 learning resources relevant to THIS specific code's concepts
- For variableSnapshot, extract ACTUAL variables with their values from THIS code
- Learning resources MUST be specific to the concepts/patterns used in THIS code
- Learning tip MUST be specific to THIS code, not generic advice
- If code has NO errors, still provide improvements and relevant learning resources
- IMPORTANT: Return ONLY valid JSON with no markdown, no explanations, just the JSON object"""


def build_analysis_prompt(request: AnalysisRequest) -> str:
    """Build the instruction sent to the model for ``request``."""
    error_section = f"Error Message: {request.error_message}" if request.error_message else ""

    return f"""You are an expert code debugger. Analyze this {request.language} code and provide a detailed analysis.

Code:
```{request.language}
{request.code}
```

{error_section}

Provide your analysis in the following JSON format:
{OUTPUT_SCHEMA}

{INSTRUCTIONS}"""
