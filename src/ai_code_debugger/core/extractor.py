"""Extraction and repair of the JSON object embedded in a model response.

The model is asked for pure JSON but routinely wraps it in prose or
markdown fences, leaves literal newlines inside string values, emits
Windows paths with bare backslashes, or quotes words inside a value
without escaping them. ResponseExtractor isolates the outermost object,
repairs those three defects, and parses it. When a located object still
fails to parse, the two most useful fields are pulled out of it with
patterns. Either way a fallback record is built so the pipeline always
has something to normalize.
"""

from __future__ import annotations

import json
import re
from typing import Any

import structlog

from ai_code_debugger.models.analysis import LooseAnalysisRecord
from ai_code_debugger.utils.errors import NoJsonFoundError
from ai_code_debugger.utils.logging import LogEventNames
from ai_code_debugger.utils.security import sanitize_for_logging

log = structlog.get_logger()

FALLBACK_ERROR_TYPE = "Analysis Error"
FALLBACK_ROOT_CAUSE = "Could not parse AI response"
FALLBACK_EXPLANATION_ENGLISH = "Error analyzing code"
FALLBACK_EXPLANATION_HINDI = "कोड का विश्लेषण करने में त्रुटि"
FALLBACK_FIX_EXPLANATION = "Please review the code manually"
FALLBACK_LEARNING_TIP = "Use console.log to debug"
FALLBACK_CONFIDENCE = 50


def build_fallback_record(
    code: str,
    error_type: str | None = None,
    root_cause: str | None = None,
) -> LooseAnalysisRecord:
    """Build the minimal safe record used when the response cannot be parsed.

    Args:
        code: The submitted code, returned unchanged as the "fix".
        error_type: Error type recovered from the raw response, if any.
        root_cause: Root cause recovered from the raw response, if any.

    Returns:
        A record with every field the normalizer passes through.
    """
    return {
        "errorType": error_type or FALLBACK_ERROR_TYPE,
        "severity": "warning",
        "explanationEnglish": FALLBACK_EXPLANATION_ENGLISH,
        "explanationHindi": FALLBACK_EXPLANATION_HINDI,
        "rootCause": root_cause or FALLBACK_ROOT_CAUSE,
        "fixedCode": code,
        "fixExplanation": FALLBACK_FIX_EXPLANATION,
        "complexity": "Medium",
        "confidence": FALLBACK_CONFIDENCE,
        "alternatives": [],
        "variableSnapshot": {},
        "learningResources": [],
        "learningTip": FALLBACK_LEARNING_TIP,
    }


class ResponseExtractor:
    """Turns raw model text into a loosely typed analysis record.

    Example:
        extractor = ResponseExtractor()
        record = extractor.extract(model_text, code=request.code)
        print(record.get("errorType"))
    """

    CONTROL_CHARS = re.compile(r"[\n\r\t]")
    # A valid escape pair, or a lone backslash that needs doubling
    BACKSLASH = re.compile(r'\\(["\\/bfnrtu])|\\')
    CLOSING_FOLLOWERS = frozenset(",:}]")

    def extract(self, raw_text: str, code: str = "") -> LooseAnalysisRecord:
        """Extract a record from raw model text. Never raises.

        Args:
            raw_text: Untrusted text returned by the model.
            code: Submitted code, used by the fallback record.

        Returns:
            The parsed mapping, or a fallback record if parsing fails.
        """
        try:
            candidate = self.find_json_candidate(raw_text)
        except NoJsonFoundError as e:
            log.warning(
                LogEventNames.JSON_EXTRACTION_FAILED,
                reason=e.kind.value,
                preview=sanitize_for_logging(raw_text or ""),
            )
            return build_fallback_record(code)

        sanitized = self.sanitize(candidate)
        try:
            parsed: Any = json.loads(sanitized)
        except json.JSONDecodeError as e:
            log.warning(
                LogEventNames.JSON_EXTRACTION_FAILED,
                reason="parse_error",
                error=str(e),
                preview=sanitize_for_logging(candidate),
            )
            return self._fallback(candidate, code)

        if not isinstance(parsed, dict):
            log.warning(
                LogEventNames.JSON_EXTRACTION_FAILED,
                reason="not_an_object",
                parsed_type=type(parsed).__name__,
            )
            return self._fallback(candidate, code)

        log.debug(LogEventNames.JSON_EXTRACTED, fields=sorted(parsed))
        return parsed

    def find_json_candidate(self, raw_text: str) -> str:
        """Return the text from the first ``{`` to the last ``}`` inclusive.

        Raises:
            NoJsonFoundError: If no such span exists.
        """
        if not raw_text:
            raise NoJsonFoundError("Could not find valid JSON in AI response")

        first = raw_text.find("{")
        last = raw_text.rfind("}")
        if first == -1 or last == -1 or first >= last:
            raise NoJsonFoundError("Could not find valid JSON in AI response")

        return raw_text[first : last + 1]

    def sanitize(self, candidate: str) -> str:
        """Repair the formatting defects models commonly produce.

        Applied in order:
        1. Literal newlines, carriage returns and tabs become spaces.
        2. Backslashes that do not start a valid JSON escape are doubled.
        3. Unescaped quotes inside string values are escaped.

        Well-formed JSON comes out unchanged.
        """
        text = self.CONTROL_CHARS.sub(" ", candidate)
        text = self.BACKSLASH.sub(lambda m: m.group(0) if m.group(1) else "\\\\", text)
        return self._escape_interior_quotes(text)

    def recover_field(self, text: str, field_name: str) -> str | None:
        """Pull a string field out of text that is not valid JSON."""
        pattern = re.compile(rf'"{re.escape(field_name)}"\s*:\s*"([^"]*)"')
        match = pattern.search(text)
        return match.group(1) if match else None

    def _fallback(self, text: str, code: str) -> LooseAnalysisRecord:
        error_type = self.recover_field(text, "errorType")
        root_cause = self.recover_field(text, "rootCause")
        if error_type or root_cause:
            log.info(
                LogEventNames.FIELDS_RECOVERED,
                error_type=error_type is not None,
                root_cause=root_cause is not None,
            )
        return build_fallback_record(code, error_type, root_cause)

    def _escape_interior_quotes(self, text: str) -> str:
        # A quote inside a string closes it only when the next non-space
        # character could follow a JSON string.
        out: list[str] = []
        in_string = False
        i = 0
        length = len(text)

        while i < length:
            ch = text[i]
            if not in_string:
                if ch == '"':
                    in_string = True
                out.append(ch)
                i += 1
            elif ch == "\\":
                out.append(text[i : i + 2])
                i += 2
            elif ch == '"':
                if self._closes_string(text, i + 1):
                    in_string = False
                    out.append(ch)
                else:
                    out.append('\\"')
                i += 1
            else:
                out.append(ch)
                i += 1

        return "".join(out)

    def _closes_string(self, text: str, start: int) -> bool:
        j = start
        while j < len(text) and text[j] == " ":
            j += 1
        return j == len(text) or text[j] in self.CLOSING_FOLLOWERS
