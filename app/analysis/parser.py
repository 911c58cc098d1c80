"""Lenient parsing of free-form LLM replies into an AnalysisResult.

Provider output is untrusted text. Parsing never raises: when no JSON object
can be recovered, the whole reply becomes the summary.
"""

import json
from typing import Any

from app.analysis.models import AnalysisResult
from app.logging.logger import Log

EMPTY_RESPONSE_SUMMARY = "No analysis generated"

_decoder = json.JSONDecoder()


def parse_analysis_response(raw: str | None) -> AnalysisResult:
    """Build an AnalysisResult from the first JSON object found in ``raw``."""
    if raw is None or not raw.strip():
        return AnalysisResult(summary=EMPTY_RESPONSE_SUMMARY)

    parsed = find_json_object(raw)
    if parsed is None:
        Log.warning("LLM response contained no JSON object, using raw text as summary")
        return AnalysisResult(summary=raw)

    return AnalysisResult(
        summary=_coerce_summary(parsed.get("summary"), fallback=raw),
        type=_coerce_type(parsed.get("type")),
        attributes=_coerce_attributes(parsed.get("attributes")),
    )


def find_json_object(text: str) -> dict[str, Any] | None:
    """Return the first substring of ``text`` that decodes to a JSON object."""
    start = text.find("{")
    while start != -1:
        try:
            value, _end = _decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            value = None
        if isinstance(value, dict):
            return value
        start = text.find("{", start + 1)
    return None


def _coerce_summary(value: Any, *, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    if value is None or isinstance(value, str):
        return fallback
    return json.dumps(value, ensure_ascii=False)


def _coerce_type(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _coerce_attributes(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return {str(key): item for key, item in value.items()}
    return {}
