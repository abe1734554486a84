"""Recovers structured results from model text, strict JSON first then heuristics."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

QUESTIONS = "questions"
FEEDBACK = "feedback"
RESUME = "resume"

_FENCE_JSON_RE = re.compile(r"```json\n?")
_FENCE_RE = re.compile(r"```\n?")
_NUMBERED_RE = re.compile(r"^\d+[.)]")
_NUMBER_MARKER_RE = re.compile(r"^\d+[.)]\s*")
# Splits "1. First? 2. Second." into its numbered items.
_INLINE_MARKER_RE = re.compile(r"\s+(?=\d+[.)]\s)")

FALLBACK_SAMPLE_ANSWER = "A strong answer would include specific examples and results."
FALLBACK_OVERALL_FEEDBACK = "Consider practicing your answer and adding more specific examples."


class ParseFailure(ValueError):
    """A parse strategy could not produce a result."""


@dataclass
class ParseOutcome:
    result: Any
    strategy: str

    @property
    def fallback_applied(self) -> bool:
        return self.strategy not in ("strict_json", "verbatim")


Strategy = Tuple[str, Callable[[str], Any]]


def strip_code_fences(text: str) -> str:
    text = _FENCE_JSON_RE.sub("", text or "")
    return _FENCE_RE.sub("", text).strip()


def _strict_json(text: str, expected: type) -> Any:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ParseFailure(f"invalid JSON: {exc}") from exc
    if not isinstance(data, expected):
        raise ParseFailure(f"expected JSON {expected.__name__}, got {type(data).__name__}")
    return data


def strict_questions(text: str) -> List[Any]:
    return _strict_json(text, list)


def _question_lines(text: str) -> List[str]:
    lines: List[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if _NUMBERED_RE.match(stripped):
            lines.extend(part for part in _INLINE_MARKER_RE.split(stripped) if part.strip())
        else:
            lines.append(stripped)
    return lines


def heuristic_questions(text: str) -> List[Dict[str, Any]]:
    kept = [line for line in _question_lines(text) if "?" in line or _NUMBERED_RE.match(line)]
    return [
        {
            "id": idx,
            "question": _NUMBER_MARKER_RE.sub("", line).strip(),
            "type": "general",
            "category": "general",
        }
        for idx, line in enumerate(kept, start=1)
    ]


def default_feedback(text: str) -> Dict[str, Any]:
    return {
        "score": 5,
        "strengths": ["You provided an answer"],
        "improvements": ["Could be more specific", "Consider adding examples"],
        "sampleAnswer": FALLBACK_SAMPLE_ANSWER,
        "overallFeedback": text or FALLBACK_OVERALL_FEEDBACK,
    }


def strict_feedback(text: str) -> Dict[str, Any]:
    data = _strict_json(text, dict)
    merged = default_feedback("")
    merged.update(data)
    return merged


def verbatim(text: str) -> str:
    return text


STRATEGIES: Dict[str, Sequence[Strategy]] = {
    QUESTIONS: (("strict_json", strict_questions), ("line_heuristic", heuristic_questions)),
    FEEDBACK: (("strict_json", strict_feedback), ("synthesized_default", default_feedback)),
    RESUME: (("verbatim", verbatim),),
}


def parse(schema: str, text: str) -> ParseOutcome:
    """Runs the schema's strategies in order and returns the first success."""
    if schema not in STRATEGIES:
        raise ValueError(f"Unknown output schema: {schema}")
    cleaned = (text or "").strip() if schema == RESUME else strip_code_fences(text)

    failures: List[str] = []
    for name, strategy in STRATEGIES[schema]:
        try:
            return ParseOutcome(result=strategy(cleaned), strategy=name)
        except ParseFailure as exc:
            failures.append(f"{name}: {exc}")
    raise ParseFailure("; ".join(failures))
