"""
Turns raw model text into typed values.

The model is asked for bare JSON but frequently wraps it in a Markdown code
fence. The fence is optional and removed; anything else that isn't valid JSON
of the expected shape is a hard failure. No repair is attempted.
"""
import json
import logging
import re
from typing import Any, List, TypeVar

from pydantic import TypeAdapter, ValidationError

from prepmind.models.schemas import Evaluation, OverallEvaluation, Question

logger = logging.getLogger(__name__)

T = TypeVar("T")

_OPENING_FENCE = re.compile(r"^```[A-Za-z0-9_+-]*[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"\r?\n?```$")

_QUESTIONS = TypeAdapter(List[Question])
_EVALUATION = TypeAdapter(Evaluation)
_OVERALL = TypeAdapter(OverallEvaluation)


class MalformedAIResponse(Exception):
    """Model output was not JSON, or not the JSON shape the caller asked for."""


def strip_code_fence(text: str) -> str:
    text = text.strip()
    if not text.startswith("```"):
        return text
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_json_payload(text: str) -> Any:
    body = strip_code_fence(text)
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        logger.debug("Undecodable AI text: %r", text[:500])
        raise MalformedAIResponse(f"AI response is not valid JSON: {e.msg}") from e


def _decode(text: str, adapter: TypeAdapter, shape: str):
    payload = parse_json_payload(text)
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        logger.debug("AI payload failed %s validation: %s", shape, e)
        raise MalformedAIResponse(f"AI response does not match the {shape} schema ({e.error_count()} errors)") from e


def decode_questions(text: str) -> List[Question]:
    questions = _decode(text, _QUESTIONS, "question list")
    if not questions:
        raise MalformedAIResponse("AI response contained an empty question list")
    return questions


def decode_evaluation(text: str) -> Evaluation:
    return _decode(text, _EVALUATION, "evaluation")


def decode_overall_evaluation(text: str) -> OverallEvaluation:
    return _decode(text, _OVERALL, "overall evaluation")
