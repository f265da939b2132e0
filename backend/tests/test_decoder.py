import json

import pytest

from prepmind.services.decoder import (
    MalformedAIResponse,
    decode_evaluation,
    decode_overall_evaluation,
    decode_questions,
    parse_json_payload,
    strip_code_fence,
)
from payloads import EVALUATION_TEXT, OVERALL_TEXT, fenced, verbal_questions_payload


def test_fenced_json_is_unwrapped():
    assert parse_json_payload('```json\n[{"a":1}]\n```') == [{"a": 1}]


def test_unfenced_json_decodes_the_same():
    assert parse_json_payload('[{"a":1}]') == [{"a": 1}]


@pytest.mark.parametrize("text", [
    '```\n{"a": 1}\n```',
    '```JSON\n{"a": 1}\n```',
    '  ```json {"a": 1}```  ',
    '\n\n{"a": 1}\n',
])
def test_fence_variants(text):
    assert parse_json_payload(text) == {"a": 1}


def test_stripping_is_idempotent():
    once = strip_code_fence('```json\n[1, 2]\n```')
    assert strip_code_fence(once) == once == "[1, 2]"


def test_non_json_fails_with_malformed_response():
    with pytest.raises(MalformedAIResponse):
        parse_json_payload("not json")


def test_fenced_garbage_fails():
    with pytest.raises(MalformedAIResponse):
        parse_json_payload("```json\nHere are your questions!\n```")


def test_decode_questions_reads_camel_case_fields():
    questions = decode_questions(fenced(verbal_questions_payload()))
    assert len(questions) == 5
    assert questions[0].expected_answer == "A short outline"
    assert all(q.type == "verbal" and q.question for q in questions)


def test_decode_questions_rejects_object_instead_of_array():
    with pytest.raises(MalformedAIResponse):
        decode_questions(json.dumps(verbal_questions_payload()[0]))


def test_decode_questions_rejects_empty_array():
    with pytest.raises(MalformedAIResponse):
        decode_questions("[]")


def test_decode_questions_rejects_unknown_type():
    payload = verbal_questions_payload(1)
    payload[0]["type"] = "essay"
    with pytest.raises(MalformedAIResponse):
        decode_questions(json.dumps(payload))


def test_decode_evaluation():
    evaluation = decode_evaluation(EVALUATION_TEXT)
    assert evaluation.score == 72
    assert evaluation.suggestions == ["Add examples", "Discuss trade-offs"]


def test_decode_evaluation_rejects_out_of_range_score():
    with pytest.raises(MalformedAIResponse):
        decode_evaluation(json.dumps({"score": 140, "feedback": "x"}))


def test_evaluation_shape_is_not_an_overall_evaluation():
    with pytest.raises(MalformedAIResponse):
        decode_overall_evaluation(EVALUATION_TEXT)


def test_decode_overall_evaluation():
    overall = decode_overall_evaluation(OVERALL_TEXT)
    assert overall.overall_score == 78
    assert overall.topic_wise_scores == {"Python Basics": 78}
    assert len(overall.recommendations) == 5
