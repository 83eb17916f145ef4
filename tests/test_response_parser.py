import pytest

from services.errors import AIResponseFormatError
from services.response_parser import (
    parse_json_array_response,
    parse_json_response,
    strip_code_fences,
)


def test_strip_code_fences_removes_markers():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'


def test_fenced_and_plain_output_parse_the_same():
    plain = '{"feedback": "Good clarity but lacks depth", "marks": 7}'
    fenced = f"```json\n{plain}\n```"
    assert parse_json_response(fenced) == parse_json_response(plain)


def test_parse_json_response_rejects_prose():
    with pytest.raises(AIResponseFormatError):
        parse_json_response("Sure! Here is the evaluation you asked for.")


def test_array_parser_reads_plain_array():
    assert parse_json_array_response('[{"category": "A", "questions": []}]') == [
        {"category": "A", "questions": []}
    ]


def test_array_parser_scans_brackets_around_prose():
    text = 'Here are your questions:\n```json\n[{"category": "A", "questions": [1]}]\n```\nGood luck!'
    assert parse_json_array_response(text) == [{"category": "A", "questions": [1]}]


def test_array_parser_rejects_output_without_array():
    with pytest.raises(AIResponseFormatError):
        parse_json_array_response('{"category": "A"}')


def test_array_parser_rejects_broken_array():
    with pytest.raises(AIResponseFormatError):
        parse_json_array_response("[{'category': 'A',]")


@pytest.mark.parametrize("constant", ["Infinity", "-Infinity", "NaN"])
def test_bare_non_json_constants_are_rejected(constant):
    with pytest.raises(AIResponseFormatError):
        parse_json_response(f'{{"feedback": "ok", "marks": {constant}}}')


def test_array_parser_rejects_bare_constants():
    with pytest.raises(AIResponseFormatError):
        parse_json_array_response('Questions: [{"category": "A", "questions": [], "weight": NaN}]')
