# FILE: services/response_parser.py
import json
import re

from services.errors import AIResponseFormatError


_FENCE_PATTERN = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    # Remove markdown fence markers wherever the model put them.
    return _FENCE_PATTERN.sub("", text or "").strip()


def _reject_constant(name: str):
    # json.loads would otherwise accept NaN, Infinity and -Infinity.
    raise AIResponseFormatError(f"AI response is not valid JSON: bare {name}")


def _loads(text: str):
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise AIResponseFormatError(f"AI response is not valid JSON: {exc}") from exc


def parse_json_response(text: str):
    return _loads(strip_code_fences(text))


def parse_json_array_response(text: str) -> list:
    """Parse model output that should be a JSON array.

    A direct parse is tried first. When that fails or yields something other
    than a list, the text between the first ``[`` and the last ``]`` is parsed
    instead, which drops any prose the model wrapped around the array.
    """
    cleaned = strip_code_fences(text)
    try:
        parsed = _loads(cleaned)
        if isinstance(parsed, list):
            return parsed
    except AIResponseFormatError:
        pass

    first_bracket = cleaned.find("[")
    last_bracket = cleaned.rfind("]")
    if first_bracket == -1 or last_bracket < first_bracket:
        raise AIResponseFormatError("AI response does not contain a JSON array")

    parsed = _loads(cleaned[first_bracket:last_bracket + 1])
    if not isinstance(parsed, list):
        raise AIResponseFormatError("AI response is not a JSON array")
    return parsed
