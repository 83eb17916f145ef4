# FILE: services/interview_service.py
import math

from flask import current_app

from services.errors import AIResponseFormatError
from services.gemini_service import generate_text
from services.prompts import answer_scoring_prompt, question_generation_prompt
from services.response_parser import parse_json_array_response, parse_json_response


def _to_marks(value) -> float:
    # Models sometimes quote the number; booleans are never marks.
    if isinstance(value, bool):
        raise AIResponseFormatError("AI output has non-numeric marks")
    try:
        marks = float(value)
    except (TypeError, ValueError) as exc:
        raise AIResponseFormatError("AI output has non-numeric marks") from exc
    # float() accepts "nan" and "inf" strings.
    if not math.isfinite(marks):
        raise AIResponseFormatError("AI output has non-finite marks")
    return marks


def score_answer(question: str, answer: str, code: str = "") -> dict:
    """Ask Gemini to grade one answer.

    Returns ``{"feedback": str, "marks": float}``. Raises
    AIResponseFormatError when the reply is not JSON or lacks either field.
    """
    raw_text = generate_text(answer_scoring_prompt(question, answer, code))
    parsed = parse_json_response(raw_text)
    if not isinstance(parsed, dict):
        raise AIResponseFormatError("AI output is not a JSON object")

    feedback = parsed.get("feedback")
    marks = parsed.get("marks")
    if feedback is None or marks is None:
        current_app.logger.warning("Scoring output missing fields: %s", raw_text[:500])
        raise AIResponseFormatError("AI output missing feedback or marks")
    return {"feedback": str(feedback), "marks": _to_marks(marks)}


def generate_questions(technical_skills, soft_skills) -> list:
    raw_text = generate_text(question_generation_prompt(technical_skills, soft_skills))
    questions = parse_json_array_response(raw_text)
    for category in questions:
        if not isinstance(category, dict) or not isinstance(category.get("questions"), list):
            raise AIResponseFormatError("Question category without a questions list")
    return questions


def count_questions(categories: list) -> int:
    return sum(len(category["questions"]) for category in categories)
