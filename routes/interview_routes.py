# FILE: routes/interview_routes.py
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from models import db
from routes.main_routes import error_response
from services import storage_service
from services.errors import AIResponseFormatError, AIServiceError
from services.interview_service import count_questions, generate_questions, score_answer


interview_bp = Blueprint("interview", __name__, url_prefix="/api")


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _parse_completed_at(value):
    # Accepts ISO-8601 with a trailing Z; stored as naive UTC.
    if value in (None, ""):
        return None
    parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


@interview_bp.route("/interview/start", methods=["POST"])
def start_interview():
    user_id = _json_body().get("userId")
    try:
        session = storage_service.create_session(user_id)
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Session creation failed: %s", exc)
        return error_response("Failed to create session", 500, details=exc)

    current_app.logger.info("New session created: %s", session.id)
    return jsonify({"sessionId": session.id})


@interview_bp.route("/interview", methods=["POST"])
def submit_answer():
    data = _json_body()
    user_input = data.get("userInput")
    session_id = data.get("session")
    question = data.get("questionContext") or ""
    code = data.get("code")

    if not user_input or not session_id:
        return error_response("Missing user input or session ID.", 400)
    try:
        question_number = int(data.get("questionNumber") or 1)
    except (TypeError, ValueError):
        return error_response("questionNumber must be an integer.", 400)

    if storage_service.get_session(session_id) is None:
        return error_response("Session not found", 404)

    try:
        result = score_answer(question, user_input, code or "")
    except AIResponseFormatError as exc:
        current_app.logger.error("Scoring output rejected for session %s: %s", session_id, exc)
        return error_response("AI response not in valid format.", 500, details=exc)
    except Exception as exc:
        current_app.logger.exception("Gemini scoring failed: %s", exc)
        return error_response("Error generating response from AI.", 500, details=exc)

    try:
        storage_service.add_scored_response(
            session_id=session_id,
            question_number=question_number,
            question=question,
            user_answer=user_input,
            code=code,
            feedback=result["feedback"],
            marks=result["marks"],
        )
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Response insert failed: %s", exc)
        return error_response("Error saving response to database.", 500, details=exc)

    current_app.logger.info(
        "Stored Q%s: %s/10 for session %s", question_number, result["marks"], session_id
    )
    return jsonify({"reply": result["feedback"], "marks": result["marks"]})


@interview_bp.route("/interview/session/<string:session_id>", methods=["GET"])
def get_session_detail(session_id: str):
    session = storage_service.get_session(session_id)
    if session is None:
        return error_response("Session not found", 404)

    responses = [response.to_dict() for response in storage_service.list_responses(session_id)]
    total_marks = session.total_marks or 0.0
    return jsonify(
        {
            "session": session.to_dict(),
            "responses": responses,
            "totalQuestions": len(responses),
            "totalMarks": total_marks,
            "averageMarks": total_marks / len(responses) if responses else 0,
        }
    )


@interview_bp.route("/interview/responses/<string:session_id>", methods=["GET"])
def get_session_responses(session_id: str):
    try:
        responses = storage_service.list_responses(session_id)
    except SQLAlchemyError as exc:
        current_app.logger.exception("Fetching responses failed: %s", exc)
        return error_response("Failed to fetch responses", 500, details=exc)
    return jsonify({"responses": [response.to_dict() for response in responses]})


@interview_bp.route("/interview/sessions", methods=["GET"])
def list_sessions():
    user_id = request.args.get("userId")
    try:
        sessions = storage_service.list_sessions(user_id)
    except SQLAlchemyError as exc:
        current_app.logger.exception("Fetching sessions failed: %s", exc)
        return error_response("Failed to fetch sessions", 500, details=exc)
    return jsonify({"sessions": sessions})


@interview_bp.route("/interview/all-sessions-detailed", methods=["GET"])
def list_sessions_detailed():
    try:
        sessions = storage_service.list_sessions_with_responses()
    except SQLAlchemyError as exc:
        current_app.logger.exception("Fetching detailed sessions failed: %s", exc)
        return error_response("Failed to fetch sessions", 500, details=exc)
    return jsonify({"sessions": sessions})


@interview_bp.route("/generate-interview-questions", methods=["POST"])
def generate_interview_questions():
    data = _json_body()
    user_id = data.get("userId")
    session_id = data.get("session_Id")
    skills = data.get("skills")

    if not user_id or not session_id or not isinstance(skills, dict):
        return error_response("User ID, session_Id and skills are required", 400)
    if storage_service.get_session(session_id) is None:
        return error_response("Session not found", 404)

    technical_skills = skills.get("technical") or []
    soft_skills = skills.get("soft") or []
    if not isinstance(technical_skills, list) or not isinstance(soft_skills, list):
        return error_response("skills.technical and skills.soft must be lists", 400)

    current_app.logger.info("Generating interview questions for session %s", session_id)
    try:
        questions = generate_questions(technical_skills, soft_skills)
    except (AIResponseFormatError, AIServiceError) as exc:
        current_app.logger.error("Question generation rejected: %s", exc)
        return error_response("Failed to generate interview questions", 500, details=exc)
    except Exception as exc:
        current_app.logger.exception("Gemini question generation failed: %s", exc)
        return error_response("Failed to generate interview questions", 500, details=exc)

    try:
        storage_service.update_session_questions(session_id, user_id, skills, questions)
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Updating interview session failed: %s", exc)
        return error_response("Failed to update session", 500, details=exc)

    return jsonify(
        {
            "success": True,
            "questions": questions,
            "totalQuestions": count_questions(questions),
        }
    )


@interview_bp.route("/save-interview", methods=["POST"])
def save_interview():
    data = _json_body()
    user_id = data.get("userId")
    if not user_id:
        return error_response("User ID is required", 400)

    try:
        completed_at = _parse_completed_at(data.get("completedAt"))
    except (TypeError, ValueError):
        return error_response("completedAt must be an ISO-8601 timestamp", 400)
    duration = data.get("duration")
    if duration is not None:
        try:
            duration = int(duration)
        except (TypeError, ValueError):
            return error_response("duration must be a number of seconds", 400)

    try:
        session = storage_service.save_completed_interview(
            user_id=user_id,
            questions=data.get("questions"),
            responses=data.get("responses"),
            duration=duration,
            completed_at=completed_at,
            chat_history=data.get("chatHistory"),
        )
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.exception("Saving interview failed: %s", exc)
        return error_response(f"Database error: {exc}", 500, details=exc)

    return jsonify(
        {
            "success": True,
            "interviewId": session.id,
            "message": "Interview saved successfully",
        }
    )


@interview_bp.route("/interviews/<string:user_id>", methods=["GET"])
def interview_history(user_id: str):
    try:
        interviews = storage_service.list_user_interviews(user_id)
    except SQLAlchemyError as exc:
        current_app.logger.exception("Fetching interview history failed: %s", exc)
        return error_response(f"Database error: {exc}", 500)
    return jsonify({"interviews": [session.to_dict() for session in interviews]})


# Path spelling is part of the public API.
@interview_bp.route("/fetch-qustions/<string:session_id>", methods=["GET"])
def fetch_questions(session_id: str):
    session = storage_service.get_session(session_id)
    if session is None:
        return error_response("not found", 404)
    return jsonify({"analysis": session.to_dict()})
