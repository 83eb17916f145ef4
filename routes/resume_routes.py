# FILE: routes/resume_routes.py
import os

from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from models import db
from routes.main_routes import error_response
from services import storage_service
from services.errors import AIResponseFormatError, TextExtractionError, UnsupportedFileTypeError
from services.resume_service import (
    analyze_resume,
    is_allowed_resume_type,
    remove_upload,
    save_upload,
    upload_size,
)
from services.text_extractor import extract_text_from_file


resume_bp = Blueprint("resume", __name__, url_prefix="/api")


@resume_bp.route("/analyze-resume", methods=["POST"])
def analyze_resume_upload():
    # Reading request.files enforces MAX_CONTENT_LENGTH before anything is saved.
    upload = request.files.get("resume")
    if upload is None or not upload.filename:
        return error_response("No file uploaded", 400)
    if not is_allowed_resume_type(upload.mimetype):
        current_app.logger.warning("Rejected upload %s of type %s", upload.filename, upload.mimetype)
        return error_response("Invalid file type. Please upload PDF, DOC, DOCX, or TXT files.", 400)

    max_size = current_app.config["MAX_RESUME_SIZE"]
    if upload_size(upload) > max_size:
        current_app.logger.warning("Rejected upload %s over %s bytes", upload.filename, max_size)
        return error_response(f"File too large. Maximum size is {max_size // (1024 * 1024)}MB.", 413)

    user_id = request.form.get("userId")
    job_description = request.form.get("jobDescription") or ""

    file_path = save_upload(upload)
    try:
        try:
            resume_text = extract_text_from_file(file_path, upload.mimetype)
        except UnsupportedFileTypeError as exc:
            return error_response(str(exc), 400)
        except TextExtractionError as exc:
            current_app.logger.error("Text extraction failed for %s: %s", upload.filename, exc)
            return error_response("Could not extract text from the file", 500, details=exc)

        if not resume_text or not resume_text.strip():
            return error_response("Could not extract text from the file", 400)

        try:
            analysis = analyze_resume(resume_text, job_description)
        except AIResponseFormatError as exc:
            current_app.logger.error("Resume analysis output rejected: %s", exc)
            return error_response("AI response not in valid format.", 500, details=exc)
        except Exception as exc:
            current_app.logger.exception("Gemini resume analysis failed: %s", exc)
            return error_response("Internal server error", 500, details=exc)

        try:
            record = storage_service.create_analysis(
                user_id=user_id,
                filename=upload.filename,
                file_size=os.path.getsize(file_path),
                resume_text=resume_text,
                job_description=job_description,
                analysis=analysis,
            )
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.exception("Saving resume analysis failed: %s", exc)
            return error_response("Database error", 500, details=exc)
    finally:
        remove_upload(file_path)

    current_app.logger.info("Stored resume analysis %s for %s", record.id, upload.filename)
    return jsonify({"success": True, "analysis": analysis, "analysisId": record.id})


@resume_bp.route("/analyses/<string:user_id>", methods=["GET"])
def list_analyses(user_id: str):
    try:
        analyses = storage_service.list_user_analyses(user_id)
    except SQLAlchemyError as exc:
        current_app.logger.exception("Fetching analyses failed: %s", exc)
        return error_response("Database error", 500)
    return jsonify({"analyses": [record.to_summary() for record in analyses]})


@resume_bp.route("/analysis/<string:analysis_id>", methods=["GET"])
def get_analysis(analysis_id: str):
    record = storage_service.get_analysis(analysis_id)
    if record is None:
        return error_response("Analysis not found", 404)
    return jsonify({"analysis": record.to_dict()})
