# FILE: routes/main_routes.py
from flask import Blueprint, current_app, jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge


main_bp = Blueprint("main", __name__)


def error_response(message: str, status: int, details=None):
    # Every failure leaves the API as {"error": ...}, downstream ones add details.
    payload = {"error": message}
    if details is not None:
        payload["details"] = str(details)
    return jsonify(payload), status


@main_bp.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "OK", "message": "Resume Analyzer API is running"})


@main_bp.app_errorhandler(RequestEntityTooLarge)
def handle_too_large(exc):
    limit_mb = current_app.config["MAX_RESUME_SIZE"] // (1024 * 1024)
    current_app.logger.warning("Rejected upload over %s MB", limit_mb)
    return error_response(f"File too large. Maximum size is {limit_mb}MB.", 413)


@main_bp.app_errorhandler(HTTPException)
def handle_http_error(exc):
    return error_response(exc.description or exc.name, exc.code or 500)


@main_bp.app_errorhandler(Exception)
def handle_unexpected_error(exc):
    current_app.logger.exception("Unhandled error: %s", exc)
    return error_response("Internal server error", 500, details=exc)
