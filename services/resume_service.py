# FILE: services/resume_service.py
import os
import time

from flask import current_app
from werkzeug.utils import secure_filename

from services.errors import AIResponseFormatError
from services.gemini_service import generate_text
from services.prompts import resume_analysis_prompt
from services.response_parser import parse_json_response


def is_allowed_resume_type(mime_type: str) -> bool:
    return mime_type in current_app.config["ALLOWED_RESUME_TYPES"]


def upload_size(file_storage) -> int:
    stream = file_storage.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def save_upload(file_storage) -> str:
    # Timestamp prefix keeps same-named uploads from colliding.
    upload_dir = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(upload_dir, exist_ok=True)
    safe_name = secure_filename(file_storage.filename or "") or "resume"
    path = os.path.join(upload_dir, f"{int(time.time() * 1000)}-{safe_name}")
    file_storage.save(path)
    return path


def remove_upload(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        current_app.logger.warning("Failed to remove upload %s: %s", path, exc)


def analyze_resume(resume_text: str, job_description: str = "") -> dict:
    raw_text = generate_text(resume_analysis_prompt(resume_text, job_description))
    analysis = parse_json_response(raw_text)
    if not isinstance(analysis, dict):
        raise AIResponseFormatError("Resume analysis is not a JSON object")
    return analysis
