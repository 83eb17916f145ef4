# FILE: services/gemini_service.py
from flask import current_app

from services.errors import AIServiceError


def _extract_response_text(response) -> str:
    # Prefer direct text field if present.
    text = (getattr(response, "text", "") or "").strip()
    if text:
        return text
    # Fallback: join candidate parts.
    candidates = getattr(response, "candidates", None) or []
    parts = []
    for candidate in candidates:
        content = getattr(candidate, "content", None)
        candidate_parts = getattr(content, "parts", None) or []
        for part in candidate_parts:
            value = getattr(part, "text", "") or ""
            if value:
                parts.append(value.strip())
    return "\n".join(parts).strip()


def _get_client(api_key: str):
    from google import genai

    return genai.Client(api_key=api_key)


def generate_text(prompt: str) -> str:
    """Send one prompt to Gemini and return the raw reply text.

    Provider errors are not caught here; the route decides how to report them.
    """
    api_key = current_app.config.get("GEMINI_API_KEY", "").strip()
    model = current_app.config.get("GEMINI_MODEL", "gemini-2.5-flash")
    if not api_key:
        raise AIServiceError("GEMINI_API_KEY is not configured")

    client = _get_client(api_key)
    response = client.models.generate_content(model=model, contents=prompt)
    text = _extract_response_text(response)
    if not text:
        raise AIServiceError("Gemini returned an empty response")

    current_app.logger.debug("Raw Gemini output: %s", text[:500])
    return text
