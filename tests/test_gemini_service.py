from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from services.errors import AIServiceError
from services.gemini_service import _extract_response_text, generate_text


def test_extract_prefers_text_field():
    assert _extract_response_text(SimpleNamespace(text="  hello  ")) == "hello"


def test_extract_joins_candidate_parts():
    part = SimpleNamespace(text="part one")
    other = SimpleNamespace(text="part two")
    candidate = SimpleNamespace(content=SimpleNamespace(parts=[part, other]))
    response = SimpleNamespace(text=None, candidates=[candidate])

    assert _extract_response_text(response) == "part one\npart two"


def test_generate_text_calls_configured_model(app):
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text='{"marks": 5}')

    with app.app_context(), patch("services.gemini_service._get_client", return_value=client) as get_client:
        assert generate_text("prompt") == '{"marks": 5}'

    get_client.assert_called_once_with("test-key")
    client.models.generate_content.assert_called_once_with(model="gemini-2.5-flash", contents="prompt")


def test_generate_text_requires_api_key(app):
    app.config["GEMINI_API_KEY"] = ""
    with app.app_context(), pytest.raises(AIServiceError):
        generate_text("prompt")


def test_generate_text_rejects_empty_reply(app):
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text="", candidates=[])

    with app.app_context(), patch("services.gemini_service._get_client", return_value=client):
        with pytest.raises(AIServiceError):
            generate_text("prompt")


def test_provider_errors_propagate(app):
    client = MagicMock()
    client.models.generate_content.side_effect = RuntimeError("quota exceeded")

    with app.app_context(), patch("services.gemini_service._get_client", return_value=client):
        with pytest.raises(RuntimeError, match="quota exceeded"):
            generate_text("prompt")
