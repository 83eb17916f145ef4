import pytest

from app import create_app
from config import Config
from models import db


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = "sqlite://"
        GEMINI_API_KEY = "test-key"
        GEMINI_MODEL = "gemini-2.5-flash"
        UPLOAD_FOLDER = str(tmp_path / "uploads")

    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session_id(client):
    response = client.post("/api/interview/start", json={"userId": "user-1"})
    return response.get_json()["sessionId"]
