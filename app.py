# FILE: app.py
import os

from flask import Flask
from flask_cors import CORS

from config import Config
from models import db
from routes.interview_routes import interview_bp
from routes.main_routes import main_bp
from routes.resume_routes import resume_bp


def create_app(config_object=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)

    CORS(app, origins=app.config["CORS_ORIGINS"])
    db.init_app(app)
    app.register_blueprint(main_bp)
    app.register_blueprint(interview_bp)
    app.register_blueprint(resume_bp)

    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)
    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    application = create_app()
    application.run(port=application.config["PORT"], debug=True)
