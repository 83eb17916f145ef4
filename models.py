# FILE: models.py
from datetime import datetime
from uuid import uuid4

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


def _new_id() -> str:
    return uuid4().hex


def _iso(value):
    return value.isoformat() if value else None


class InterviewSession(db.Model):
    __tablename__ = "interview_sessions"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    status = db.Column(db.String(20), nullable=False, default="in_progress")
    user_id = db.Column(db.String(64), nullable=True, index=True)
    total_marks = db.Column(db.Float, nullable=False, default=0.0)
    selected_skills = db.Column(db.JSON, nullable=True)
    questions = db.Column(db.JSON, nullable=True)
    submitted_responses = db.Column(db.JSON, nullable=True)
    chat_history = db.Column(db.JSON, nullable=True)
    duration = db.Column(db.Integer, nullable=True)
    completed_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    responses = db.relationship(
        "InterviewResponse",
        backref="session",
        lazy="select",
        order_by="InterviewResponse.question_number",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "status": self.status,
            "user_id": self.user_id,
            "total_marks": self.total_marks,
            "selected_skills": self.selected_skills,
            "questions": self.questions,
            "submitted_responses": self.submitted_responses,
            "chat_history": self.chat_history,
            "duration": self.duration,
            "completed_at": _iso(self.completed_at),
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }


class InterviewResponse(db.Model):
    __tablename__ = "interview_responses"

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(
        db.String(32), db.ForeignKey("interview_sessions.id"), nullable=False, index=True
    )
    question_number = db.Column(db.Integer, nullable=False, default=1)
    question = db.Column(db.Text, nullable=True)
    user_answer = db.Column(db.Text, nullable=False)
    code = db.Column(db.Text, nullable=True)
    feedback = db.Column(db.Text, nullable=False)
    marks = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "session_id": self.session_id,
            "question_number": self.question_number,
            "question": self.question,
            "user_answer": self.user_answer,
            "code": self.code,
            "feedback": self.feedback,
            "marks": self.marks,
            "created_at": _iso(self.created_at),
        }


class ResumeAnalysis(db.Model):
    __tablename__ = "resume_analyses"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    user_id = db.Column(db.String(64), nullable=True, index=True)
    filename = db.Column(db.String(255), nullable=False)
    file_size = db.Column(db.Integer, nullable=False)
    resume_text = db.Column(db.Text, nullable=False)
    job_description = db.Column(db.Text, nullable=True)
    analysis = db.Column(db.JSON, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "filename": self.filename,
            "file_size": self.file_size,
            "resume_text": self.resume_text,
            "job_description": self.job_description,
            "analysis": self.analysis,
            "created_at": _iso(self.created_at),
        }

    def to_summary(self) -> dict:
        # Columns returned by the per-user listing.
        return {
            "id": self.id,
            "filename": self.filename,
            "analysis": self.analysis,
            "created_at": _iso(self.created_at),
        }
