# FILE: services/storage_service.py
from datetime import datetime

from sqlalchemy import desc, func

from models import InterviewResponse, InterviewSession, ResumeAnalysis, db


# Interview sessions.
def create_session(user_id=None) -> InterviewSession:
    session = InterviewSession(status="in_progress", user_id=user_id or None)
    db.session.add(session)
    db.session.commit()
    return session


def get_session(session_id: str):
    return db.session.get(InterviewSession, session_id)


def list_sessions(user_id=None) -> list[dict]:
    # One grouped count instead of a query per session.
    counts = (
        db.session.query(
            InterviewResponse.session_id.label("session_id"),
            func.count(InterviewResponse.id).label("response_count"),
        )
        .group_by(InterviewResponse.session_id)
        .subquery()
    )
    query = (
        db.session.query(InterviewSession, func.coalesce(counts.c.response_count, 0))
        .outerjoin(counts, counts.c.session_id == InterviewSession.id)
        .order_by(desc(InterviewSession.created_at))
    )
    if user_id:
        query = query.filter(InterviewSession.user_id == user_id)

    sessions = []
    for session, response_count in query.all():
        item = session.to_dict()
        item["response_count"] = int(response_count)
        sessions.append(item)
    return sessions


def list_sessions_with_responses() -> list[dict]:
    rows = InterviewSession.query.order_by(desc(InterviewSession.created_at)).all()
    sessions = []
    for session in rows:
        responses = [response.to_dict() for response in session.responses]
        item = session.to_dict()
        item["responses"] = responses
        item["response_count"] = len(responses)
        sessions.append(item)
    return sessions


def update_session_questions(session_id: str, user_id: str, skills: dict, questions: list):
    session = get_session(session_id)
    if session is None:
        return None
    session.user_id = user_id
    session.selected_skills = skills
    session.questions = questions
    session.updated_at = datetime.utcnow()
    db.session.commit()
    return session


def save_completed_interview(
    user_id: str,
    questions=None,
    responses=None,
    duration=None,
    completed_at=None,
    chat_history=None,
) -> InterviewSession:
    session = InterviewSession(
        status="completed",
        user_id=user_id,
        questions=questions,
        submitted_responses=responses,
        duration=duration,
        completed_at=completed_at,
        chat_history=chat_history,
    )
    db.session.add(session)
    db.session.commit()
    return session


def list_user_interviews(user_id: str) -> list[InterviewSession]:
    return (
        InterviewSession.query.filter_by(user_id=user_id)
        .order_by(desc(InterviewSession.completed_at))
        .all()
    )


# Interview responses.
def add_scored_response(
    session_id: str,
    question_number: int,
    question: str,
    user_answer: str,
    feedback: str,
    marks: float,
    code=None,
) -> InterviewResponse:
    """Store one scored answer and add its marks to the session total.

    The total is bumped with a single UPDATE expression in the same
    transaction as the insert, so concurrent answers for one session cannot
    overwrite each other's contribution.
    """
    response = InterviewResponse(
        session_id=session_id,
        question_number=question_number,
        question=question,
        user_answer=user_answer,
        code=code,
        feedback=feedback,
        marks=marks,
    )
    db.session.add(response)
    db.session.query(InterviewSession).filter(InterviewSession.id == session_id).update(
        {
            InterviewSession.total_marks: InterviewSession.total_marks + marks,
            InterviewSession.updated_at: datetime.utcnow(),
        },
        synchronize_session=False,
    )
    db.session.commit()
    return response


def list_responses(session_id: str) -> list[InterviewResponse]:
    return (
        InterviewResponse.query.filter_by(session_id=session_id)
        .order_by(InterviewResponse.question_number, InterviewResponse.id)
        .all()
    )


# Resume analyses.
def create_analysis(
    user_id,
    filename: str,
    file_size: int,
    resume_text: str,
    analysis: dict,
    job_description=None,
) -> ResumeAnalysis:
    record = ResumeAnalysis(
        user_id=user_id or None,
        filename=filename,
        file_size=file_size,
        resume_text=resume_text,
        job_description=job_description or None,
        analysis=analysis,
    )
    db.session.add(record)
    db.session.commit()
    return record


def list_user_analyses(user_id: str) -> list[ResumeAnalysis]:
    return (
        ResumeAnalysis.query.filter_by(user_id=user_id)
        .order_by(desc(ResumeAnalysis.created_at))
        .all()
    )


def get_analysis(analysis_id: str):
    return db.session.get(ResumeAnalysis, analysis_id)
