"""
Append-only writers for the query log and user feedback.

Both helpers commit immediately and roll back on failure before re-raising,
so the caller decides which error response to send.
"""
from typing import Optional

from .models import Feedback, QueryLog


def _save(db, record):
    db.add(record)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(record)
    return record


def log_query(db, user_message: str, topic: str, subtopic: str) -> QueryLog:
    """Record one classified chat question."""
    return _save(db, QueryLog(user_message=user_message, topic=topic, subtopic=subtopic))


def save_feedback(
    db,
    user_message: str,
    bot_response: str,
    rating: Optional[int] = None,
    comment: Optional[str] = None,
) -> Feedback:
    """Persist one feedback submission."""
    return _save(
        db,
        Feedback(user_message=user_message, bot_response=bot_response, rating=rating, comment=comment),
    )
