"""Fact lookup helpers: exact (topic, subtopic) match with a general fallback."""
from typing import Optional

from .models import VoterInfo

GENERAL_SUBTOPIC = "general"

NO_FACT_CONTEXT = (
    "I have general voter education info—stick to registration, polling, "
    "or party platforms for best help!"
)


def _first(db, topic: str, subtopic: str) -> Optional[VoterInfo]:
    return (
        db.query(VoterInfo)
        .filter(VoterInfo.topic == topic, VoterInfo.subtopic == subtopic)
        .order_by(VoterInfo.id)
        .first()
    )


def find_fact(db, topic: str, subtopic: str) -> Optional[VoterInfo]:
    """Return the fact for (topic, subtopic), else (topic, "general"), else None."""
    fact = _first(db, topic, subtopic)
    if fact is None and subtopic != GENERAL_SUBTOPIC:
        fact = _first(db, topic, GENERAL_SUBTOPIC)
    return fact


def build_context(fact: Optional[VoterInfo]) -> str:
    if fact is None:
        return NO_FACT_CONTEXT
    return f"Relevant facts: {fact.details}"
