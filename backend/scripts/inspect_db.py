#!/usr/bin/env python3
"""
Inspect the voter database: print facts, recent query logs and feedback.

Usage:
  python -m backend.scripts.inspect_db [--limit N] [--database-url URL]

Notes:
- Uses the existing SQLAlchemy session factory and models.
- Read-only for rows; only creates missing tables so a fresh database can be inspected.
"""

from __future__ import annotations

import argparse

from sqlalchemy import func

from backend.data.database import build_engine, build_session_factory, create_tables
from backend.data.models import VoterInfo, QueryLog, Feedback


def line(ch: str = "-", width: int = 60) -> str:
    return ch * width


def print_facts(session):
    print(line("="))
    print("Voter info facts")
    print(line("="))
    facts = session.query(VoterInfo).order_by(VoterInfo.id).all()
    print(f"Total facts: {len(facts)}")
    for f in facts:
        print(f"- #{f.id} ({f.topic}, {f.subtopic}) updated={f.last_updated}")
        print(f"    {f.details}")
    print()


def print_query_logs(session, limit: int):
    print(line("="))
    print(f"Query log (latest {limit})")
    print(line("="))
    total = session.query(func.count(QueryLog.id)).scalar()
    print(f"Total queries: {total}")
    for q in session.query(QueryLog).order_by(QueryLog.id.desc()).limit(limit):
        print(f"- #{q.id} [{q.timestamp}] ({q.topic}, {q.subtopic}) {q.user_message}")

    print("\nBy topic:")
    rows = (
        session.query(QueryLog.topic, QueryLog.subtopic, func.count(QueryLog.id))
        .group_by(QueryLog.topic, QueryLog.subtopic)
        .order_by(func.count(QueryLog.id).desc())
        .all()
    )
    for topic, subtopic, count in rows:
        print(f"  {topic} / {subtopic}: {count}")
    print()


def print_feedback(session, limit: int):
    print(line("="))
    print(f"Feedback (latest {limit})")
    print(line("="))
    total, avg = session.query(func.count(Feedback.id), func.avg(Feedback.rating)).one()
    avg_text = f"{avg:.2f}" if avg is not None else "n/a"
    print(f"Total feedback: {total} | average rating: {avg_text}")
    for fb in session.query(Feedback).order_by(Feedback.id.desc()).limit(limit):
        rating = fb.rating if fb.rating is not None else "-"
        print(f"- #{fb.id} [{fb.timestamp}] rating={rating} comment={fb.comment or '(none)'}")
        print(f"    Q: {fb.user_message}")
        print(f"    A: {fb.bot_response}")
    print()


def main():
    parser = argparse.ArgumentParser(description="Print the contents of the voter database")
    parser.add_argument("--limit", type=int, default=20, help="rows to show for logs and feedback")
    parser.add_argument("--database-url", default=None, help="SQLAlchemy URL (defaults to DATABASE_URL)")
    args = parser.parse_args()

    engine = build_engine(args.database_url)
    create_tables(engine)
    session = build_session_factory(engine)()
    try:
        print_facts(session)
        print_query_logs(session, args.limit)
        print_feedback(session, args.limit)
    finally:
        session.close()


if __name__ == "__main__":
    main()
