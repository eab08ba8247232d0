from datetime import datetime, timezone
from typing import Dict, List

from sqlalchemy.exc import IntegrityError

from .database import build_engine, build_session_factory, create_tables
from .models import VoterInfo
from ..utils.logger import get_logger

logger = get_logger("seed")

# Region subtopics are lower-case to match the topic classifier output.
SAMPLE_DATA: List[Dict[str, str]] = [
    {
        "topic": "registration",
        "subtopic": "general",
        "details": "To register as a voter in Nigeria, visit INEC website at inec.gov.ng or any INEC office "
                   "with your NIN and valid ID. Registration is free and open year-round.",
    },
    {
        "topic": "registration",
        "subtopic": "lagos",
        "details": "In Lagos State, register at INEC offices or designated centers. Use your BVN or NIN. "
                   "Continuous registration available; check inec.gov.ng for nearest location.",
    },
    {
        "topic": "polling station",
        "subtopic": "general",
        "details": "Find your polling unit via INEC website (inec.gov.ng) or app by entering your PVC number "
                   "or address. Polling typically starts at 8 AM and ends at 4 PM.",
    },
    {
        "topic": "polling station",
        "subtopic": "lagos",
        "details": "Lagos voters can locate polling units on inec.gov.ng or call INEC helpline 0800-CALL-inec. "
                   "Expect long queues; arrive early.",
    },
    {
        "topic": "party platform",
        "subtopic": "APC",
        "details": "APC (All Progressives Congress): Focuses on economic reform, infrastructure development, "
                   "security, and anti-corruption measures.",
    },
    {
        "topic": "party platform",
        "subtopic": "PDP",
        "details": "PDP (People's Democratic Party): Emphasizes job creation, education, healthcare access, "
                   "and agricultural development.",
    },
]


def seed_voter_info(db) -> int:
    """
    Insert each sample fact whose (topic, subtopic) row is missing.

    Rows another process inserted first surface as an IntegrityError on the
    unique constraint and are skipped.

    Returns:
        Number of rows inserted by this call
    """
    inserted = 0
    for entry in SAMPLE_DATA:
        exists = (
            db.query(VoterInfo.id)
            .filter(VoterInfo.topic == entry["topic"], VoterInfo.subtopic == entry["subtopic"])
            .first()
        )
        if exists:
            continue

        db.add(VoterInfo(last_updated=datetime.now(timezone.utc), **entry))
        try:
            db.commit()
            inserted += 1
        except IntegrityError:
            db.rollback()
            logger.info(f"Seed fact ({entry['topic']}, {entry['subtopic']}) already present, skipping")
    return inserted


def populate_voter_info(session_factory):
    """Seed the voterinfo table; persistence errors are logged and re-raised."""
    db = session_factory()
    try:
        inserted = seed_voter_info(db)
        if inserted:
            logger.info(f"Sample data inserted ({inserted} facts), ready to educate Nigerian voters!")
        else:
            logger.info("Voter info table already seeded. Skipping population.")
        return inserted
    except Exception:
        db.rollback()
        logger.exception("Error inserting sample data")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    engine = build_engine()
    create_tables(engine)
    populate_voter_info(build_session_factory(engine))
