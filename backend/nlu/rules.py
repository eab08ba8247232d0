"""Rule-based topic classifier: ordered substring checks over a fixed vocabulary."""
from typing import List, Tuple

TOPIC_REGISTRATION = "registration"
TOPIC_POLLING = "polling station"
TOPIC_PARTY = "party platform"
GENERAL = "general"

REGIONS = ["lagos", "abuja", "kano", "rivers"]
REGISTRATION = ["register", "registration"]
POLLING = ["polling", "station", "vote"]
PARTY = ["party", "platform"]


def _contains_any(q: str, vocab: List[str]) -> bool:
    return any(word in q for word in vocab)


def detect_region(query: str) -> str:
    ql = query.lower()
    for region in REGIONS:
        if region in ql:
            return region
    return GENERAL


def detect_party(query: str) -> str:
    # APC is checked first, so a message naming both parties maps to APC
    ql = query.lower()
    if "apc" in ql:
        return "APC"
    if "pdp" in ql:
        return "PDP"
    return GENERAL


def classify_topic(query: str) -> Tuple[str, str]:
    """Map free text to a (topic, subtopic) pair; the first matching rule wins."""
    ql = query.lower()
    region = detect_region(ql)

    if _contains_any(ql, REGISTRATION):
        return TOPIC_REGISTRATION, region
    if _contains_any(ql, POLLING):
        return TOPIC_POLLING, region
    if _contains_any(ql, PARTY):
        return TOPIC_PARTY, detect_party(ql)
    return GENERAL, GENERAL
