"""Controller / Orchestrator for chat questions.

Runs one question through classify -> log -> lookup -> compose. Errors are not
handled here; the HTTP layer catches them once and answers with the apology.
"""
from typing import Dict, Any, Optional

from ..nlu.rules import classify_topic
from ..data.fact_store import find_fact, build_context
from ..data.log_store import log_query
from ..utils.logger import get_logger
from ..utils.security import mask_pii
from .generate import GenerationClient
from .prompt_builder import PromptBuilder

logger = get_logger("chat")

GREETING = "Hello! What voter question can I help with today? 😄"
CHAT_APOLOGY = (
    "Aw, shucks—I'm having a hiccup. For voter registration, head to inec.gov.ng. "
    "What else can I clarify?"
)


class Controller:
    def __init__(self, gen_client: Optional[GenerationClient] = None, builder: Optional[PromptBuilder] = None):
        self.gen_client = gen_client or GenerationClient()
        self.builder = builder or PromptBuilder()

    def handle_query(self, db, message: str) -> Dict[str, Any]:
        user_message = message.strip()
        if not user_message:
            return {"response": GREETING, "topic": None, "subtopic": None}

        logger.info(f"[WORKFLOW] 1. Controller received query: '{mask_pii(user_message)}'")

        topic, subtopic = classify_topic(user_message)
        logger.info(f"[WORKFLOW] 2. Classified as topic='{topic}' subtopic='{subtopic}'")

        log_query(db, user_message, topic, subtopic)
        logger.info("[WORKFLOW] 3. Query logged")

        fact = find_fact(db, topic, subtopic)
        context = build_context(fact)
        if fact is not None:
            logger.info(f"[WORKFLOW] 4. Fact found: ({fact.topic}, {fact.subtopic})")
        else:
            logger.info("[WORKFLOW] 4. No fact found, using generic context")

        messages = self.builder.build_messages(user_message, context)
        response = self.gen_client.generate_answer(messages)
        logger.info(f"[WORKFLOW] 5. Answer generated ({len(response)} chars)")

        return {"response": response, "topic": topic, "subtopic": subtopic}
