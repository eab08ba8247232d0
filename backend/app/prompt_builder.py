#!/usr/bin/env python3
"""
Prompt builder module for the voter-education chatbot.

This module constructs the system + user chat messages sent to the LLM from
the user's question and the fact retrieved for it.
"""

from typing import List, Dict

class PromptBuilder:
    """Builds chat messages for the LLM with the retrieved context."""

    def __init__(self):
        """Initialize the prompt builder."""
        self.system_prompt = (
            "You are a friendly, non-partisan voter education assistant for Nigeria. "
            "Keep responses engaging, concise (under 150 words), and encouraging. "
            "Use emojis sparingly (max 1-2 per response). "
            "Always base answers on provided facts—don't add opinions or unverified info. "
            "Reference INEC as the official source. "
            "End with a question to keep the chat going if it fits. "
            "Topics: voter registration (via INEC), polling units, political party platforms (e.g., APC, PDP)."
        )

    def build_user_content(self, user_message: str, context: str) -> str:
        return f"{user_message}\n\nContext from database: {context}"

    def build_messages(self, user_message: str, context: str) -> List[Dict[str, str]]:
        """
        Build the chat messages for one question.

        Args:
            user_message: The user's (trimmed) question
            context: Context string built from the fact store

        Returns:
            System and user messages in chat-completions format
        """
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.build_user_content(user_message, context)},
        ]
