#!/usr/bin/env python3
"""
Generation module for the voter-education chatbot.

This module handles answer generation using the Groq chat completions API
(OpenAI-compatible). There are no retries: any failure is raised as
GenerationError and the caller answers with its static apology.
"""

import requests
from typing import Dict, List, Optional
from .config import Config
from ..utils.logger import get_logger

logger = get_logger("groq")

EMPTY_COMPLETION_FALLBACK = (
    "Oops, something went sideways—try rephrasing? We're here to help you vote in Nigeria! 🗳️"
)


class GenerationError(Exception):
    """Raised when the completion service cannot produce an answer."""


CONNECT_TIMEOUT_SECONDS = 5.0


class GenerationClient:
    """Client for generating answers using the Groq LLM API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the generation client."""
        self.api_key = api_key if api_key is not None else Config.GROQ_API_KEY
        self.llm_model = model or Config.GROQ_LLM_MODEL
        self.api_base_url = api_url or Config.GROQ_API_URL
        self.timeout = timeout if timeout is not None else Config.timeout_seconds()
        # (connect, read): each socket wait is bounded, a server trickling bytes is not
        self.request_timeout = (min(CONNECT_TIMEOUT_SECONDS, self.timeout), self.timeout)
        self.temperature = Config.LLM_TEMPERATURE
        self.max_tokens = Config.LLM_MAX_TOKENS

    def build_payload(self, messages: List[Dict[str, str]]) -> Dict:
        return {
            "model": self.llm_model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def generate_answer(self, messages: List[Dict[str, str]]) -> str:
        """
        Generate an answer using the Groq LLM.

        Args:
            messages: System and user chat messages

        Returns:
            Generated answer text, or a fallback apology when the service
            returns no usable text

        Raises:
            GenerationError: on missing key, transport error, timeout,
                non-2xx status or malformed response
        """
        if not self.api_key:
            raise GenerationError("GROQ_API_KEY is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(messages)

        try:
            logger.debug(f"Sending request to Groq API, model={self.llm_model} timeout={self.request_timeout}")
            response = requests.post(
                self.api_base_url,
                headers=headers,
                json=payload,
                timeout=self.request_timeout,
            )
            logger.debug(f"Received response from Groq API, status: {response.status_code}")

            if response.status_code != 200:
                logger.error(f"Groq API error response body: {response.text}")
                response.raise_for_status()

            data = response.json()
        except requests.exceptions.Timeout as e:
            raise GenerationError(f"Completion request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise GenerationError(f"Error generating answer: {e}") from e
        except ValueError as e:
            raise GenerationError(f"Error parsing generation response: {e}") from e

        return self._extract_answer(data)

    def _extract_answer(self, data) -> str:
        try:
            choices = data.get("choices") or []
            content = (choices[0].get("message") or {}).get("content") if choices else None
        except (AttributeError, TypeError) as e:
            raise GenerationError(f"Error parsing generation response: {e}") from e

        if not isinstance(content, str) or not content.strip():
            logger.warning(f"No usable completion text in response: {data}")
            return EMPTY_COMPLETION_FALLBACK
        return content.strip()
