#!/usr/bin/env python3
"""
Configuration management for the voter-education chat backend.
"""

import os
from dotenv import load_dotenv
from sqlalchemy.engine import make_url

from ..utils.logger import get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger()

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")


class Config:
    """Configuration class for the application."""

    # Database Configuration
    DATABASE_URL = os.getenv(
        "DATABASE_URL",
        f"sqlite:///{os.path.abspath(os.path.join(DATA_DIR, 'voter.db'))}",
    )

    # Groq API Configuration
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")
    GROQ_LLM_MODEL = os.getenv("GROQ_LLM_MODEL", "llama-3.1-8b-instant")
    GROQ_API_URL = os.getenv("GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions")
    LLM_TIMEOUT_SECONDS = os.getenv("LLM_TIMEOUT_SECONDS", "20")

    # Generation parameters
    LLM_TEMPERATURE = 0.7
    LLM_MAX_TOKENS = 200

    # Server Configuration
    PORT = os.getenv("PORT", "3000")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def debug_print(cls):
        logger.info(f"[CONFIG] DATABASE_URL={make_url(cls.DATABASE_URL).render_as_string(hide_password=True)}")
        logger.info(f"[CONFIG] GROQ_MODEL={cls.GROQ_LLM_MODEL} set={bool(cls.GROQ_API_KEY)}")
        logger.info(f"[CONFIG] LLM_TIMEOUT_SECONDS={cls.LLM_TIMEOUT_SECONDS} PORT={cls.PORT}")

    @classmethod
    def timeout_seconds(cls) -> float:
        return float(cls.LLM_TIMEOUT_SECONDS)

    @classmethod
    def port(cls) -> int:
        return int(cls.PORT)

    @classmethod
    def validate(cls):
        """Validate that the numeric settings parse and are in range."""
        invalid = []

        try:
            if cls.timeout_seconds() <= 0:
                invalid.append("LLM_TIMEOUT_SECONDS")
        except ValueError:
            invalid.append("LLM_TIMEOUT_SECONDS")

        try:
            if not 0 < cls.port() < 65536:
                invalid.append("PORT")
        except ValueError:
            invalid.append("PORT")

        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            invalid.append("LOG_LEVEL")

        if invalid:
            raise ValueError(f"Invalid configuration: {', '.join(invalid)}")

        logger.setLevel(cls.LOG_LEVEL)

        # The service still boots without a key; chat requests then answer 500
        if not cls.GROQ_API_KEY:
            logger.warning("GROQ_API_KEY is not set; chat completions will fail")

        return True

# Validate configuration on import
Config.validate()
