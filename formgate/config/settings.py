"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

from formgate.config.constants import (
    DEFAULT_FORMAT_MESSAGE,
    DEFAULT_MATCH_MESSAGE,
    DEFAULT_REQUIRED_MESSAGE,
    RETURN_DATA,
)

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Messages ---
REQUIRED_MESSAGE: str = os.getenv("FORMGATE_REQUIRED_MESSAGE", DEFAULT_REQUIRED_MESSAGE)
FORMAT_MESSAGE: str = os.getenv("FORMGATE_FORMAT_MESSAGE", DEFAULT_FORMAT_MESSAGE)
MATCH_MESSAGE: str = os.getenv("FORMGATE_MATCH_MESSAGE", DEFAULT_MATCH_MESSAGE)

# --- Output ---
RETURN_TYPE: str = os.getenv("FORMGATE_RETURN_TYPE", RETURN_DATA)
