# config.py
"""Runtime configuration read from the environment."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


# Load environment variables from the .env file
load_dotenv()

DEFAULT_SUCCESS_URL = "https://example.com/success"
DEFAULT_CANCEL_URL = "https://example.com/cancel"


class Settings(BaseModel):
    stripe_secret_key: Optional[str] = None
    success_url: str = DEFAULT_SUCCESS_URL
    cancel_url: str = DEFAULT_CANCEL_URL
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build settings from the current environment.

    Evaluated on every request so a warm Lambda container picks up
    configuration changes. Empty values fall back to the defaults.
    """
    return Settings(
        stripe_secret_key=os.getenv("STRIPE_SECRET_KEY") or None,
        success_url=os.getenv("SUCCESS_URL") or DEFAULT_SUCCESS_URL,
        cancel_url=os.getenv("CANCEL_URL") or DEFAULT_CANCEL_URL,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
