"""Configuration settings for the contact relay.

This module manages environment variables and application settings.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_RECEIVER_EMAIL = "contact@example.com"


@dataclass(frozen=True)
class Settings:
    """Application settings, read once at startup.

    Attributes:
        PROJECT_NAME: Service name reported by the health check
        DEBUG: Debug mode flag
        LOG_LEVEL: Root log level name
        HOST: Address uvicorn binds to
        PORT: Port uvicorn listens on
        BREVO_API_KEY: Credential for the Brevo transactional email API
        BREVO_API_URL: Brevo transactional email endpoint
        BREVO_TIMEOUT_SECONDS: Timeout applied to the upstream call
        RECEIVER_EMAIL: Address every contact message is delivered to
        RECEIVER_NAME: Display name of the receiver
    """

    PROJECT_NAME: str = "Brevo Email Proxy"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Brevo Settings
    BREVO_API_KEY: Optional[str] = None
    BREVO_API_URL: str = "https://api.brevo.com/v3/smtp/email"
    BREVO_TIMEOUT_SECONDS: float = 10.0

    # Email Settings
    RECEIVER_EMAIL: str = DEFAULT_RECEIVER_EMAIL
    RECEIVER_NAME: str = "Site Owner"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and `.env`)."""
        return cls(
            PROJECT_NAME=os.getenv("PROJECT_NAME", "Brevo Email Proxy"),
            DEBUG=os.getenv("DEBUG", "False").lower() == "true",
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
            HOST=os.getenv("EMAIL_PROXY_HOST", "0.0.0.0"),
            PORT=int(os.getenv("EMAIL_PROXY_PORT", 3001)),
            BREVO_API_KEY=os.getenv("BREVO_API_KEY") or None,
            BREVO_API_URL=os.getenv(
                "BREVO_API_URL", "https://api.brevo.com/v3/smtp/email"
            ),
            BREVO_TIMEOUT_SECONDS=float(os.getenv("BREVO_TIMEOUT_SECONDS", 10)),
            RECEIVER_EMAIL=os.getenv("RECEIVER_EMAIL") or DEFAULT_RECEIVER_EMAIL,
            RECEIVER_NAME=os.getenv("RECEIVER_NAME", "Site Owner"),
        )

    @property
    def receiver_is_default(self) -> bool:
        return self.RECEIVER_EMAIL == DEFAULT_RECEIVER_EMAIL


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first use."""
    return Settings.from_env()
