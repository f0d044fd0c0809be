"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = "Agentic Maintainer"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Primary page fetch
    HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "8"))
    HTTP_MAX_REDIRECTS: int = int(os.getenv("HTTP_MAX_REDIRECTS", "5"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36 AgenticMaintainer/1.0"
    )

    # Outbound link sampling
    LINK_CHECK_TIMEOUT: float = float(os.getenv("LINK_CHECK_TIMEOUT", "5"))
    LINK_SAMPLE_LIMIT: int = int(os.getenv("LINK_SAMPLE_LIMIT", "20"))

    # CORS
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
            if o.strip()
        ]
    )

settings = Settings()
