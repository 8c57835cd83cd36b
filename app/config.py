"""
Configuration settings for the YouTube summary gateway.
"""

import os
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _split_origins(value: Optional[str]) -> List[str]:
    if not value:
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Summary AI"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOGS_DIR = BASE_DIR / "logs"

    # Processing backend; the gateway calls {BACKEND_URL}/summarize
    BACKEND_URL = os.getenv("BACKEND_URL") or os.getenv("NEXT_PUBLIC_BASE_URL")

    DEFAULT_PROMPT = "Summarize this transcript in 200 words."

    # oEmbed lookup for title/author/thumbnail
    OEMBED_URL_TEMPLATE = (
        "https://www.youtube.com/oembed?format=json"
        "&url=https://www.youtube.com/watch?v={video_id}"
    )

    # Where the Streamlit UI reaches this API
    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS"))

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

        # Missing backend URL is reported, not enforced
        if not cls.BACKEND_URL:
            print("WARNING: BACKEND_URL environment variable not set.")
            print("Summaries will fail until it points at the processing backend.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
