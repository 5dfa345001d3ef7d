"""Configuration management and environment variable loading."""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


class Config:
    """Application configuration."""

    # Simple class attributes - read from environment
    # On Streamlit Cloud, secrets are copied over these after import
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
    ANALYSIS_MODEL: str = os.getenv("ANALYSIS_MODEL", "gpt-4o-mini")
    OEMBED_ENDPOINT: str = os.getenv("OEMBED_ENDPOINT", "https://www.youtube.com/oembed")

    # Directory for the JSON record store; empty keeps analyses in memory only
    STORE_DIR: str = os.getenv("STORE_DIR", "")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Where the CLI saves transcript and analysis files, one subdirectory per video
    OUT_DIR: Path = Path(os.getenv("OUT_DIR", "./out")).resolve()

    @classmethod
    def validate(cls) -> None:
        """Validate that required configuration is present."""
        if not cls.OPENAI_API_KEY:
            raise ValueError(
                "OPENAI_API_KEY is required. Please set it in your .env file or environment variables."
            )


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Route application logs to stderr at the configured level."""
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
