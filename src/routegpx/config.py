"""Configuration management."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


class Settings(BaseModel):
    """Application settings."""

    # Value of the creator attribute on generated <gpx> roots
    gpx_creator: str = Field(
        default_factory=lambda: os.getenv("GPX_CREATOR", "Peloton")
    )

    # Logging (only applied by the command line entry point)
    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"),
        validate_default=True,
    )

    # Output settings
    output_dir: Path = Field(
        default_factory=lambda: Path(
            os.getenv("OUTPUT_DIR", Path(__file__).parent.parent.parent / "output")
        )
    )

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        """Unknown level names fall back to WARNING."""
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            return "WARNING"
        return value


# Global settings instance
settings = Settings()
