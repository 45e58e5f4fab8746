"""Configuration management for the linkscan command line."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


DEFAULT_MAX_INPUT_LENGTH = 1_000_000


@dataclass
class Config:
    """Settings loaded from environment variables."""

    # Longest input the CLI will scan, in characters (0 = no limit)
    max_input_length: int

    # Logging
    log_level: int

    # Default for --unique
    unique: bool

    @classmethod
    def load(cls, env_path: Optional[Path] = None) -> "Config":
        """Load configuration from environment variables.

        Args:
            env_path: Optional path to .env file. If not provided, looks for .env
                      in the current working directory.

        Returns:
            Config instance with all settings loaded.

        Raises:
            ValueError: If a variable is set to an invalid value.
        """
        # Load .env file
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv(Path.cwd() / ".env")

        max_input_length_str = os.getenv(
            "LINKSCAN_MAX_INPUT_LENGTH", str(DEFAULT_MAX_INPUT_LENGTH)
        )
        try:
            max_input_length = int(max_input_length_str)
        except ValueError:
            raise ValueError(
                f"LINKSCAN_MAX_INPUT_LENGTH must be an integer, got {max_input_length_str!r}"
            )
        if max_input_length < 0:
            raise ValueError("LINKSCAN_MAX_INPUT_LENGTH must not be negative")

        log_level_name = os.getenv("LINKSCAN_LOG_LEVEL", "INFO").upper()
        log_level = logging.getLevelName(log_level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown LINKSCAN_LOG_LEVEL: {log_level_name}")

        unique = os.getenv("LINKSCAN_UNIQUE", "false").lower() in ("true", "1", "yes")

        return cls(
            max_input_length=max_input_length,
            log_level=log_level,
            unique=unique,
        )

    def validate(self) -> list[str]:
        """Validate the configuration and return any warnings.

        Returns:
            List of warning messages for optional but recommended settings.
        """
        warnings = []

        if self.max_input_length == 0:
            warnings.append(
                "LINKSCAN_MAX_INPUT_LENGTH is 0 - input size is not limited"
            )

        return warnings

    def accepts(self, text: str) -> bool:
        """Check whether text is within the configured input cap."""
        return self.max_input_length == 0 or len(text) <= self.max_input_length
