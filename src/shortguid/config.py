"""
Configuration management for shortguid.

Loads settings from a shortguid.toml file and SHORTGUID_* environment
variables using Pydantic.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "shortguid.toml"


class ShortGuidSettings(BaseSettings):
    """Settings for the shortguid command line tool."""

    model_config = SettingsConfigDict(env_prefix="SHORTGUID_")

    strict: bool = Field(
        default=True,
        description="Reject ShortGuids that are not the canonical encoding",
    )
    uuid_version: int = Field(
        default=4, description="UUID version used by the generate command (1 or 4)"
    )
    sql_schema: str = Field(
        default="public",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Schema for generated SQL functions",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level for the command line tool"
    )

    @field_validator("uuid_version")
    @classmethod
    def check_uuid_version(cls, value: int) -> int:
        """Only time-based and random UUIDs are generated."""
        if value not in (1, 4):
            raise ValueError(f"uuid_version must be 1 or 4, got {value}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_toml(cls, path: Path | str) -> ShortGuidSettings:
        """
        Load settings from a TOML file.

        Values are read from a ``[shortguid]`` table if present, otherwise
        from the top level of the file.

        Args:
            path: Path to shortguid.toml

        Returns:
            ShortGuidSettings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        logger.debug(f"Loaded settings from {config_path}")
        return cls(**data.get("shortguid", data))

    @classmethod
    def discover(cls, start_dir: Optional[Path] = None) -> ShortGuidSettings:
        """
        Find and load shortguid.toml, walking up from start_dir.

        Falls back to defaults (plus environment variables) if no file is found.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            ShortGuidSettings instance
        """
        current = Path(start_dir or Path.cwd()).resolve()

        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        logger.debug(f"No {CONFIG_FILENAME} found from {start_dir or Path.cwd()}, using defaults")
        return cls()
