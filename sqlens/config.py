"""Configuration schema for sqlens.

Defines the sqlens.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from sqlens.validation import DEFAULT_MAX_QUERY_LENGTH


class Dialect(str, Enum):
    """SQL dialects the parser can read."""

    GENERIC = "generic"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SNOWFLAKE = "snowflake"
    BIGQUERY = "bigquery"
    REDSHIFT = "redshift"
    DUCKDB = "duckdb"
    TRINO = "trino"
    TSQL = "tsql"

    @property
    def sqlglot_dialect(self) -> str | None:
        """sqlglot read dialect; None selects sqlglot's generic reader."""
        if self is Dialect.GENERIC:
            return None
        return self.value


# Environment variable for default dialect
DEFAULT_DIALECT_ENV = "SQLENS_DIALECT"

DEFAULT_COMPLEXITY_THRESHOLD = 20


def get_default_dialect() -> Dialect:
    """Get default dialect from environment or fall back to generic."""
    env_value = os.environ.get(DEFAULT_DIALECT_ENV, "generic").lower()
    try:
        return Dialect(env_value)
    except ValueError:
        return Dialect.GENERIC


class LimitsConfig(BaseModel):
    """Input and diagnostic limits."""

    max_query_length: int = Field(DEFAULT_MAX_QUERY_LENGTH, gt=0)
    complexity_threshold: int = Field(DEFAULT_COMPLEXITY_THRESHOLD, ge=0)

    model_config = {"frozen": True}


class ServerConfig(BaseModel):
    """HTTP server settings for `sqlens serve`."""

    host: str = "127.0.0.1"
    port: int = Field(8000, gt=0, lt=65536)

    model_config = {"frozen": True}


class SqlensConfig(BaseModel):
    """
    Root configuration for sqlens.

    This is the schema for sqlens.yml files.

    Example:
        dialect: postgres

        limits:
          max_query_length: 100000
          complexity_threshold: 20

        server:
          host: 127.0.0.1
          port: 8000
    """

    dialect: Dialect = Field(default_factory=get_default_dialect)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    model_config = {"frozen": True}

    @field_validator("dialect", mode="before")
    @classmethod
    def parse_dialect(cls, v: Any) -> Dialect:
        """Parse dialect from string."""
        if isinstance(v, Dialect):
            return v
        if isinstance(v, str):
            try:
                return Dialect(v.lower())
            except ValueError:
                valid = [d.value for d in Dialect]
                raise ValueError(f"Invalid dialect '{v}'. Valid: {valid}")
        return Dialect(v)

    @classmethod
    def from_yaml(cls, content: str) -> SqlensConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        if data is None:
            data = {}
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Path | str) -> SqlensConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls.from_yaml(content)


# Config file discovery
CONFIG_FILENAMES = ["sqlens.yml", "sqlens.yaml", ".sqlens.yml", ".sqlens.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find sqlens.yml config file.

    Searches start_dir (or the current working directory) and then each
    parent directory up to the filesystem root.

    Args:
        start_dir: Directory to start search from

    Returns:
        Path to config file, or None if not found
    """
    if start_dir is None:
        start_dir = Path.cwd()
    else:
        start_dir = Path(start_dir)

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path | str | None = None) -> SqlensConfig:
    """
    Load configuration from file.

    If path is not provided, searches for sqlens.yml in current
    and parent directories.

    Raises:
        FileNotFoundError: If no config file found
        pydantic.ValidationError: If config is invalid
    """
    if path is None:
        path = find_config()
        if path is None:
            raise FileNotFoundError(
                "No sqlens.yml found. Create one with 'sqlens init' or pass --config"
            )
    else:
        path = Path(path)

    return SqlensConfig.from_file(path)
