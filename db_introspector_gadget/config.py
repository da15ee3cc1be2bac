"""Configuration management for db-introspector-gadget."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Literal, Optional

from .codegen.syntax import DEFAULT_SYNTAX_VERSION, OutputSyntaxVersion


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.db-introspector-gadget/.env
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".db-introspector-gadget" / ".env"
    if user_env.exists():
        return str(user_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set as ``DB_INTROSPECTOR_<FIELD>``; command-line
    options take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_INTROSPECTOR_",
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    connection_string: Optional[str] = Field(
        default=None,
        description="MySQL or Postgres connection string (mysql://... or postgres://...)"
    )
    schema_name: Optional[str] = Field(
        default=None,
        description="Database schema to introspect"
    )
    output_filename: str = Field(
        default="table_types.py",
        description="Python source file to write"
    )
    python_version: OutputSyntaxVersion = Field(
        default=DEFAULT_SYNTAX_VERSION,
        description="Minimum Python version the generated file must support"
    )
    preserve_column_names: bool = Field(
        default=True,
        description="Keep column names verbatim as TypedDict keys"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for diagnostic output"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
