"""
Centralized configuration management using Pydantic.

This module defines the Settings class which loads and validates the
converter's configuration from environment variables or .env file.

Module Input:
    - Environment variables from OS
    - .env file in project root (optional)
    - Default values defined in class

Module Output:
    - Validated configuration object (singleton)
    - Defaults for the command-line switches
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Converter settings loaded from environment variables and .env file.

    Command-line switches always take precedence; these values only fill in
    what the operator did not pass explicitly.

    Attributes:
        Conversion Defaults:
            default_schema (str): Schema qualifier for every table (default: "dbo")
            first_row_headers (bool): Treat the first sheet row as column names
            include_identity_column (bool): Inject an [Id] IDENTITY primary key
            numbers_as_decimal (bool): Read fractional numbers as exact decimals
            profile_workers (int): Threads used to profile columns (1 = sequential)

        Output:
            output_encoding (str): Encoding of the generated .sql file

        Logging Configuration:
            log_level (str): Minimum log level (default: "INFO")
            log_dir (Path): Directory for log files (default: "logs")
            log_file (str): Log file name (default: "excel2sql.log")
    """

    # ---------------- Conversion Defaults ----------------
    default_schema: str = "dbo"
    first_row_headers: bool = False
    include_identity_column: bool = False
    numbers_as_decimal: bool = False
    profile_workers: int = 1

    # ---------------- Output ----------------
    output_encoding: str = "utf-8"

    # ---------------- Logging ----------------
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    log_file: str = "excel2sql.log"

    # ---------------- Pydantic Settings ----------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_schema")
    @classmethod
    def _schema_not_blank(cls, value: str) -> str:
        value = value.strip()
        return value or "dbo"

    @field_validator("profile_workers")
    @classmethod
    def _workers_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("profile_workers must be >= 1")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


# Singleton instance shared across the app
settings = Settings()
