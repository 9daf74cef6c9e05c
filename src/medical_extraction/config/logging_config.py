# ============================================================================
# src/medical_extraction/config/logging_config.py
# ============================================================================
"""
Logging Settings
- Log level and format
- Whether OCR line contents may appear in logs
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_FILE: Optional[Path] = Field(
        default=None,
        description="Optional log file in addition to stderr"
    )
    LOG_FORMAT_JSON: bool = Field(
        default=False,
        description="Emit JSON log records"
    )
    LOG_SOURCE_LINES: bool = Field(
        default=False,
        description="Allow OCR line text (patient data) in debug logs"
    )


logging_settings = LoggingSettings()
