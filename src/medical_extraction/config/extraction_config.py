# ============================================================================
# src/medical_extraction/config/extraction_config.py
# ============================================================================
"""
Extraction Heuristic Settings
- Minimum readable document size
- Medication name line bounds
- Directions block and patient-name search windows
- Document classification floor
"""

from typing import Any, Dict, Optional

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings

from ..utils.exceptions import ConfigurationError


class ExtractionSettings(BaseSettings):
    MIN_DOCUMENT_LINES: int = Field(
        default=1,
        ge=1,
        description="Below this many non-blank lines the document is treated as unreadable"
    )
    NAME_LINE_MIN_LENGTH: int = Field(
        default=4,
        ge=1,
        description="Shortest line considered as a medication name source"
    )
    NAME_LINE_MAX_LENGTH: int = Field(
        default=50,
        ge=1,
        description="Longest line considered as a medication name source"
    )
    MAX_NAME_LINE_DIGITS: int = Field(
        default=10,
        ge=0,
        description="Name candidates with more digits than this are penalized as address/phone noise"
    )
    DIRECTIONS_MAX_LINES: int = Field(
        default=6,
        ge=1,
        description="Maximum number of lines captured into the directions block"
    )
    PATIENT_NAME_SEARCH_LINES: int = Field(
        default=8,
        ge=1,
        description="Unlabelled patient names are only looked for in the first N lines"
    )
    CLASSIFICATION_MIN_SCORE: float = Field(
        default=1.0,
        ge=0.0,
        description="Minimum fingerprint score to accept a document type instead of 'unknown'"
    )


extraction_settings = ExtractionSettings()


def resolve_extraction_settings(overrides: Optional[Dict[str, Any]] = None) -> ExtractionSettings:
    """
    Merge per-call overrides onto the environment settings.

    Args:
        overrides: Setting names (upper case, as declared above) to values

    Returns:
        The shared settings instance when there is nothing to override,
        otherwise a new validated instance

    Raises:
        ConfigurationError: Unknown setting name or out-of-range value
    """
    if not overrides:
        return extraction_settings

    unknown = sorted(set(overrides) - set(ExtractionSettings.model_fields))
    if unknown:
        raise ConfigurationError(f"Unknown extraction settings: {', '.join(unknown)}")

    merged = {**extraction_settings.model_dump(), **overrides}
    try:
        return ExtractionSettings(**merged)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid extraction settings: {e}") from e
