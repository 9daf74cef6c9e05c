# ============================================================================
# src/medical_extraction/utils/__init__.py
# ============================================================================
"""
Utility modules for the medical extraction engine.
"""

from .exceptions import (
    MedicalExtractionError,
    ConfigurationError,
    UnsupportedDocumentTypeError,
    ValidationError,
    RecordValidationError,
)

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    log_performance,
)

from .text_normalizer import (
    collapse_whitespace,
    split_lines,
    normalize_document,
)

__all__ = [
    # Exceptions
    'MedicalExtractionError',
    'ConfigurationError',
    'UnsupportedDocumentTypeError',
    'ValidationError',
    'RecordValidationError',
    # Logging
    'setup_logging',
    'setup_logging_from_settings',
    'log_performance',
    # Text normalization
    'collapse_whitespace',
    'split_lines',
    'normalize_document',
]
