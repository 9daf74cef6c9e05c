# ============================================================================
# src/medical_extraction/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the medical extraction engine.

Extraction itself never raises for malformed or sparse OCR text; missing
fields are modeled as absent candidates. These exceptions cover caller
errors: bad configuration, unsupported document types, and incomplete
records handed to the confirmation step.
"""


class MedicalExtractionError(Exception):
    """Base exception for all medical extraction errors."""
    pass


class ConfigurationError(MedicalExtractionError):
    """Invalid configuration."""
    pass


class UnsupportedDocumentTypeError(MedicalExtractionError):
    """No processor is registered for the requested document type."""
    def __init__(self, message: str, document_type: str):
        super().__init__(message)
        self.document_type = document_type


class ValidationError(MedicalExtractionError):
    """Error during data validation."""
    pass


class RecordValidationError(ValidationError):
    """A confirmed candidate is missing a field required for persistence."""
    def __init__(self, message: str, field_name: str):
        super().__init__(message)
        self.field_name = field_name
