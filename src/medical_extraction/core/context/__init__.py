# src/medical_extraction/core/context/__init__.py

from .enums import ConfidenceLevel, LabAnalyte
from .document import NormalizedDocument
from .field_spec import FieldSpec
from .candidates import (
    ExtractionCandidate,
    ScoredLine,
    ExtractionResult,
    MedicationLabelResult,
)

__all__ = [
    "ConfidenceLevel",
    "LabAnalyte",
    "NormalizedDocument",
    "FieldSpec",
    "ExtractionCandidate",
    "ScoredLine",
    "ExtractionResult",
    "MedicationLabelResult",
]
