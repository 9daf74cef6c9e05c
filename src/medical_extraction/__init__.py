# ============================================================================
# src/medical_extraction/__init__.py
# ============================================================================
"""
Heuristic structured-field extraction for OCR text of photographed medical
documents (lab report printouts, pharmacy medication labels).

Every call is pure and synchronous: text in, confidence-tiered candidates
out, for a person to confirm before anything is saved.
"""

from .constants import DocumentType
from .core.context import (
    ConfidenceLevel,
    LabAnalyte,
    ExtractionCandidate,
    ExtractionResult,
    MedicationLabelResult,
)
from .core.orchestrator import ExtractionOrchestrator, extract_document
from .processors import (
    LabProcessor,
    MedicationLabelProcessor,
    extract_lab_candidates,
    extract_medication_label,
)

__version__ = "0.1.0"

__all__ = [
    "DocumentType",
    "ConfidenceLevel",
    "LabAnalyte",
    "ExtractionCandidate",
    "ExtractionResult",
    "MedicationLabelResult",
    "ExtractionOrchestrator",
    "extract_document",
    "LabProcessor",
    "MedicationLabelProcessor",
    "extract_lab_candidates",
    "extract_medication_label",
]
