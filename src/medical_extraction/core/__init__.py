# ============================================================================
# src/medical_extraction/core/__init__.py
# ============================================================================
"""
Core data model for the medical extraction engine.

Confirmation payload builders live in ``core.records`` and document routing
in ``core.orchestrator``; both are imported from their modules directly.
"""

from .context import (
    ConfidenceLevel,
    LabAnalyte,
    NormalizedDocument,
    FieldSpec,
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
