# ============================================================================
# src/medical_extraction/processors/assembler.py
# ============================================================================
"""
Result Assembler

Packages resolved candidates into the typed result envelopes and derives
the overall medication confidence tier. No inference happens here.
"""

from typing import Any, Dict, Iterable, Optional

from ..core.context import (
    ConfidenceLevel,
    ExtractionCandidate,
    ExtractionResult,
    MedicationLabelResult,
    NormalizedDocument,
)


def assemble_lab_result(
    document: NormalizedDocument,
    detected_date: Optional[str],
    candidates: Iterable[ExtractionCandidate]
) -> ExtractionResult:
    return ExtractionResult(
        normalized_text=document.text,
        detected_date=detected_date,
        candidates=list(candidates),
    )


def medication_confidence(
    display_name: Optional[str],
    strength: Optional[str],
    directions: Optional[str]
) -> ConfidenceLevel:
    """
    HIGH: name, strength and directions all found
    MEDIUM: name plus one of strength/directions
    LOW: anything else
    """
    if display_name and strength and directions:
        return ConfidenceLevel.HIGH
    if display_name and (strength or directions):
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW


def assemble_medication_result(
    document: NormalizedDocument,
    attributes: Dict[str, Any],
    source_lines: Optional[Dict[str, int]] = None
) -> MedicationLabelResult:
    """
    Args:
        document: Normalized label text (attached as raw_ocr_text)
        attributes: MedicationLabelResult field values
        source_lines: Role name -> index of the line it came from
    """
    confidence = medication_confidence(
        attributes.get("display_name"),
        attributes.get("strength"),
        attributes.get("directions"),
    )
    return MedicationLabelResult(
        raw_ocr_text=document.text,
        confidence=confidence,
        source_lines=dict(source_lines or {}),
        **attributes,
    )
