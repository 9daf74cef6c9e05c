# ============================================================================
# src/medical_extraction/core/context/candidates.py
# ============================================================================
"""
Extraction candidates and result envelopes.

Everything here is created fresh per extraction call and handed to the
caller for human confirmation; nothing is persisted by the engine.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Union

from .enums import ConfidenceLevel, LabAnalyte


@dataclass(frozen=True)
class ExtractionCandidate:
    """A proposed lab value awaiting confirmation."""
    field_key: LabAnalyte
    display_name: str
    value: Union[float, str]
    source_line: str
    confidence_tier: ConfidenceLevel
    unit: Optional[str] = None
    collected_at: Optional[str] = None  # YYYY-MM-DD, from the document

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field_key": self.field_key.value,
            "display_name": self.display_name,
            "value": self.value,
            "unit": self.unit,
            "source_line": self.source_line,
            "confidence_tier": self.confidence_tier.value,
            "collected_at": self.collected_at,
        }


@dataclass(frozen=True)
class ScoredLine:
    """Candidate line ranked for an ambiguous label role."""
    line: str
    line_index: int
    score: int


@dataclass
class ExtractionResult:
    """Lab report extraction: at most one candidate per analyte."""
    normalized_text: str = ""
    detected_date: Optional[str] = None
    candidates: List[ExtractionCandidate] = field(default_factory=list)

    def get(self, field_key: LabAnalyte) -> Optional[ExtractionCandidate]:
        for candidate in self.candidates:
            if candidate.field_key == field_key:
                return candidate
        return None

    @property
    def is_empty(self) -> bool:
        return not self.candidates

    @property
    def requires_manual_date(self) -> bool:
        """Candidates exist but the collection date must be entered by hand."""
        return bool(self.candidates) and self.detected_date is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "normalized_text": self.normalized_text,
            "detected_date": self.detected_date,
            "candidates": [c.to_dict() for c in self.candidates],
        }


@dataclass
class MedicationLabelResult:
    """Pharmacy label extraction: one optional value per attribute."""
    raw_ocr_text: str = ""
    confidence: ConfidenceLevel = ConfidenceLevel.LOW

    display_name: Optional[str] = None
    strength: Optional[str] = None
    dosage_form: Optional[str] = None
    directions: Optional[str] = None

    pharmacy: Optional[str] = None
    pharmacy_phone: Optional[str] = None
    rx_number: Optional[str] = None
    ndc: Optional[str] = None
    quantity: Optional[int] = None
    refills: Optional[int] = None
    fill_date: Optional[str] = None

    patient_name: Optional[str] = None
    prescriber: Optional[str] = None

    # Provenance: which normalized line fed each line-based role
    source_lines: Dict[str, int] = field(default_factory=dict)

    def found_attributes(self) -> List[str]:
        skip = {"raw_ocr_text", "confidence", "source_lines"}
        return [
            f.name for f in fields(self)
            if f.name not in skip and getattr(self, f.name) is not None
        ]

    def to_dict(self) -> Dict[str, Any]:
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("confidence", "source_lines")
        }
        data["confidence"] = self.confidence.value
        data["source_lines"] = dict(self.source_lines)
        return data
