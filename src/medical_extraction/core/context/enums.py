# ============================================================================
# src/medical_extraction/core/context/enums.py
# ============================================================================
"""
Extraction Enums
- Confidence tiers
- Supported lab analytes
"""

from enum import Enum


class ConfidenceLevel(str, Enum):
    HIGH = "high"       # corroborated (unit present / name + strength + directions)
    MEDIUM = "medium"   # value without unit / name with partial support
    LOW = "low"         # medication domain only

    @property
    def rank(self) -> int:
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    ConfidenceLevel.HIGH: 3,
    ConfidenceLevel.MEDIUM: 2,
    ConfidenceLevel.LOW: 1,
}


class LabAnalyte(str, Enum):
    A1C = "A1C"
    LDL = "LDL"
    HDL = "HDL"
    TOTAL_CHOL = "TOTAL_CHOL"
    CREATININE = "CREATININE"
    EGFR = "EGFR"
