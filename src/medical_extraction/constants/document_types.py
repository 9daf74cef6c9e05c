# ============================================================================
# src/medical_extraction/constants/document_types.py
# ============================================================================
"""
Document Types
- Photographed documents the engine can extract from
- Routing key of the processor for each type
"""

from enum import Enum


class DocumentType(str, Enum):
    """Result of classification; UNKNOWN has no processor."""
    LAB = "lab"
    MEDICATION_LABEL = "medication_label"
    UNKNOWN = "unknown"


# Keys of core.orchestrator.PROCESSOR_CLASSES
PROCESSOR_MAPPING = {
    DocumentType.LAB: "lab",
    DocumentType.MEDICATION_LABEL: "medication",
}
