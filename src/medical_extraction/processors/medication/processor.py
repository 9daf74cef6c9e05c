# ============================================================================
# src/medical_extraction/processors/medication/processor.py
# ============================================================================
"""
Medication Label Processor

Extracts a single medication record from the OCR text of a US pharmacy
label:
- Drug name and strength
- Dosage form and directions
- Pharmacy, pharmacy phone, Rx number, NDC
- Quantity, refills, fill date
- Patient name and prescriber

The overall confidence tier reflects how many of name, strength and
directions were found.
"""

from typing import Any, Dict, Optional

from ...core.context import MedicationLabelResult, NormalizedDocument
from ..assembler import assemble_medication_result
from ..base_processor import BaseProcessor
from .label_resolver import resolve_medication_label


class MedicationLabelProcessor(BaseProcessor):
    """
    Single-record extraction for pharmacy medication labels.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

    def get_name(self) -> str:
        return "MedicationLabelProcessor"

    def empty_result(self, document: NormalizedDocument) -> MedicationLabelResult:
        return assemble_medication_result(document, {})

    def extract(self, document: NormalizedDocument) -> MedicationLabelResult:
        attributes, source_lines = resolve_medication_label(document, self.settings)
        result = assemble_medication_result(document, attributes, source_lines)

        self.logger.info(
            f"Medication extraction: confidence {result.confidence.value}, "
            f"{len(result.found_attributes())} attributes found"
        )
        return result


def extract_medication_label(
    text: Optional[str],
    config: Optional[Dict[str, Any]] = None
) -> MedicationLabelResult:
    """Extract a medication record from a pharmacy label transcript."""
    return MedicationLabelProcessor(config).process(text)
