# ============================================================================
# src/medical_extraction/processors/lab/processor.py
# ============================================================================
"""
Lab Report Processor

Proposes one candidate per supported analyte (A1c, LDL, HDL, total
cholesterol, creatinine, eGFR) from the OCR text of a lab printout.

The collection date is taken from the first date on the document. When no
date is found the candidates are still returned and ``detected_date`` is
left unset; the host must then ask for the date before saving.
"""

from typing import Any, Dict, Optional

from ...core.context import ExtractionResult, NormalizedDocument
from ...extractors.anchors import find_date_iso
from ..assembler import assemble_lab_result
from ..base_processor import BaseProcessor
from .field_resolver import resolve_lab_candidates


class LabProcessor(BaseProcessor):
    """
    Multi-value extraction for laboratory reports.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

    def get_name(self) -> str:
        return "LabProcessor"

    def empty_result(self, document: NormalizedDocument) -> ExtractionResult:
        return assemble_lab_result(document, None, [])

    def extract(self, document: NormalizedDocument) -> ExtractionResult:
        detected_date = find_date_iso(document.text)
        candidates = resolve_lab_candidates(document, collected_at=detected_date)

        self.logger.info(
            f"Lab extraction: {len(candidates)} candidates, "
            f"date {'found' if detected_date else 'missing'}"
        )
        return assemble_lab_result(document, detected_date, candidates)


def extract_lab_candidates(
    text: Optional[str],
    config: Optional[Dict[str, Any]] = None
) -> ExtractionResult:
    """Extract lab candidates from an OCR transcript."""
    return LabProcessor(config).process(text)
