# ============================================================================
# src/medical_extraction/core/orchestrator.py
# ============================================================================
"""
Extraction Orchestrator

Entry point for hosts that do not know the document type up front.

Flow:
1. Classify document type (lab report or medication label) unless given
2. Route to the matching processor
3. Return the processor's result envelope (None for unknown documents)
"""

from typing import Any, Dict, Optional, Union
import logging

from ..classifiers import DocumentClassifier
from ..constants import DocumentType, PROCESSOR_MAPPING
from ..processors import BaseProcessor, LabProcessor, MedicationLabelProcessor
from ..utils.exceptions import UnsupportedDocumentTypeError
from .context import ExtractionResult, MedicationLabelResult

ExtractionOutput = Union[ExtractionResult, MedicationLabelResult]

PROCESSOR_CLASSES = {
    "lab": LabProcessor,
    "medication": MedicationLabelProcessor,
}


class ExtractionOrchestrator:
    """
    Classifies OCR text and dispatches it to a processor.

    Holds no per-document state; one instance may serve concurrent calls.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.logger = logging.getLogger(__name__)
        self.classifier = DocumentClassifier(self.config)
        self._processors: Dict[str, BaseProcessor] = {}

    def get_processor(self, document_type: Union[DocumentType, str]) -> BaseProcessor:
        """
        Raises:
            UnsupportedDocumentTypeError: No processor for the type
        """
        try:
            doc_type = DocumentType(document_type)
        except ValueError:
            raise UnsupportedDocumentTypeError(
                f"Unknown document type: {document_type!r}", str(document_type)
            ) from None

        processor_key = PROCESSOR_MAPPING.get(doc_type)
        if processor_key is None:
            raise UnsupportedDocumentTypeError(
                f"No processor registered for {doc_type.value}", doc_type.value
            )

        if processor_key not in self._processors:
            self._processors[processor_key] = PROCESSOR_CLASSES[processor_key](self.config)
        return self._processors[processor_key]

    def process(
        self,
        text: Optional[str],
        document_type: Optional[Union[DocumentType, str]] = None
    ) -> Optional[ExtractionOutput]:
        """
        Args:
            text: Raw OCR transcript
            document_type: Skip classification and use this type

        Returns:
            Lab or medication result, or None when the document type
            could not be determined
        """
        if document_type is None:
            document_type, _ = self.classifier.classify(text)
            if document_type == DocumentType.UNKNOWN:
                return None

        processor = self.get_processor(document_type)
        self.logger.debug(
            "Dispatching document",
            extra={"document_type": DocumentType(document_type).value, "processor": processor.get_name()},
        )
        return processor.process(text)


def extract_document(
    text: Optional[str],
    document_type: Optional[Union[DocumentType, str]] = None,
    config: Optional[Dict[str, Any]] = None
) -> Optional[ExtractionOutput]:
    """Classify (if needed) and extract an OCR transcript."""
    return ExtractionOrchestrator(config).process(text, document_type)
