# ============================================================================
# src/medical_extraction/processors/base_processor.py
# ============================================================================
"""
Base Processor Class

All document processors (Lab, Medication label) inherit from this.

Defines the standard processor interface and common functionality.
Processors hold only read-only configuration, so a single instance can be
shared across threads.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

from ..config import ExtractionSettings, resolve_extraction_settings
from ..core.context import NormalizedDocument
from ..utils.logging import log_performance
from ..utils.text_normalizer import normalize_document

logger = logging.getLogger(__name__)


class BaseProcessor(ABC):
    """
    Abstract base class for all document processors.

    Each processor:
    1. Normalizes the OCR text
    2. Short-circuits documents too small to read
    3. Resolves its fields and assembles a typed result

    Subclasses must implement:
    - get_name(): Processor identifier
    - empty_result(): Result returned for unreadable documents
    - extract(): Field resolution on a normalized document
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        # Passed config takes precedence over environment settings
        self.settings: ExtractionSettings = resolve_extraction_settings(config)
        self.logger = logging.getLogger(f"{__name__}.{self.get_name()}")

    @abstractmethod
    def get_name(self) -> str:
        """Return processor name (e.g., 'LabProcessor')"""
        pass

    @abstractmethod
    def empty_result(self, document: NormalizedDocument):
        """Result for a document with too few lines to be plausible."""
        pass

    @abstractmethod
    def extract(self, document: NormalizedDocument):
        """Resolve fields from a normalized document."""
        pass

    def is_readable(self, document: NormalizedDocument) -> bool:
        return len(document) >= self.settings.MIN_DOCUMENT_LINES

    @log_performance(logger, "Document extraction")
    def process(self, text: Optional[str]):
        """
        Main processing method: normalize, check readability, extract.

        Args:
            text: Raw OCR transcript

        Returns:
            Processor-specific result envelope
        """
        document = normalize_document(text)

        if not self.is_readable(document):
            self.logger.info(
                f"Document has {len(document)} lines "
                f"(minimum {self.settings.MIN_DOCUMENT_LINES}); returning empty result"
            )
            return self.empty_result(document)

        return self.extract(document)
