# ============================================================================
# FILE: tests/unit/test_orchestrator.py
# ============================================================================
"""
Unit tests for the extraction orchestrator
"""

import pytest

from medical_extraction import extract_document
from medical_extraction.constants import DocumentType
from medical_extraction.core.context import ExtractionResult, MedicationLabelResult
from medical_extraction.core.orchestrator import ExtractionOrchestrator
from medical_extraction.processors import LabProcessor, MedicationLabelProcessor
from medical_extraction.utils.exceptions import (
    ConfigurationError,
    UnsupportedDocumentTypeError,
)


def test_routes_lab_report(sample_lab_text):
    """Classified lab text goes to the lab processor"""
    result = extract_document(sample_lab_text)

    assert isinstance(result, ExtractionResult)
    assert len(result.candidates) == 2


def test_routes_medication_label(sample_full_label_text):
    """Classified label text goes to the medication processor"""
    result = extract_document(sample_full_label_text)

    assert isinstance(result, MedicationLabelResult)
    assert result.display_name == "LISINOPRIL TABLET"


def test_explicit_type_skips_classification():
    """A given type is used even when the text is ambiguous"""
    result = extract_document("Creatinine 1.1", document_type="lab")

    assert isinstance(result, ExtractionResult)
    assert result.candidates[0].value == 1.1


def test_unknown_document_returns_none():
    """Unclassifiable text yields no result"""
    assert extract_document("Meeting notes\nBring snacks") is None


def test_get_processor_caches_instances():
    """One processor instance per type"""
    orchestrator = ExtractionOrchestrator()

    lab = orchestrator.get_processor(DocumentType.LAB)
    assert isinstance(lab, LabProcessor)
    assert orchestrator.get_processor("lab") is lab
    assert isinstance(orchestrator.get_processor("medication_label"), MedicationLabelProcessor)


@pytest.mark.parametrize("document_type", ["radiology", DocumentType.UNKNOWN])
def test_get_processor_rejects_unsupported_types(document_type):
    """Types without a processor raise"""
    orchestrator = ExtractionOrchestrator()

    with pytest.raises(UnsupportedDocumentTypeError) as exc_info:
        orchestrator.get_processor(document_type)
    assert exc_info.value.document_type in ("radiology", "unknown")


def test_config_is_passed_to_processors():
    """Orchestrator config reaches the processors"""
    orchestrator = ExtractionOrchestrator({"DIRECTIONS_MAX_LINES": 3})

    processor = orchestrator.get_processor(DocumentType.MEDICATION_LABEL)
    assert processor.settings.DIRECTIONS_MAX_LINES == 3


def test_invalid_config_raises():
    """Bad settings are reported as configuration errors"""
    with pytest.raises(ConfigurationError):
        ExtractionOrchestrator({"DIRECTIONS_MAX_LINES": 0})
