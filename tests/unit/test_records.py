# ============================================================================
# FILE: tests/unit/test_records.py
# ============================================================================
"""
Unit tests for confirmation payloads (records and timeline entries)
"""

from dataclasses import replace

import pytest

from medical_extraction import extract_lab_candidates, extract_medication_label
from medical_extraction.constants import DocumentType
from medical_extraction.core.context import LabAnalyte
from medical_extraction.core.records import (
    build_lab_record,
    build_medication_record,
    build_timeline_entry,
)
from medical_extraction.utils.exceptions import (
    RecordValidationError,
    UnsupportedDocumentTypeError,
)


@pytest.fixture
def ldl_candidate(sample_lab_text):
    return extract_lab_candidates(sample_lab_text).get(LabAnalyte.LDL)


def test_build_lab_record(ldl_candidate):
    """Lab record uses the detected date and keeps provenance"""
    record = build_lab_record(ldl_candidate, source_doc_id="doc-1")

    assert record["name"] == "LDL"
    assert record["value"] == "130"
    assert record["units"] == "mg/dL"
    assert record["date"] == "2024-03-01"
    assert record["source"] == "patient_uploaded"
    assert record["notes"] == "OCR (high): LDL 130 mg/dL"
    assert record["meta"] == {"analyte": "LDL", "source_doc_id": "doc-1"}


def test_build_lab_record_user_date_wins(ldl_candidate):
    """A date confirmed by the user replaces the detected one"""
    record = build_lab_record(ldl_candidate, collected_at="2024-02-28")

    assert record["date"] == "2024-02-28"


def test_build_lab_record_rejects_bad_value(ldl_candidate):
    """Edited values must stay numeric and finite"""
    with pytest.raises(RecordValidationError) as exc_info:
        build_lab_record(replace(ldl_candidate, value="abc"))
    assert exc_info.value.field_name == "value"

    with pytest.raises(RecordValidationError):
        build_lab_record(replace(ldl_candidate, value=float("nan")))


def test_build_lab_record_requires_name(ldl_candidate):
    """A blank display name cannot be saved"""
    with pytest.raises(RecordValidationError) as exc_info:
        build_lab_record(replace(ldl_candidate, display_name=""))
    assert exc_info.value.field_name == "display_name"


def test_lab_timeline_entry(ldl_candidate):
    """Lab timeline summary carries value and unit"""
    entry = build_timeline_entry(DocumentType.LAB, build_lab_record(ldl_candidate))

    assert entry["type"] == "lab_added"
    assert entry["summary"] == "Lab added: LDL 130 mg/dL"
    assert entry["date"] == "2024-03-01"


def test_lab_timeline_entry_without_unit():
    """No trailing unit when the candidate has none"""
    candidate = extract_lab_candidates("Creatinine 1.1").candidates[0]
    entry = build_timeline_entry("lab", build_lab_record(candidate))

    assert entry["summary"] == "Lab added: Creatinine 1.1"
    assert entry["date"] is None


def test_build_medication_record(sample_full_label_text):
    """Medication record carries every confirmed attribute"""
    record = build_medication_record(extract_medication_label(sample_full_label_text))

    assert record["name"] == "LISINOPRIL TABLET"
    assert record["strength"] == "10 mg"
    assert record["refills"] == 2
    assert record["confidence"] == "high"
    assert record["source"] == "patient_uploaded"


def test_build_medication_record_requires_name():
    """A label without a name needs manual entry first"""
    with pytest.raises(RecordValidationError):
        build_medication_record(extract_medication_label(""))


def test_medication_timeline_entry(sample_full_label_text):
    """Medication timeline entry is dated by the fill date"""
    record = build_medication_record(extract_medication_label(sample_full_label_text))
    entry = build_timeline_entry(DocumentType.MEDICATION_LABEL, record)

    assert entry["type"] == "medication_added"
    assert entry["summary"] == "Medication added: LISINOPRIL TABLET"
    assert entry["date"] == "2026-01-23"
    assert entry["meta"]["strength"] == "10 mg"


def test_timeline_entry_unsupported_kind():
    """Only lab and medication records have timeline entries"""
    with pytest.raises(UnsupportedDocumentTypeError):
        build_timeline_entry("radiology", {"name": "x"})
