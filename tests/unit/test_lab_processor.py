# ============================================================================
# FILE: tests/unit/test_lab_processor.py
# ============================================================================
"""
Unit tests for lab report extraction
"""

import pytest

from medical_extraction import extract_lab_candidates
from medical_extraction.constants.lab_fields import LAB_FIELD_REGISTRY, find_lab_unit
from medical_extraction.core.context import ConfidenceLevel, LabAnalyte
from medical_extraction.processors.lab import LabProcessor
from medical_extraction.processors.lab.field_resolver import (
    collect_matches,
    deduplicate,
    match_line,
)


def test_lab_values_with_units_and_date(sample_lab_text):
    """A1c and LDL with units are high confidence and dated"""
    result = extract_lab_candidates(sample_lab_text)

    assert result.detected_date == "2024-03-01"
    assert [c.field_key for c in result.candidates] == [LabAnalyte.A1C, LabAnalyte.LDL]

    a1c = result.get(LabAnalyte.A1C)
    assert a1c.value == 7.2
    assert a1c.unit == "%"
    assert a1c.confidence_tier == ConfidenceLevel.HIGH
    assert a1c.collected_at == "2024-03-01"
    assert a1c.display_name == "Hemoglobin A1c"

    ldl = result.get(LabAnalyte.LDL)
    assert ldl.value == 130
    assert ldl.unit == "mg/dL"
    assert ldl.confidence_tier == ConfidenceLevel.HIGH
    assert ldl.source_line == "LDL 130 mg/dL"


def test_lab_value_without_unit_is_medium():
    """A bare value has no unit and medium confidence"""
    result = extract_lab_candidates("Creatinine 1.1")

    assert len(result.candidates) == 1
    candidate = result.candidates[0]
    assert candidate.field_key == LabAnalyte.CREATININE
    assert candidate.value == 1.1
    assert candidate.unit is None
    assert candidate.confidence_tier == ConfidenceLevel.MEDIUM


def test_lab_missing_date_requires_manual_entry():
    """Candidates survive without a date; the host must ask for one"""
    result = extract_lab_candidates("Creatinine 1.1")

    assert result.detected_date is None
    assert result.requires_manual_date
    assert result.candidates[0].collected_at is None


def test_full_panel(sample_full_lab_text):
    """Every analyte once, in registry order, ignoring ratio and non-HDL lines"""
    result = extract_lab_candidates(sample_full_lab_text)

    assert result.detected_date == "2024-03-15"
    assert [c.field_key for c in result.candidates] == list(LAB_FIELD_REGISTRY)

    values = {c.field_key: (c.value, c.unit) for c in result.candidates}
    assert values[LabAnalyte.TOTAL_CHOL] == (212, "mg/dL")
    assert values[LabAnalyte.HDL] == (48, "mg/dL")
    assert values[LabAnalyte.LDL] == (138, "mg/dL")
    assert values[LabAnalyte.A1C] == (6.1, "%")
    assert values[LabAnalyte.CREATININE] == (1.02, "mg/dL")
    assert values[LabAnalyte.EGFR] == (78, "mL/min/1.73m2")


def test_unit_corroborated_line_replaces_bare_value():
    """A later line with a unit outranks an earlier bare value"""
    result = extract_lab_candidates("LDL 128\nLDL 130 mg/dL")

    ldl = result.get(LabAnalyte.LDL)
    assert ldl.value == 130
    assert ldl.confidence_tier == ConfidenceLevel.HIGH


def test_equal_confidence_keeps_first_line():
    """Ties keep the first occurrence in document order"""
    result = extract_lab_candidates("LDL 128 mg/dL\nLDL 130 mg/dL")

    assert len(result.candidates) == 1
    assert result.candidates[0].value == 128


def test_bare_value_never_downgrades():
    """Adding a unit-less duplicate does not lower confidence"""
    result = extract_lab_candidates("LDL 130 mg/dL\nLDL 99")

    assert result.get(LabAnalyte.LDL).confidence_tier == ConfidenceLevel.HIGH
    assert result.get(LabAnalyte.LDL).value == 130


def test_thousands_separator_is_stripped():
    """Comma separated values parse as numbers"""
    result = extract_lab_candidates("Total Cholesterol 1,250 mg/dL")

    assert result.get(LabAnalyte.TOTAL_CHOL).value == 1250


def test_label_without_number_yields_nothing():
    """A label with no numeric token is not a candidate"""
    result = extract_lab_candidates("LDL pending\nHDL see note")

    assert result.is_empty


def test_empty_input():
    """Empty text gives an empty result, not an error"""
    for text in (None, "", "   \n  "):
        result = extract_lab_candidates(text)
        assert result.candidates == []
        assert result.detected_date is None
        assert result.normalized_text == ""


def test_normalized_text_is_attached(sample_lab_text):
    """Normalized text is returned for the review screen"""
    result = extract_lab_candidates(sample_lab_text)

    assert result.normalized_text.splitlines()[0] == "Quest Diagnostics Lab Report"


def test_extraction_is_repeatable(sample_full_lab_text):
    """Same input, same result"""
    processor = LabProcessor()

    assert processor.process(sample_full_lab_text) == processor.process(sample_full_lab_text)


def test_to_dict(sample_lab_text):
    """Serialized candidates carry plain values"""
    data = extract_lab_candidates(sample_lab_text).to_dict()

    assert data["detected_date"] == "2024-03-01"
    assert data["candidates"][0]["field_key"] == "A1C"
    assert data["candidates"][0]["confidence_tier"] == "high"


# ----------------------------------------------------------------------------
# Resolver internals
# ----------------------------------------------------------------------------

@pytest.mark.parametrize("line,expected", [
    ("A1c 7.2 %", "%"),
    ("LDL 130 MG/DL", "mg/dL"),
    ("Glucose 5.4 mmol/L", "mmol/L"),
    ("Creatinine 88 umol/L", "umol/L"),
    ("eGFR 78 mL/min/1.73 m2", "mL/min/1.73m2"),
    ("A1c 7.2 percent", "%"),
    ("LDL 130", None),
])
def test_find_lab_unit(line, expected):
    """Units are recognized and canonicalized"""
    assert find_lab_unit(line) == expected


def test_match_line_skips_other_analytes():
    """Each analyte only matches its own label"""
    spec = LAB_FIELD_REGISTRY[LabAnalyte.HDL]

    assert match_line(spec, "LDL 130 mg/dL") is None
    assert match_line(spec, "Non-HDL Cholesterol 164 mg/dL") is None
    assert match_line(spec, "Chol/HDL Ratio 4.4") is None
    assert match_line(spec, "HDL 52 mg/dL").value == 52


def test_creatinine_abbreviation():
    """Cr is accepted as an abbreviation for creatinine"""
    spec = LAB_FIELD_REGISTRY[LabAnalyte.CREATININE]

    assert match_line(spec, "Cr: 0.9").value == 0.9


def test_collect_then_deduplicate():
    """One candidate per analyte after deduplication"""
    lines = ["LDL 128", "LDL 130 mg/dL", "HDL 50", "HDL 51"]
    found = collect_matches(lines)
    assert len(found) == 4

    resolved = deduplicate(found)
    assert [(c.field_key, c.value) for c in resolved] == [
        (LabAnalyte.LDL, 130),
        (LabAnalyte.HDL, 50),
    ]
