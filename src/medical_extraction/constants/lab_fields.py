# ============================================================================
# src/medical_extraction/constants/lab_fields.py
# ============================================================================
"""
Lab Field Spec Registry

One FieldSpec per supported analyte. Adding an analyte means adding an entry
here (and a LabAnalyte member); the resolver has no per-analyte code.

Matchers look for the analyte label followed, within a short run of
non-digit characters, by the numeric result. The number is captured in the
named group ``value``; thousands separators are allowed and stripped later.
"""

import re
from types import MappingProxyType
from typing import Optional, Tuple

from ..core.context import FieldSpec, LabAnalyte

# "7.2", "130", "1,250.5"
VALUE = r'(?P<value>\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)'


def _matcher(label: str, gap: int = 25) -> "re.Pattern[str]":
    return re.compile(label + r'[^0-9]{0,%d}' % gap + VALUE, re.IGNORECASE)


LAB_FIELD_SPECS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        key=LabAnalyte.A1C,
        display_name="Hemoglobin A1c",
        matchers=(
            _matcher(r'\b(?:A1c|HbA1c|HgbA1c|Hemoglobin\s+A1c)\b', gap=20),
            _matcher(r'\bGlycohemoglobin\b', gap=20),
        ),
    ),
    FieldSpec(
        key=LabAnalyte.LDL,
        display_name="LDL",
        matchers=(
            _matcher(r'\bLDL\b'),
            _matcher(r'\bLDL[- ]?C\b'),
        ),
    ),
    FieldSpec(
        key=LabAnalyte.HDL,
        display_name="HDL",
        matchers=(
            # "Non-HDL Cholesterol" and "Chol/HDL Ratio" are different results
            _matcher(r'(?<!non-)(?<!non )(?<!/)\bHDL\b'),
            _matcher(r'(?<!non-)(?<!non )(?<!/)\bHDL[- ]?C\b'),
        ),
    ),
    FieldSpec(
        key=LabAnalyte.TOTAL_CHOL,
        display_name="Total cholesterol",
        matchers=(
            _matcher(r'\b(?:Total\s+Cholesterol|Cholesterol,\s*Total|Cholesterol\s+Total)\b'),
        ),
    ),
    FieldSpec(
        key=LabAnalyte.CREATININE,
        display_name="Creatinine",
        matchers=(
            _matcher(r'\bCreatinine\b'),
            _matcher(r'\bCr\b', gap=10),
        ),
    ),
    FieldSpec(
        key=LabAnalyte.EGFR,
        display_name="eGFR",
        matchers=(
            _matcher(r'\b(?:eGFR|Estimated\s+GFR|GFR)\b'),
        ),
    ),
)

LAB_FIELD_REGISTRY = MappingProxyType({spec.key: spec for spec in LAB_FIELD_SPECS})


# Units recognized on a matched line, longest alternatives first
LAB_UNIT_PATTERN = re.compile(
    r'(?<![A-Za-z])('
    r'mL/min/1\.73\s*m(?:2|²)'
    r'|mg/dL'
    r'|mmol/L'
    r'|[uµμ]mol/L'
    r'|percent'
    r'|%'
    r')(?![A-Za-z])',
    re.IGNORECASE
)

_CANONICAL_UNITS = (
    "mL/min/1.73m2",
    "mg/dL",
    "mmol/L",
    "umol/L",
    "µmol/L",
)

LAB_UNIT_CANONICAL = MappingProxyType({
    **{unit.lower(): unit for unit in _CANONICAL_UNITS},
    "ml/min/1.73m²": "mL/min/1.73m2",
    "μmol/l": "µmol/L",
    "percent": "%",
    "%": "%",
})


def canonical_lab_unit(token: str) -> Optional[str]:
    """Map an OCR unit token to its canonical spelling."""
    key = re.sub(r'\s+', '', token).lower()
    return LAB_UNIT_CANONICAL.get(key, token)


def find_lab_unit(line: str) -> Optional[str]:
    """First recognized lab unit on the line, canonicalized."""
    match = LAB_UNIT_PATTERN.search(line)
    if not match:
        return None
    return canonical_lab_unit(match.group(1))
