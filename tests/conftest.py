# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest


@pytest.fixture
def sample_lab_text():
    """Lipid panel and A1c printout as OCR'd from a phone photo"""
    return """
    Quest Diagnostics    Lab Report
    Collected: 2024-03-01
    Hemoglobin A1c: 7.2 %        Ref <5.7
    LDL 130 mg/dL
    """


@pytest.fixture
def sample_full_lab_text():
    """Every supported analyte, with distractor lines"""
    return "\n".join([
        "LABCORP  Specimen Collected 03/15/2024",
        "Cholesterol, Total   212 mg/dL",
        "HDL Cholesterol      48 mg/dL",
        "Non-HDL Cholesterol  164 mg/dL",
        "Chol/HDL Ratio       4.4",
        "LDL-C                138 mg/dL",
        "Hemoglobin A1c       6.1 %",
        "Creatinine           1.02 mg/dL",
        "eGFR                 78 mL/min/1.73m2",
    ])


@pytest.fixture
def sample_label_text():
    """Pharmacy label with patient above the drug line"""
    return "\n".join([
        "JOHN A WHITEHEAD",
        "PROGESTERONE MICRO 100MG",
        "TAKE ONE CAPSULE NIGHTLY",
        "WALGREENS PHARMACY",
    ])


@pytest.fixture
def sample_full_label_text():
    """Pharmacy label carrying every attribute"""
    return "\n".join([
        "CVS/pharmacy #4821",
        "1200 MAIN STREET SPRINGFIELD IL 62704",
        "(217) 555-0134",
        "Rx# 6104427",
        "MARY J SMITH",
        "LISINOPRIL 10 MG TABLET",
        "TAKE 1 TABLET BY MOUTH",
        "ONCE DAILY",
        "QTY: 30",
        "Refills: 2",
        "Dr. Alan Grant",
        "NDC 00093-1111-01",
        "Filled: 1/23/26",
    ])
