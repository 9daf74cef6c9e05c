# ============================================================================
# src/medical_extraction/extractors/anchors.py
# ============================================================================
"""
Anchor Extractors

Small independent scanners for low-ambiguity tokens: dates, phone numbers,
prescription and NDC identifiers, quantity and refill counts, strength and
dosage form.

Every function returns None when the anchor is absent; none of them raise,
so a missing anchor never blocks extraction of the other fields.
"""

import re
from typing import Iterable, Optional

from ..constants.medication_terms import (
    DOSAGE_FORMS,
    DOSAGE_FORM_PATTERN,
    STRENGTH_NUMBER_FIRST_PATTERN,
    STRENGTH_UNIT_FIRST_PATTERN,
)

ISO_DATE_PATTERN = re.compile(r'\b(\d{4})-(\d{2})-(\d{2})\b')
US_DATE_PATTERN = re.compile(r'\b(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})\b')

FILL_DATE_LABEL_PATTERN = re.compile(
    r'\b(?:date\s+filled|filled|fill\s+date|date)\s*[:#]?\s*'
    r'(\d{1,2}/\d{1,2}/(?:\d{4}|\d{2})|\d{4}-\d{2}-\d{2})\b',
    re.IGNORECASE
)

PHONE_PATTERNS = (
    re.compile(r'(\(\d{3}\)\s*\d{3}[-.\s]?\d{4})\b'),
    re.compile(r'\b(\d{3}[-.\s]\d{3}[-.\s]\d{4})\b'),
)

RX_NUMBER_PATTERNS = (
    # Rx: 1234567, RX#1234567, Prescription No. 1234567, Script 12345-678
    re.compile(
        r'\b(?:rx|prescription|script)\s*(?:#|no\.?|number)?\s*[:#]?\s*'
        r'(?=[A-Za-z0-9-]*\d)([A-Za-z0-9][A-Za-z0-9-]{4,})\b',
        re.IGNORECASE
    ),
    # Unlabelled "2388021-09681"; NDC-shaped codes have a second dash
    re.compile(r'\b(\d{5,}-\d{3,})\b(?!-)'),
)

# "IL 62704-1234": ZIP+4 after a state code, same shape as an unlabelled Rx number
ZIP_PLUS_FOUR_PATTERN = re.compile(r'\b[A-Z]{2},?\s+(\d{5}-\d{4})\b', re.IGNORECASE)

NDC_PATTERNS = (
    re.compile(
        r'\bNDC\s*(?:#|no\.?)?\s*[:#]?\s*(\d{4,5}[-\s]?\d{3,4}[-\s]?\d{1,2})\b',
        re.IGNORECASE
    ),
    # 5-4-2, 5-3-2 and 4-4-2 segment layouts
    re.compile(r'\b(\d{5}-\d{4}-\d{1,2}|\d{5}-\d{3}-\d{2}|\d{4}-\d{4}-\d{2})\b'),
)

QUANTITY_PATTERN = re.compile(
    r'\b(?:qty|quantity|disp|dispensed?)\s*[:#]?\s*(\d+)\b',
    re.IGNORECASE
)

REFILLS_PATTERN = re.compile(
    r'\b(?:refills?|rfl)\s*(?:left|remaining)?\s*[:#]?\s*(\d+)\b',
    re.IGNORECASE
)
NO_REFILLS_PATTERN = re.compile(r'\bno\s+refills?\b', re.IGNORECASE)


def us_date_to_iso(month: str, day: str, year: str) -> str:
    """Convert M/D/Y parts to YYYY-MM-DD; two-digit years are 20YY."""
    if len(year) == 2:
        year = f"20{year}"
    return f"{year}-{month.zfill(2)}-{day.zfill(2)}"


def find_date_iso(text: str) -> Optional[str]:
    """
    First date in the text as YYYY-MM-DD.

    ISO dates are preferred over M/D/Y anywhere in the text.
    """
    if not text:
        return None

    match = ISO_DATE_PATTERN.search(text)
    if match:
        return f"{match.group(1)}-{match.group(2)}-{match.group(3)}"

    match = US_DATE_PATTERN.search(text)
    if match:
        return us_date_to_iso(match.group(1), match.group(2), match.group(3))

    return None


def find_fill_date(lines: Iterable[str]) -> Optional[str]:
    """Labelled fill date ("Filled: 1/23/26"), else the first date on any line."""
    lines = list(lines)
    for line in lines:
        match = FILL_DATE_LABEL_PATTERN.search(line)
        if match:
            return find_date_iso(match.group(1))

    for line in lines:
        date = find_date_iso(line)
        if date:
            return date
    return None


def find_phone(text: str) -> Optional[str]:
    """(555) 555-5555, 555-555-5555 or 555.555.5555"""
    if not text:
        return None
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def find_rx_number(text: str) -> Optional[str]:
    """Labelled Rx number, else the first bare identifier that is not a ZIP+4."""
    if not text:
        return None
    labelled, unlabelled = RX_NUMBER_PATTERNS

    match = labelled.search(text)
    if match:
        return match.group(1).strip()

    zip_starts = {m.start(1) for m in ZIP_PLUS_FOUR_PATTERN.finditer(text)}
    for match in unlabelled.finditer(text):
        if match.start(1) not in zip_starts:
            return match.group(1)
    return None


def find_ndc(text: str) -> Optional[str]:
    """NDC code with any internal spaces turned into dashes."""
    if not text:
        return None
    for pattern in NDC_PATTERNS:
        match = pattern.search(text)
        if match:
            return re.sub(r'\s+', '-', match.group(1))
    return None


def find_quantity(lines: Iterable[str]) -> Optional[int]:
    """Qty: 30, Quantity 60, QTY 90"""
    for line in lines:
        match = QUANTITY_PATTERN.search(line)
        if match:
            return int(match.group(1))
    return None


def find_refills(lines: Iterable[str]) -> Optional[int]:
    """Refills: 2, Refill 0, Rfl: 1, No refills"""
    for line in lines:
        match = REFILLS_PATTERN.search(line)
        if match:
            return int(match.group(1))
        if NO_REFILLS_PATTERN.search(line):
            return 0
    return None


def find_strength(text: str) -> Optional[str]:
    """
    Strength as "<number> <unit>", e.g. "100 mg".

    Scans the whole text rather than the line that won the name scoring.
    Number-then-unit is tried before unit-then-number.
    """
    if not text:
        return None

    match = STRENGTH_NUMBER_FIRST_PATTERN.search(text)
    if match:
        return f"{match.group(1)} {match.group(2).lower()}"

    match = STRENGTH_UNIT_FIRST_PATTERN.search(text)
    if match:
        return f"{match.group(2)} {match.group(1).lower()}"

    return None


def find_dosage_form(text: str) -> Optional[str]:
    """Canonical dosage form of the first form word ("TAB" -> "tablet")."""
    if not text:
        return None
    match = DOSAGE_FORM_PATTERN.search(text)
    if match:
        return DOSAGE_FORMS[match.group(1).lower()]
    return None
