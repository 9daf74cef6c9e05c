# ============================================================================
# src/medical_extraction/processors/medication/line_classifier.py
# ============================================================================
"""
Medication Label Line Classifier

A pharmacy label prints the drug name, the patient's name, the pharmacy's
name/address/phone and the dosing directions as visually similar short
lines, most of them unlabelled. This module ranks lines for the drug-name
role in two passes:

1. Filtering: drop lines that are clearly something else (address, phone,
   administrative text) and lines shaped like a person's name. Picking "the
   most prominent short line" without the person-name rule selects the
   patient instead of the drug.

2. Scoring: score_line() is a pure function of the line text and its
   position, so it can be tested against literal label lines.

   +10  number followed by a dosage unit ("100MG")
   +2   dosage-form word or "micro"
   +2   word with a common drug-name ending (-ine, -pril, -statin, ...)
   -4   more than 10 digits (address/phone noise)
   -6   street-type keyword
   -5   first line of the document, -2 for the second

The best line wins; equal scores keep the earliest line.
"""

import re
from typing import Collection, List, Sequence

from ...config import ExtractionSettings, extraction_settings
from ...constants.medication_terms import (
    ADDRESS_PATTERN,
    ADMINISTRATIVE_KEYWORD_PATTERN,
    DOSAGE_FORM_PATTERN,
    DRUG_SUFFIX_PATTERN,
    NUMBER_WITH_UNIT_PATTERN,
    PATIENT_LABEL_PATTERN,
    PERSON_NAME_TOKEN_PATTERN,
    PHONE_LIKE_PATTERN,
    PRESCRIBER_LABEL_PATTERN,
    SCORING_FORM_PATTERN,
    STREET_KEYWORD_PATTERN,
    UNIT_WORD_PATTERN,
)
from ...core.context import ScoredLine

DOSAGE_UNIT_SCORE = 10
DOSAGE_FORM_SCORE = 2
DRUG_SUFFIX_SCORE = 2
DIGIT_NOISE_PENALTY = -4
STREET_KEYWORD_PENALTY = -6
POSITION_PENALTIES = {0: -5, 1: -2}


def looks_like_person_name(line: str) -> bool:
    """
    "JOHN A WHITEHEAD", "Mary J. Smith"

    2-4 whitespace-separated alphabetic tokens (an initial may carry a
    period), no digits, and no dosage unit or dosage form vocabulary.
    """
    line = line.strip()
    if not line or re.search(r'\d', line):
        return False
    if UNIT_WORD_PATTERN.search(line) or DOSAGE_FORM_PATTERN.search(line):
        return False
    # Wider than units alone: keeps "PROGESTERONE MICRO" a drug-name
    # candidate when its strength is printed on another line
    if SCORING_FORM_PATTERN.search(line):
        return False

    tokens = line.split()
    if len(tokens) < 2 or len(tokens) > 4:
        return False
    return all(PERSON_NAME_TOKEN_PATTERN.match(token) for token in tokens)


def looks_like_address(line: str) -> bool:
    return bool(ADDRESS_PATTERN.search(line))


def looks_like_phone(line: str) -> bool:
    return bool(PHONE_LIKE_PATTERN.search(line))


def is_administrative(line: str) -> bool:
    return bool(ADMINISTRATIVE_KEYWORD_PATTERN.search(line))


def is_role_label(line: str) -> bool:
    """Labelled patient or prescriber line (Pt:, Provider:, Prescribed by ...)."""
    return bool(PATIENT_LABEL_PATTERN.search(line) or PRESCRIBER_LABEL_PATTERN.search(line))


def is_name_candidate(line: str, settings: ExtractionSettings = extraction_settings) -> bool:
    """Filtering pass for the drug-name role."""
    if not settings.NAME_LINE_MIN_LENGTH <= len(line) <= settings.NAME_LINE_MAX_LENGTH:
        return False
    if not re.search(r'[A-Za-z]', line):
        return False
    if looks_like_address(line) or looks_like_phone(line) or is_administrative(line):
        return False
    if is_role_label(line):
        return False
    return not looks_like_person_name(line)


def score_line(line: str, line_index: int, max_digits: int = 10) -> int:
    """Drug-name score for one line; higher is more drug-like."""
    score = 0

    if NUMBER_WITH_UNIT_PATTERN.search(line):
        score += DOSAGE_UNIT_SCORE
    if SCORING_FORM_PATTERN.search(line):
        score += DOSAGE_FORM_SCORE
    if DRUG_SUFFIX_PATTERN.search(line):
        score += DRUG_SUFFIX_SCORE

    if sum(ch.isdigit() for ch in line) > max_digits:
        score += DIGIT_NOISE_PENALTY
    if STREET_KEYWORD_PATTERN.search(line):
        score += STREET_KEYWORD_PENALTY

    score += POSITION_PENALTIES.get(line_index, 0)
    return score


def rank_name_lines(
    lines: Sequence[str],
    settings: ExtractionSettings = extraction_settings,
    exclude: Collection[int] = ()
) -> List[ScoredLine]:
    """
    Scored name candidates, best first.

    Args:
        lines: Normalized document lines
        settings: Length bounds and digit-noise threshold
        exclude: Line indexes already claimed by another role
    """
    scored = [
        ScoredLine(
            line=line,
            line_index=index,
            score=score_line(line, index, settings.MAX_NAME_LINE_DIGITS),
        )
        for index, line in enumerate(lines)
        if index not in exclude and is_name_candidate(line, settings)
    ]
    # sorted() is stable: equal scores stay in document order
    return sorted(scored, key=lambda s: s.score, reverse=True)


def strip_strength(line: str) -> str:
    """Remove "100MG"-style strength tokens and collapse spacing."""
    stripped = NUMBER_WITH_UNIT_PATTERN.sub('', line)
    return re.sub(r'\s{2,}', ' ', stripped).strip()
