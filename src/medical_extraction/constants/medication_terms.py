# ============================================================================
# src/medical_extraction/constants/medication_terms.py
# ============================================================================
"""
Medication Label Vocabulary

Keyword tables and compiled patterns used to tell apart the roles printed on
a US pharmacy label: drug name, strength, directions, patient, prescriber,
pharmacy and administrative codes.
"""

import re
from types import MappingProxyType

# Dosage units, as printed after (or occasionally before) the strength number
DOSAGE_UNITS = ("mg", "mcg", "ug", "µg", "g", "ml", "iu", "units", "unit", "%")

_UNIT_ALTERNATION = r'(?:mcg|mg|ug|µg|ml|iu|units|unit|g|%)'

# "100MG", "0.5 mL", "2.5%"
NUMBER_WITH_UNIT_PATTERN = re.compile(
    r'\b\d+(?:\.\d+)?\s*' + _UNIT_ALTERNATION + r'(?![A-Za-z])',
    re.IGNORECASE
)

# Strength, number first: group 1 number, group 2 unit
STRENGTH_NUMBER_FIRST_PATTERN = re.compile(
    r'\b(\d+(?:\.\d+)?)\s*(' + _UNIT_ALTERNATION + r')(?![A-Za-z])',
    re.IGNORECASE
)

# Strength, unit first ("MG 10"): group 1 unit, group 2 number
STRENGTH_UNIT_FIRST_PATTERN = re.compile(
    r'(?<![A-Za-z0-9])(' + _UNIT_ALTERNATION + r')\s*(\d+(?:\.\d+)?)\b',
    re.IGNORECASE
)

# Multi-letter unit words that never appear in a person's name
UNIT_WORD_PATTERN = re.compile(r'\b(?:mcg|mg|ug|ml|iu|units?)\b', re.IGNORECASE)

# Dosage-form words that earn the +2 name bonus
SCORING_FORM_PATTERN = re.compile(
    r'\b(?:micro|capsules?|tablets?|tabs?|caps?|solution|cream|ointment)\b',
    re.IGNORECASE
)

# Canonical dosage form for each printed variant
DOSAGE_FORMS = MappingProxyType({
    "capsule": "capsule",
    "capsules": "capsule",
    "cap": "capsule",
    "caps": "capsule",
    "tablet": "tablet",
    "tablets": "tablet",
    "tab": "tablet",
    "tabs": "tablet",
    "solution": "solution",
    "suspension": "suspension",
    "cream": "cream",
    "ointment": "ointment",
    "gel": "gel",
    "patch": "patch",
    "inhaler": "inhaler",
    "drops": "drops",
    "suppository": "suppository",
    "suppositories": "suppository",
    "injection": "injection",
})

DOSAGE_FORM_PATTERN = re.compile(
    r'\b(' + '|'.join(sorted(DOSAGE_FORMS, key=len, reverse=True)) + r')\b',
    re.IGNORECASE
)

# Endings common in generic drug names ("progesterone", "lisinopril", ...)
DRUG_NAME_SUFFIXES = ("ine", "ol", "one", "ide", "ate", "ium", "pam", "pril", "sartan", "statin")

DRUG_SUFFIX_PATTERN = re.compile(
    r'\b[a-z]{2,}(?:' + '|'.join(DRUG_NAME_SUFFIXES) + r')\b',
    re.IGNORECASE
)

# Full street words, and a "STATE 12345" zip tail; lines with these are addresses
ADDRESS_PATTERN = re.compile(
    r'\b(?:address|street|drive|road|avenue|boulevard|lane|highway|parkway|suite)\b'
    r'|\b[A-Z]{2}\s+\d{5}(?:-\d{4})?\b',
    re.IGNORECASE
)

# Street-type words including abbreviations, for the name-score penalty
STREET_KEYWORD_PATTERN = re.compile(
    r'\b(?:road|rd|street|st|drive|dr|ave|avenue|blvd|lane|ln)\b',
    re.IGNORECASE
)

PHONE_LIKE_PATTERN = re.compile(r'\(?\b\d{3}[-)\s.]?\s?\d{3}[-.\s]?\d{4}\b')

# Lines carrying any of these are never the drug name
ADMINISTRATIVE_KEYWORD_PATTERN = re.compile(
    r'\b(?:qty|quantity|refills?|pharmacy|prescriber|doctor|dr|patient|rx|ndc|mfg'
    r'|take|insert|apply|use|bedtime|nightly|every)\b',
    re.IGNORECASE
)

# First line of the directions block
ACTION_VERB_PATTERN = re.compile(
    r'\b(?:take|insert|apply|inhale|instill|use)\b',
    re.IGNORECASE
)

# Directions stop before administrative text
DIRECTIONS_STOP_PATTERN = re.compile(
    r'\b(?:qty|quantity|refills?|rx|prescriber|doctor|dr|mfg|manufacturer|ndc)\b',
    re.IGNORECASE
)

# "2388021-09681": rx/lot numbers printed without a label
IDENTIFIER_SHAPE_PATTERN = re.compile(r'\b\d{5,}-\d{3,}\b')

# One person-name token: letters, optionally an initial's period
PERSON_NAME_TOKEN_PATTERN = re.compile(r'^[A-Za-z]{1,20}\.?$')

PATIENT_LABEL_PATTERN = re.compile(
    r'^(?:patient(?:\s+name)?|pt)\b\s*[:#]?\s*(.+)$',
    re.IGNORECASE
)

PRESCRIBER_LABEL_PATTERN = re.compile(
    r'\b(?:prescriber|prescribed\s+by|provider)\s*[:#]?\s*(.+)$',
    re.IGNORECASE
)

DOCTOR_TOKEN_PATTERN = re.compile(r'\b(?:dr\.?|doctor)(?=\s|$)', re.IGNORECASE)
