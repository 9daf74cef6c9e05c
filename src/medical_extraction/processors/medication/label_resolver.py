# ============================================================================
# src/medical_extraction/processors/medication/label_resolver.py
# ============================================================================
"""
Medication Label Resolver

Picks one source line per role on a pharmacy label and reads the anchors
(strength, phone, identifiers, counts, dates) from the whole text.

Roles are resolved in a fixed order and each one claims its line(s):

    drug name -> pharmacy -> directions -> prescriber -> patient name

A later role never takes a line an earlier role claimed, which keeps the
drug name line from ever doubling as the patient, pharmacy or directions.
"""

import logging
from typing import Any, Dict, Optional, Sequence, Set, Tuple

from ...config import ExtractionSettings, extraction_settings
from ...constants.medication_terms import (
    ACTION_VERB_PATTERN,
    DIRECTIONS_STOP_PATTERN,
    DOCTOR_TOKEN_PATTERN,
    IDENTIFIER_SHAPE_PATTERN,
    PATIENT_LABEL_PATTERN,
    PRESCRIBER_LABEL_PATTERN,
)
from ...constants.pharmacy_chains import is_pharmacy_line, normalize_pharmacy_name
from ...core.context import NormalizedDocument
from ...extractors import anchors
from ...utils.text_normalizer import collapse_whitespace
from .line_classifier import (
    is_role_label,
    looks_like_address,
    looks_like_person_name,
    rank_name_lines,
    strip_strength,
)

logger = logging.getLogger(__name__)


class LineClaims:
    """Which line indexes each role has taken."""

    def __init__(self):
        self.roles: Dict[str, int] = {}
        self.taken: Set[int] = set()

    def claim(self, role: str, *indexes: int) -> None:
        self.roles[role] = indexes[0]
        self.taken.update(indexes)

    def is_free(self, index: int) -> bool:
        return index not in self.taken


def resolve_display_name(
    lines: Sequence[str],
    claims: LineClaims,
    settings: ExtractionSettings
) -> Optional[str]:
    """Best-scoring name line with its strength token removed."""
    for scored in rank_name_lines(lines, settings, exclude=claims.taken):
        name = strip_strength(scored.line)
        if name:
            claims.claim("display_name", scored.line_index)
            return name
    return None


def resolve_pharmacy(lines: Sequence[str], claims: LineClaims) -> Optional[str]:
    """First free line naming a known chain or containing "pharmacy"."""
    for index, line in enumerate(lines):
        if not claims.is_free(index) or not is_pharmacy_line(line):
            continue
        name = normalize_pharmacy_name(line)
        if name:
            claims.claim("pharmacy", index)
            return name
    return None


def _ends_directions(line: str) -> bool:
    if DIRECTIONS_STOP_PATTERN.search(line) or IDENTIFIER_SHAPE_PATTERN.search(line):
        return True
    return is_role_label(line)


def resolve_directions(
    lines: Sequence[str],
    claims: LineClaims,
    settings: ExtractionSettings
) -> Optional[str]:
    """
    Directions block: from the first free line with an action verb, up to
    DIRECTIONS_MAX_LINES lines, stopping at administrative markers,
    identifier-shaped numbers or a line another role already claimed.
    """
    start = next(
        (i for i, line in enumerate(lines) if claims.is_free(i) and ACTION_VERB_PATTERN.search(line)),
        None
    )
    if start is None:
        return None

    block = []
    end = min(len(lines), start + settings.DIRECTIONS_MAX_LINES)
    for index in range(start, end):
        line = lines[index]
        if not claims.is_free(index) or _ends_directions(line):
            break
        block.append(index)

    if not block:
        return None

    claims.claim("directions", *block)
    return collapse_whitespace(" ".join(lines[i] for i in block))


def resolve_prescriber(lines: Sequence[str], claims: LineClaims) -> Optional[str]:
    """Labelled "Prescriber:" line, else the first line with a Dr./Doctor token."""
    for index, line in enumerate(lines):
        if not claims.is_free(index):
            continue
        match = PRESCRIBER_LABEL_PATTERN.search(line)
        if match and match.group(1).strip():
            claims.claim("prescriber", index)
            return collapse_whitespace(match.group(1))

    for index, line in enumerate(lines):
        if not claims.is_free(index) or looks_like_address(line):
            continue
        match = DOCTOR_TOKEN_PATTERN.search(line)
        # "123 OAK DR" ends at the token; a prescriber has a name after it
        if match and any(ch.isalpha() for ch in line[match.end():]):
            claims.claim("prescriber", index)
            return collapse_whitespace(line[match.start():])
    return None


def resolve_patient_name(
    lines: Sequence[str],
    claims: LineClaims,
    settings: ExtractionSettings
) -> Optional[str]:
    """Labelled "Patient:" line, else the first person-shaped line near the top."""
    for index, line in enumerate(lines):
        if not claims.is_free(index):
            continue
        match = PATIENT_LABEL_PATTERN.search(line)
        if match and match.group(1).strip():
            claims.claim("patient_name", index)
            return collapse_whitespace(match.group(1))

    for index, line in enumerate(lines[:settings.PATIENT_NAME_SEARCH_LINES]):
        if not claims.is_free(index) or DOCTOR_TOKEN_PATTERN.search(line):
            continue
        if looks_like_person_name(line):
            claims.claim("patient_name", index)
            return line
    return None


def resolve_medication_label(
    document: NormalizedDocument,
    settings: ExtractionSettings = extraction_settings
) -> Tuple[Dict[str, Any], Dict[str, int]]:
    """
    Resolve every medication label attribute.

    Returns:
        (attributes, source_lines) where attributes are MedicationLabelResult
        field values and source_lines maps each line-based role to the
        index of its (first) source line
    """
    lines = document.lines
    joined = document.joined
    claims = LineClaims()

    attributes: Dict[str, Any] = {
        "display_name": resolve_display_name(lines, claims, settings),
        "pharmacy": resolve_pharmacy(lines, claims),
        "directions": resolve_directions(lines, claims, settings),
        "prescriber": resolve_prescriber(lines, claims),
        "patient_name": resolve_patient_name(lines, claims, settings),
        "strength": anchors.find_strength(joined),
        "dosage_form": anchors.find_dosage_form(joined),
        "pharmacy_phone": anchors.find_phone(joined),
        "rx_number": anchors.find_rx_number(joined),
        "ndc": anchors.find_ndc(joined),
        "quantity": anchors.find_quantity(lines),
        "refills": anchors.find_refills(lines),
        "fill_date": anchors.find_fill_date(lines),
    }

    logger.debug(
        f"Medication resolver: roles {sorted(claims.roles)}, "
        f"{sum(v is not None for v in attributes.values())}/{len(attributes)} attributes"
    )
    return attributes, dict(claims.roles)
