# ============================================================================
# src/medical_extraction/processors/lab/field_resolver.py
# ============================================================================
"""
Lab Field Resolver

Applies the lab Field Spec Registry to a normalized document:

1. Every line is tested against every matcher of every FieldSpec
2. A hit yields a numeric value and, if present on the same line,
   a recognized unit
3. Unit present -> HIGH, value only -> MEDIUM
4. Duplicates are collapsed to one candidate per analyte: a strictly
   higher tier replaces the kept one, equal tiers keep the earlier line
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ...config import logging_settings
from ...constants.lab_fields import LAB_FIELD_SPECS, find_lab_unit
from ...core.context import (
    ConfidenceLevel,
    ExtractionCandidate,
    FieldSpec,
    LabAnalyte,
    NormalizedDocument,
)
from .utils.parsing import parse_numeric_value

logger = logging.getLogger(__name__)


def confidence_for_unit(unit: Optional[str]) -> ConfidenceLevel:
    return ConfidenceLevel.HIGH if unit else ConfidenceLevel.MEDIUM


def match_line(
    spec: FieldSpec,
    line: str,
    collected_at: Optional[str] = None
) -> Optional[ExtractionCandidate]:
    """
    Build a candidate for one spec on one line.

    The first matcher whose value token parses wins. Returns None when no
    matcher hits or no captured token parses to a finite number.
    """
    for token in spec.match_tokens(line):
        value = parse_numeric_value(token)
        if value is None:
            if logging_settings.LOG_SOURCE_LINES:
                logger.debug(f"Discarding unparsable {spec.key.value} value {token!r}")
            else:
                logger.debug(f"Discarding unparsable {spec.key.value} value")
            continue

        unit = find_lab_unit(line)
        return ExtractionCandidate(
            field_key=spec.key,
            display_name=spec.display_name,
            value=value,
            unit=unit,
            source_line=line,
            confidence_tier=confidence_for_unit(unit),
            collected_at=collected_at,
        )
    return None


def collect_matches(
    lines: Sequence[str],
    specs: Iterable[FieldSpec] = LAB_FIELD_SPECS,
    collected_at: Optional[str] = None
) -> List[ExtractionCandidate]:
    """All candidates in registry order, then document order within a spec."""
    found = []
    for spec in specs:
        for line in lines:
            candidate = match_line(spec, line, collected_at)
            if candidate is not None:
                found.append(candidate)
    return found


def deduplicate(candidates: Iterable[ExtractionCandidate]) -> List[ExtractionCandidate]:
    """
    Keep exactly one candidate per field key.

    A later candidate replaces the kept one only with a strictly higher
    confidence tier, so ties keep the first occurrence in document order.
    Output follows the order in which field keys first appeared.
    """
    best: Dict[LabAnalyte, ExtractionCandidate] = {}
    for candidate in candidates:
        existing = best.get(candidate.field_key)
        if existing is None or candidate.confidence_tier.rank > existing.confidence_tier.rank:
            best[candidate.field_key] = candidate
    return list(best.values())


def resolve_lab_candidates(
    document: NormalizedDocument,
    collected_at: Optional[str] = None,
    specs: Iterable[FieldSpec] = LAB_FIELD_SPECS
) -> List[ExtractionCandidate]:
    found = collect_matches(document.lines, specs, collected_at)
    resolved = deduplicate(found)
    logger.debug(
        f"Lab resolver: {len(found)} matches -> {len(resolved)} candidates "
        f"({', '.join(c.field_key.value for c in resolved) or 'none'})"
    )
    return resolved
