# ============================================================================
# src/medical_extraction/constants/pharmacy_chains.py
# ============================================================================
"""
Pharmacy Chain Lookup

Explicit table of common US pharmacy chains. Each canonical name lists the
spellings seen on labels, including the OCR misreads we have observed
(dropped leading letters, 1/l and 0/o swaps, "vv" for "w"). Matching is a
plain table lookup on word boundaries; there is no fuzzy matching.
"""

import re
from typing import Optional, Tuple

PHARMACY_CHAINS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Walgreens", ("walgreens", "walgreen", "algreens", "walareens", "wa1greens", "vvalgreens")),
    ("CVS", ("cvs", "cvs/pharmacy", "cv5")),
    ("Rite Aid", ("rite aid", "riteaid", "rite-aid", "rlte aid")),
    ("Costco", ("costco", "c0stco")),
    ("Walmart", ("walmart", "wal-mart", "wa1mart")),
    ("Kroger", ("kroger", "kr0ger")),
    ("Safeway", ("safeway", "safevvay")),
    ("Publix", ("publix", "pub1ix")),
    ("Sam's Club", ("sam's club", "sams club")),
)


def _chain_pattern(aliases: Tuple[str, ...]) -> "re.Pattern[str]":
    alternation = '|'.join(re.escape(alias) for alias in sorted(aliases, key=len, reverse=True))
    return re.compile(r'(?<![A-Za-z0-9])(?:' + alternation + r')(?![A-Za-z0-9])', re.IGNORECASE)


CHAIN_PATTERNS = tuple(
    (canonical, _chain_pattern(aliases)) for canonical, aliases in PHARMACY_CHAINS
)

PHARMACY_WORD_PATTERN = re.compile(r'\bpharmacy\b', re.IGNORECASE)

_LEADING_PHARMACY_LABEL = re.compile(r'^pharmacy\s*[:\-]?\s*', re.IGNORECASE)
_TRAILING_PHARMACY_WORD = re.compile(r'[\s,\-]*\bpharmacy\b[\s.]*$', re.IGNORECASE)


def match_chain(line: str) -> Optional[str]:
    """Canonical chain name if the line mentions a known chain."""
    for canonical, pattern in CHAIN_PATTERNS:
        if pattern.search(line):
            return canonical
    return None


def is_pharmacy_line(line: str) -> bool:
    return match_chain(line) is not None or bool(PHARMACY_WORD_PATTERN.search(line))


def normalize_pharmacy_name(line: str) -> Optional[str]:
    """
    Normalize a pharmacy line to a display name.

    Known chains (and their misreads) map to the canonical chain name.
    Otherwise a leading "Pharmacy:" label and a trailing "pharmacy" word are
    stripped. Returns None when nothing is left.
    """
    chain = match_chain(line)
    if chain:
        return chain

    name = _LEADING_PHARMACY_LABEL.sub('', line.strip())
    name = _TRAILING_PHARMACY_WORD.sub('', name)
    name = re.sub(r'\s+', ' ', name).strip()
    return name or None
