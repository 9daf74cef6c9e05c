# ============================================================================
# src/medical_extraction/extractors/__init__.py
# ============================================================================
"""
Anchor extractors for low-ambiguity tokens.
"""

from .anchors import (
    find_date_iso,
    find_fill_date,
    find_phone,
    find_rx_number,
    find_ndc,
    find_quantity,
    find_refills,
    find_strength,
    find_dosage_form,
)

__all__ = [
    'find_date_iso',
    'find_fill_date',
    'find_phone',
    'find_rx_number',
    'find_ndc',
    'find_quantity',
    'find_refills',
    'find_strength',
    'find_dosage_form',
]
