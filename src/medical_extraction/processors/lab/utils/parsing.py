# src/medical_extraction/processors/lab/utils/parsing.py
"""
Parsing utilities for lab value extraction.
"""

import math
import re
from typing import Optional


def parse_numeric_value(value_str: Optional[str]) -> Optional[float]:
    """
    Parse a numeric token captured from a lab line.

    Handles values like:
    - "7.2"
    - "1,250"   (thousands separator)
    - " 130 "

    Returns None (never 0) for anything that does not parse to a finite
    number, so the caller can drop the candidate.
    """
    if not value_str:
        return None

    cleaned = value_str.replace(',', '').strip()
    if not cleaned or not re.fullmatch(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)', cleaned):
        return None

    try:
        value = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return value


def format_numeric_value(value: float) -> str:
    """Render 130.0 as "130" and 7.2 as "7.2"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
