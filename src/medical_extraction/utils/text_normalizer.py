# ============================================================================
# src/medical_extraction/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Cleans up OCR text before any field extraction runs:
- Converts every line terminator to "\\n"
- Collapses horizontal whitespace (tabs, non-breaking spaces) to one space
- Strips control characters left behind by OCR engines
- Trims each line and drops blank ones

Line order is preserved: it encodes the vertical position of the text on
the photographed document, and the label heuristics depend on it.
"""

import logging
import re
from typing import List, Optional

from ..core.context.document import NormalizedDocument

logger = logging.getLogger(__name__)

LINE_BREAK_PATTERN = re.compile(r'\r\n?|[\u2028\u2029\x0b\x0c\x85]')

# Horizontal whitespace including NBSP, narrow NBSP and the unicode space block
HORIZONTAL_SPACE_PATTERN = re.compile(r'[ \t\u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]+')

# C0/C1 controls except tab and newline, plus zero-width characters
CONTROL_CHAR_PATTERN = re.compile(r'[\x00-\x08\x0e-\x1f\x7f-\x84\x86-\x9f\u200b-\u200d\ufeff]')


def collapse_whitespace(text: str) -> str:
    """Collapse runs of horizontal whitespace to a single space and trim."""
    return HORIZONTAL_SPACE_PATTERN.sub(' ', text).strip()


def split_lines(text: Optional[str]) -> List[str]:
    """
    Split raw OCR text into cleaned, non-empty lines.

    Args:
        text: Raw OCR transcript (None is treated as empty)

    Returns:
        List of trimmed lines in document order
    """
    if not text:
        return []

    text = LINE_BREAK_PATTERN.sub('\n', str(text))
    text = CONTROL_CHAR_PATTERN.sub('', text)

    lines = []
    for raw_line in text.split('\n'):
        line = collapse_whitespace(raw_line)
        if line:
            lines.append(line)
    return lines


def normalize_document(text: Optional[str]) -> NormalizedDocument:
    """
    Build the normalized view of an OCR transcript.

    Never raises: empty or unreadable input yields a document with no lines.
    """
    lines = split_lines(text)
    logger.debug(f"Normalized OCR text into {len(lines)} lines")
    return NormalizedDocument(raw_text=text or '', lines=tuple(lines))
