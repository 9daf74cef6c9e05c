# ============================================================================
# src/medical_extraction/core/context/document.py
# ============================================================================
"""
Normalized OCR document, created once per extraction call.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class NormalizedDocument:
    raw_text: str
    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Normalized text, one cleaned line per row."""
        return "\n".join(self.lines)

    @property
    def joined(self) -> str:
        """All lines joined with single spaces, for whole-document scans."""
        return " ".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines
