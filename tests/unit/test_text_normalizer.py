# ============================================================================
# FILE: tests/unit/test_text_normalizer.py
# ============================================================================
"""
Unit tests for OCR text normalization
"""

from medical_extraction.utils.text_normalizer import (
    collapse_whitespace,
    normalize_document,
    split_lines,
)


def test_split_lines_drops_blank_lines():
    """Blank and whitespace-only lines are removed"""
    assert split_lines("A1c 7.2\n\n   \nLDL 130\n") == ["A1c 7.2", "LDL 130"]


def test_split_lines_handles_mixed_line_endings():
    """CRLF, CR and unicode separators all split lines"""
    text = "one\r\ntwo\rthree\u2028four"
    assert split_lines(text) == ["one", "two", "three", "four"]


def test_split_lines_collapses_horizontal_whitespace():
    """Tabs and non-breaking spaces collapse to one space"""
    assert split_lines("LDL\t\t130\u00a0 mg/dL") == ["LDL 130 mg/dL"]


def test_split_lines_strips_control_characters():
    """Zero-width and control characters left by OCR are removed"""
    assert split_lines("\ufeffA1c\u200b 7.2\x07") == ["A1c 7.2"]


def test_split_lines_preserves_order():
    """Vertical order of the document is kept"""
    lines = split_lines("z\ny\nx")
    assert lines == ["z", "y", "x"]


def test_split_lines_none_and_empty():
    """Missing text yields no lines"""
    assert split_lines(None) == []
    assert split_lines("") == []


def test_collapse_whitespace():
    """Runs of spaces become one and ends are trimmed"""
    assert collapse_whitespace("  TAKE   ONE  ") == "TAKE ONE"


def test_normalize_document_views():
    """Document exposes newline and space joined views"""
    document = normalize_document("  A1c 7.2 \n LDL 130 ")

    assert document.lines == ("A1c 7.2", "LDL 130")
    assert document.text == "A1c 7.2\nLDL 130"
    assert document.joined == "A1c 7.2 LDL 130"
    assert len(document) == 2
    assert not document.is_empty


def test_normalize_document_empty_input():
    """Empty input never raises"""
    document = normalize_document(None)

    assert document.raw_text == ""
    assert document.is_empty
    assert document.text == ""
