# ============================================================================
# FILE: tests/unit/test_parsing.py
# ============================================================================
"""
Unit tests for lab value parsing utilities
"""

import pytest

from medical_extraction.processors.lab.utils import format_numeric_value, parse_numeric_value


@pytest.mark.parametrize("token,expected", [
    ("7.2", 7.2),
    ("130", 130.0),
    ("1,250", 1250.0),
    ("1,250.5", 1250.5),
    (" 0.9 ", 0.9),
])
def test_parse_numeric_value(token, expected):
    """Numeric tokens parse to floats"""
    assert parse_numeric_value(token) == expected


@pytest.mark.parametrize("token", [None, "", ",", "7.2.1", "abc", "inf", "nan", "1e999"])
def test_parse_numeric_value_rejects_garbage(token):
    """Unparsable tokens give None rather than zero"""
    assert parse_numeric_value(token) is None


def test_format_numeric_value():
    """Whole numbers lose the trailing .0"""
    assert format_numeric_value(130.0) == "130"
    assert format_numeric_value(7.2) == "7.2"
