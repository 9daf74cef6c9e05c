# src/medical_extraction/processors/lab/utils/__init__.py

from .parsing import (
    parse_numeric_value,
    format_numeric_value,
)

__all__ = [
    "parse_numeric_value",
    "format_numeric_value",
]
