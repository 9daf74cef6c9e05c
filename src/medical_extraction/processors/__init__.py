"""
Document processors.
"""

from .base_processor import BaseProcessor
from .lab import LabProcessor, extract_lab_candidates
from .medication import MedicationLabelProcessor, extract_medication_label

__all__ = [
    'BaseProcessor',
    'LabProcessor',
    'extract_lab_candidates',
    'MedicationLabelProcessor',
    'extract_medication_label',
]
