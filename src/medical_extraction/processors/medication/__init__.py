"""
Medication label processing module.
"""

from .processor import MedicationLabelProcessor, extract_medication_label

__all__ = ['MedicationLabelProcessor', 'extract_medication_label']
