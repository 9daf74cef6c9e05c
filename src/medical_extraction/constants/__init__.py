# ============================================================================
# src/medical_extraction/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .document_types import DocumentType, PROCESSOR_MAPPING
from .lab_fields import LAB_FIELD_SPECS, LAB_FIELD_REGISTRY, find_lab_unit
from .pharmacy_chains import PHARMACY_CHAINS, match_chain, normalize_pharmacy_name
from .medication_terms import DOSAGE_UNITS, DOSAGE_FORMS, DRUG_NAME_SUFFIXES
