"""
Lab report processing module.
"""

from .processor import LabProcessor, extract_lab_candidates

__all__ = ['LabProcessor', 'extract_lab_candidates']
