"""
Document type classification.
"""

from .document_classifier import DocumentClassifier

__all__ = ['DocumentClassifier']
