# ============================================================================
# src/medical_extraction/classifiers/document_classifier.py
# ============================================================================
"""
Document Classifier

Routes an OCR transcript to the lab or the medication-label processor using
weighted keyword fingerprints:

- keywords: vocabulary typical of the document type (+weight each)
- field hits: lab analytes recognized by the Field Spec Registry (lab) or
  a pharmacy chain / strength token (medication label)
- negative keywords: vocabulary of the *other* type (-weight each)

The higher score wins. A tie, or a best score under
CLASSIFICATION_MIN_SCORE, gives DocumentType.UNKNOWN.
"""

from typing import Any, Dict, Optional, Tuple
import logging
import re

from ..config import resolve_extraction_settings
from ..constants import DocumentType
from ..constants.lab_fields import LAB_FIELD_SPECS
from ..constants.pharmacy_chains import match_chain
from ..extractors.anchors import find_strength
from ..utils.text_normalizer import normalize_document


def _keywords(*words: str) -> "re.Pattern[str]":
    return re.compile(r'\b(?:' + '|'.join(words) + r')\b', re.IGNORECASE)


class DocumentClassifier:
    """
    Classifies OCR text as a lab report or a medication label.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.settings = resolve_extraction_settings(config)
        self.logger = logging.getLogger(__name__)
        self.patterns = self._load_classification_patterns()

    def get_name(self) -> str:
        return "DocumentClassifier"

    def _load_classification_patterns(self) -> Dict[DocumentType, Dict[str, Any]]:
        """
        Fingerprints per document type.

        Each keyword occurrence counts once per line, weighted.
        """
        return {
            DocumentType.LAB: {
                "keywords": _keywords(
                    r'lab(?:oratory)?', r'lab\s+report', r'specimen', r'collected',
                    r'reference\s+(?:range|interval)', r'results?', r'fasting',
                    r'lipid\s+panel', r'metabolic\s+panel', r'quest\s+diagnostics', r'labcorp',
                ),
                "keyword_weight": 1.0,
                "negative_keywords": _keywords(
                    r'refills?', r'qty', r'ndc', r'dispensed', r'prescriber',
                ),
                "negative_weight": 1.0,
                "field_weight": 2.0,
            },
            DocumentType.MEDICATION_LABEL: {
                "keywords": _keywords(
                    r'rx', r'refills?', r'qty', r'quantity', r'ndc', r'pharmacy',
                    r'prescriber', r'take', r'by\s+mouth', r'tablets?', r'capsules?',
                    r'dispensed', r'discard\s+after',
                ),
                "keyword_weight": 1.0,
                "negative_keywords": _keywords(
                    r'specimen', r'reference\s+(?:range|interval)', r'collected',
                ),
                "negative_weight": 1.0,
                "field_weight": 2.0,
            },
        }

    def _lab_field_hits(self, lines) -> int:
        hits = 0
        for spec in LAB_FIELD_SPECS:
            if any(spec.match_tokens(line) for line in lines):
                hits += 1
        return hits

    def _medication_field_hits(self, lines) -> int:
        hits = 0
        if any(match_chain(line) for line in lines):
            hits += 1
        if find_strength(" ".join(lines)):
            hits += 1
        return hits

    def score(self, text: Optional[str]) -> Dict[DocumentType, float]:
        """Fingerprint score for every supported document type."""
        lines = normalize_document(text).lines
        field_hits = {
            DocumentType.LAB: self._lab_field_hits(lines),
            DocumentType.MEDICATION_LABEL: self._medication_field_hits(lines),
        }

        scores = {}
        for doc_type, pattern in self.patterns.items():
            positive = sum(1 for line in lines if pattern["keywords"].search(line))
            negative = sum(1 for line in lines if pattern["negative_keywords"].search(line))
            scores[doc_type] = (
                positive * pattern["keyword_weight"]
                + field_hits[doc_type] * pattern["field_weight"]
                - negative * pattern["negative_weight"]
            )
        return scores

    def classify(self, text: Optional[str]) -> Tuple[DocumentType, float]:
        """
        Returns:
            (document_type, score); UNKNOWN when no type clearly wins
        """
        scores = self.score(text)
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        best_type, best_score = ranked[0]

        if best_score < self.settings.CLASSIFICATION_MIN_SCORE:
            self.logger.info(f"Classification below threshold ({best_score:.1f}); unknown document")
            return DocumentType.UNKNOWN, best_score

        if len(ranked) > 1 and ranked[1][1] == best_score:
            self.logger.info(f"Classification tie at {best_score:.1f}; unknown document")
            return DocumentType.UNKNOWN, best_score

        self.logger.info(f"Classified as {best_type.value} (score {best_score:.1f})")
        return best_type, best_score
