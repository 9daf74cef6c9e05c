# ============================================================================
# src/medical_extraction/core/records.py
# ============================================================================
"""
Confirmation Payloads

After a person reviews and confirms a candidate, the host persists it as a
domain record plus a companion history (timeline) entry. This module builds
those payloads as plain dicts; writing them is the host's job.

No wall-clock values are filled in here: creation timestamps, and the
timeline date when the document had none, belong to the host.
"""

from typing import Any, Dict, Optional, Union

from ..constants import DocumentType
from ..processors.lab.utils.parsing import format_numeric_value
from ..utils.exceptions import RecordValidationError, UnsupportedDocumentTypeError
from .context import ExtractionCandidate, MedicationLabelResult

RECORD_SOURCE = "patient_uploaded"


def build_lab_record(
    candidate: ExtractionCandidate,
    collected_at: Optional[str] = None,
    source_doc_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Lab result record for a confirmed candidate.

    Args:
        candidate: Candidate as confirmed (possibly edited) by the user
        collected_at: Collection date entered or confirmed by the user;
            defaults to the date detected on the document
        source_doc_id: Host identifier of the stored source document

    Raises:
        RecordValidationError: Missing display name or non-numeric value
    """
    if not candidate.display_name:
        raise RecordValidationError("Lab record requires a display name", "display_name")
    if not isinstance(candidate.value, (int, float)) or isinstance(candidate.value, bool):
        raise RecordValidationError("Lab record requires a numeric value", "value")
    if candidate.value != candidate.value or candidate.value in (float("inf"), float("-inf")):
        raise RecordValidationError("Lab record requires a finite value", "value")

    return {
        "name": candidate.display_name,
        "value": format_numeric_value(candidate.value),
        "units": candidate.unit,
        "date": collected_at or candidate.collected_at,
        "source": RECORD_SOURCE,
        "notes": f"OCR ({candidate.confidence_tier.value}): {candidate.source_line}",
        "meta": {
            "analyte": candidate.field_key.value,
            "source_doc_id": source_doc_id,
        },
    }


def build_medication_record(result: MedicationLabelResult) -> Dict[str, Any]:
    """
    Medication record for a confirmed label.

    Raises:
        RecordValidationError: No medication name (the user must enter one)
    """
    if not result.display_name or not result.display_name.strip():
        raise RecordValidationError("Medication record requires a name", "display_name")

    return {
        "name": result.display_name.strip(),
        "strength": result.strength,
        "dosage_form": result.dosage_form,
        "directions": result.directions,
        "pharmacy": result.pharmacy,
        "pharmacy_phone": result.pharmacy_phone,
        "rx_number": result.rx_number,
        "ndc": result.ndc,
        "quantity": result.quantity,
        "refills": result.refills,
        "fill_date": result.fill_date,
        "prescriber": result.prescriber,
        "raw_ocr_text": result.raw_ocr_text,
        "confidence": result.confidence.value,
        "source": RECORD_SOURCE,
    }


def build_timeline_entry(
    record_kind: Union[DocumentType, str],
    record: Dict[str, Any]
) -> Dict[str, Any]:
    """
    History entry accompanying a saved record.

    Args:
        record_kind: DocumentType.LAB or DocumentType.MEDICATION_LABEL
        record: Payload from build_lab_record / build_medication_record
    """
    try:
        kind = DocumentType(record_kind)
    except ValueError:
        kind = DocumentType.UNKNOWN

    if kind == DocumentType.LAB:
        unit = f" {record['units']}" if record.get("units") else ""
        return {
            "type": "lab_added",
            "summary": f"Lab added: {record['name']} {record['value']}{unit}",
            "detail": record.get("notes"),
            "date": record.get("date"),
            "level": "low",
            "meta": {"source": "labResults", **record.get("meta", {})},
        }

    if kind == DocumentType.MEDICATION_LABEL:
        return {
            "type": "medication_added",
            "summary": f"Medication added: {record['name']}",
            "detail": record.get("directions"),
            "date": record.get("fill_date"),
            "level": "low",
            "meta": {
                "source": "medications",
                "name": record["name"],
                "strength": record.get("strength"),
                "directions": record.get("directions"),
            },
        }

    raise UnsupportedDocumentTypeError(
        f"No timeline entry for record kind {record_kind!r}", str(record_kind)
    )
