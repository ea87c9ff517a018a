"""Quality checks for extraction results.

Key Components:
    - score: Completeness ratio over a canonical field list
    - validate_cable_record: Plausibility bounds for cable records
    - validate_result: Bounds checks dispatched on record type
"""
from elektro_extraction.services.quality.confidence import score
from elektro_extraction.services.quality.validation import (
    validate_cable_record,
    validate_result,
)

__all__ = [
    "score",
    "validate_cable_record",
    "validate_result",
]
