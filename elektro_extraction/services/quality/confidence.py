"""Completeness score for extraction records.

The score is the fraction of canonical fields that were populated. It is a
coverage ratio, not a statistical confidence.
"""
from typing import Any, Sequence


def score(record: Any, canonical_fields: Sequence[str]) -> float:
    """Fraction of ``canonical_fields`` whose value on ``record`` is not None.

    Missing attributes count as not populated. An empty field list scores 0.0.

    Args:
        record: Extraction record (any object with attributes)
        canonical_fields: Attribute names that make up a complete record

    Returns:
        Value in [0, 1]
    """
    if not canonical_fields:
        return 0.0
    populated = sum(
        1 for name in canonical_fields
        if getattr(record, name, None) is not None
    )
    return populated / len(canonical_fields)
