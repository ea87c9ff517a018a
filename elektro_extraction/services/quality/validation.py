"""Plausibility checks for extracted cable records.

Warnings are advisory: they never block export and never modify the record.
"""
from typing import List

import structlog

from elektro_extraction.models.extraction import CableRecord, ExtractionResult, ValidationWarning

logger = structlog.get_logger(__name__)

MIN_CROSS_SECTION_MM2 = 0.1
MAX_CROSS_SECTION_MM2 = 1000
MIN_CONDUCTORS = 1
MAX_CONDUCTORS = 50
MAX_LENGTH_M = 10000


def _fmt(value: float) -> str:
    return f"{value:g}"


def validate_cable_record(record: CableRecord) -> List[ValidationWarning]:
    """Check cross-section, conductor count and length against sane bounds.

    Args:
        record: Extracted cable record

    Returns:
        Zero or more warnings with Dutch messages for the sheet
    """
    warnings: List[ValidationWarning] = []

    diameter = record.diameter_mm2
    if diameter is not None:
        if diameter > MAX_CROSS_SECTION_MM2:
            warnings.append(ValidationWarning(
                field="diameter_mm2",
                message=f"Diameter {_fmt(diameter)}mm² lijkt te hoog",
            ))
        if diameter < MIN_CROSS_SECTION_MM2:
            warnings.append(ValidationWarning(
                field="diameter_mm2",
                message=f"Diameter {_fmt(diameter)}mm² lijkt te laag",
            ))

    conductors = record.conductor_count
    if conductors is not None:
        if conductors > MAX_CONDUCTORS:
            warnings.append(ValidationWarning(
                field="conductor_count",
                message=f"{conductors} aders lijkt veel",
            ))
        if conductors < MIN_CONDUCTORS:
            warnings.append(ValidationWarning(
                field="conductor_count",
                message=f"{conductors} aders is ongeldig",
            ))

    length = record.length_m
    if length is not None and length > MAX_LENGTH_M:
        warnings.append(ValidationWarning(
            field="length_m",
            message=f"Lengte {_fmt(length)}m lijkt extreem",
        ))

    return warnings


def validate_result(result: ExtractionResult) -> List[ValidationWarning]:
    """Run the checks that apply to a result's record type.

    Only cable records have bounds; other records yield no warnings.
    """
    if not isinstance(result.record, CableRecord):
        return []

    warnings = validate_cable_record(result.record)
    if warnings:
        logger.info(
            "validation_warnings",
            domain=result.domain.value,
            warnings=[w.message for w in warnings],
        )
    return warnings
