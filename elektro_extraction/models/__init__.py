"""Data models for extracted product attributes."""
from elektro_extraction.models.fields import (
    UNKNOWN,
    CableCategory,
    NetworkCategory,
    ProductDomain,
    ProductType,
    ShieldingType,
    SocketType,
    SwitchType,
)
from elektro_extraction.models.extraction import (
    CableRecord,
    ExtractionResult,
    SwitchingRecord,
    ValidationWarning,
    format_confidence,
)

__all__ = [
    "UNKNOWN",
    "CableCategory",
    "NetworkCategory",
    "ProductDomain",
    "ProductType",
    "ShieldingType",
    "SocketType",
    "SwitchType",
    "CableRecord",
    "ExtractionResult",
    "SwitchingRecord",
    "ValidationWarning",
    "format_confidence",
]
