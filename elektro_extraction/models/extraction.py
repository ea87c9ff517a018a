"""Pydantic models for the attribute extraction pipeline.

This module defines the typed records produced from product titles and
descriptions, plus the result wrapper that carries the confidence score
and plausibility warnings.

Absent attributes are ``None``; the literal ``"unknown"`` only appears in
the flat sheet representation returned by ``to_sheet_fields()``.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

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


def _sheet_value(value: Any) -> Any:
    """Convert a record value to its sheet form ("unknown" for None)."""
    if value is None:
        return UNKNOWN
    if isinstance(value, Enum):
        return value.value
    return value


def format_confidence(confidence: float) -> str:
    """Format a completeness ratio as a whole percentage ("67%")."""
    return f"{int(confidence * 100 + 0.5)}%"


class CableRecord(BaseModel):
    """Attributes extracted from a cable listing.

    Attributes:
        cable_type: First known cable type token found (e.g. "YMvK")
        cable_category: Family of the detected cable type
        diameter_mm2: Conductor cross-section in mm²
        conductor_count: Number of conductors (aders)
        length_m: Length in meters
        quantity: Units per package
        outer_diameter_mm: Outer diameter in mm
        network_category: Cat5..Cat8 (network cables only)
        shielding_type: S/FTP, F/UTP or U/UTP (network cables only)
        bandwidth: e.g. "250 MHz" (network cables only)
        packaging_format: Sales unit phrase (e.g. "per rol", "100 meter")
        provenance: Field name -> name of the rule that produced it
    """

    cable_type: Optional[str] = None
    cable_category: CableCategory = CableCategory.UNKNOWN
    diameter_mm2: Optional[float] = None
    conductor_count: Optional[int] = None
    length_m: Optional[float] = None
    quantity: Optional[int] = None
    outer_diameter_mm: Optional[float] = None

    network_category: Optional[NetworkCategory] = None
    shielding_type: Optional[ShieldingType] = None
    bandwidth: Optional[str] = None

    packaging_format: Optional[str] = None
    provenance: Dict[str, str] = Field(default_factory=dict)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "cable_type": "YMvK",
                "cable_category": "installation",
                "diameter_mm2": 2.5,
                "conductor_count": 3,
                "length_m": 100.0,
            }
        }
    }

    def to_sheet_fields(self) -> Dict[str, Any]:
        """Convert to the flat column layout of the cable worksheets.

        Network-only columns are emitted only for network cables.

        Returns:
            Dictionary with every cable column present, "unknown" for gaps
        """
        result: Dict[str, Any] = {
            'cable_type': _sheet_value(self.cable_type),
            'cable_category': self.cable_category.value,
            'diameter_mm2': _sheet_value(self.diameter_mm2),
            'conductor_count': _sheet_value(self.conductor_count),
            'length_meters': _sheet_value(self.length_m),
            'quantity_per_unit': _sheet_value(self.quantity),
            'outer_diameter_mm': _sheet_value(self.outer_diameter_mm),
        }

        if self.cable_category == CableCategory.NETWORK:
            result['network_category'] = _sheet_value(self.network_category)
            result['shielding_type'] = _sheet_value(self.shielding_type)
            result['bandwidth'] = _sheet_value(self.bandwidth)

        result['packaging_format'] = _sheet_value(self.packaging_format)
        return result


class SwitchingRecord(BaseModel):
    """Attributes extracted from a switching-material listing.

    Boolean features are tri-state: ``None`` means "not determined" and is
    never collapsed to ``False``.
    """

    product_type: Optional[ProductType] = None
    switch_type: Optional[SwitchType] = None
    socket_type: Optional[SocketType] = None

    voltage: Optional[int] = None
    current_amp: Optional[int] = None
    power_watt: Optional[int] = None

    poles: Optional[int] = None
    frame_slots: Optional[int] = None
    mounting_depth_mm: Optional[float] = None

    color: Optional[str] = None
    series: Optional[str] = None

    led_indication: Optional[bool] = None
    child_protection: Optional[bool] = None
    ip_rating: Optional[str] = None
    smart_compatible: Optional[bool] = None

    quantity: Optional[int] = None
    includes_frame: Optional[bool] = None
    provenance: Dict[str, str] = Field(default_factory=dict)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "product_type": "schakelaar",
                "switch_type": "enkelpolig",
                "voltage": 230,
                "current_amp": 16,
                "color": "wit",
                "series": "e2",
            }
        }
    }

    def to_sheet_fields(self) -> Dict[str, Any]:
        """Convert to the flat column layout of the Schakelmateriaal sheet."""
        return {
            'product_type': _sheet_value(self.product_type),
            'switch_type': _sheet_value(self.switch_type),
            'socket_type': _sheet_value(self.socket_type),
            'voltage': _sheet_value(self.voltage),
            'current': _sheet_value(self.current_amp),
            'power': _sheet_value(self.power_watt),
            'poles': _sheet_value(self.poles),
            'frame_slots': _sheet_value(self.frame_slots),
            'mounting_depth': _sheet_value(self.mounting_depth_mm),
            'switching_color': _sheet_value(self.color),
            'series': _sheet_value(self.series),
            'led_indication': _sheet_value(self.led_indication),
            'child_protection': _sheet_value(self.child_protection),
            'ip_rating': _sheet_value(self.ip_rating),
            'smart_compatible': _sheet_value(self.smart_compatible),
            'switching_quantity': _sheet_value(self.quantity),
            'includes_frame': _sheet_value(self.includes_frame),
        }


class ValidationWarning(BaseModel):
    """Advisory plausibility warning for one field."""

    field: str
    message: str

    model_config = {"frozen": True}


class ExtractionResult(BaseModel):
    """Result of running one extractor on a product.

    Attributes:
        domain: Domain the extractor belongs to
        record: Extracted attribute record
        confidence: Populated canonical fields / canonical field count
        warnings: Plausibility warnings (advisory only)
    """

    domain: ProductDomain
    record: Union[CableRecord, SwitchingRecord]
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    warnings: List[ValidationWarning] = Field(default_factory=list)

    @property
    def confidence_key(self) -> str:
        """Sheet column that carries this result's confidence."""
        if self.domain == ProductDomain.SWITCHING:
            return 'switching_parsing_confidence'
        return 'parsing_confidence'

    def to_sheet_fields(self) -> Dict[str, Any]:
        """Flat record fields plus the percentage-formatted confidence."""
        result = self.record.to_sheet_fields()
        result[self.confidence_key] = format_confidence(self.confidence)
        return result
