"""Cable attribute extraction.

Extracts from a cable title + description:
    - cable type and category: "YMvK" -> installation, "UTP" -> network
    - cross-section (mm²): "2.5mm²", "3x2.5"
    - conductor count: "3x2.5", "5G6", "3-aderig", "3C"
    - length (m): "per meter" (always 1.0), "100m", "1.5km", "haspel 500mtr"
    - quantity: "per 10 stuks", "doos à 25", "verpakking 50"
    - outer diameter (mm): "Ø16mm", "diameter 20mm", "Ø16/19/20mm" (middle)
    - network cables only: category (Cat5..Cat8), shielding, bandwidth

The breadcrumb is not used; cable listings are identified by their title.
"""
from typing import Any, Dict, Optional, Tuple

import structlog

from elektro_extraction.config import get_settings
from elektro_extraction.models.extraction import CableRecord
from elektro_extraction.models.fields import (
    CableCategory,
    NetworkCategory,
    ProductDomain,
    ShieldingType,
)
from elektro_extraction.services.extraction import cable_patterns as patterns
from elektro_extraction.services.extraction.base import AttributeExtractor
from elektro_extraction.services.extraction.rules import join_text

logger = structlog.get_logger(__name__)

CABLE_CANONICAL_FIELDS: Tuple[str, ...] = (
    "cable_type",
    "diameter_mm2",
    "conductor_count",
    "length_m",
    "quantity",
    "outer_diameter_mm",
)


class CableExtractor(AttributeExtractor):
    """Extract cable specifications from Dutch product text."""

    canonical_fields = CABLE_CANONICAL_FIELDS
    domain = ProductDomain.CABLE

    def __init__(self):
        """Initialize the cable extractor."""
        self._log = logger.bind(extractor="CableExtractor")
        self._preview = get_settings().log_text_preview

    def get_extractor_name(self) -> str:
        """Get the name of this extractor."""
        return "cable"

    def extract(self, title: Any, description: Any = "", breadcrumb: Any = "") -> CableRecord:
        """Extract cable specifications.

        Args:
            title: Product title
            description: Product description (optional)
            breadcrumb: Ignored for cables

        Returns:
            CableRecord with every field either populated or None
        """
        text = join_text(title, description)
        provenance: Dict[str, str] = {}

        cable_type, cable_category = self._extract_cable_type(text)
        if cable_type is not None:
            provenance["cable_type"] = f"type:{cable_type}"

        fields: Dict[str, Any] = {
            "diameter_mm2": self._first(patterns.CROSS_SECTION_RULES, text, provenance),
            "conductor_count": self._first(patterns.CONDUCTOR_RULES, text, provenance),
            "length_m": self._extract_length(text, provenance),
            "quantity": self._extract_quantity(text, provenance),
            "outer_diameter_mm": self._first(patterns.OUTER_DIAMETER_RULES, text, provenance),
            "packaging_format": self._extract_packaging_format(text),
        }

        if cable_category == CableCategory.NETWORK:
            network_category = self._extract_network_category(text)
            fields["network_category"] = network_category
            fields["shielding_type"] = self._extract_shielding_type(text)
            fields["bandwidth"] = self._extract_bandwidth(text, network_category)

        record = CableRecord(
            cable_type=cable_type,
            cable_category=cable_category,
            provenance=provenance,
            **fields,
        )

        self._log.debug(
            "cable_extracted",
            text=text[:self._preview],
            cable_type=cable_type,
            cable_category=cable_category.value,
            diameter_mm2=record.diameter_mm2,
            conductor_count=record.conductor_count,
            length_m=record.length_m,
        )

        return record

    def _extract_cable_type(self, text: str) -> Tuple[Optional[str], CableCategory]:
        """Return the first known cable type token and its category."""
        for token, category, pattern in patterns.CABLE_TYPE_PATTERNS:
            if pattern.search(text):
                return token, category
        return None, CableCategory.UNKNOWN

    def _extract_length(self, text: str, provenance: Dict[str, str]) -> Optional[float]:
        """Extract length in meters; "per meter" listings are exactly 1 m."""
        if patterns.PER_METER_PATTERN.search(text):
            provenance["length_m"] = "per_meter"
            return 1.0
        return self._first(patterns.LENGTH_RULES, text, provenance)

    def _extract_quantity(self, text: str, provenance: Dict[str, str]) -> Optional[int]:
        """Extract package quantity, falling back to 1 for single-unit sales."""
        quantity = self._first(patterns.QUANTITY_RULES, text, provenance)
        if quantity is not None:
            return quantity

        text_lower = text.lower()
        if any(term in text_lower for term in patterns.SINGLE_UNIT_TERMS):
            provenance["quantity"] = "single_unit"
            return 1
        return None

    def _extract_packaging_format(self, text: str) -> Optional[str]:
        text_lower = text.lower()
        for phrase in patterns.PACKAGING_PHRASES:
            if phrase in text_lower:
                return phrase

        match = patterns.PACKAGING_QUANTITY_PATTERN.search(text_lower)
        if match:
            return f"{match.group(1)} {match.group(2)}"
        return None

    def _extract_network_category(self, text: str) -> Optional[NetworkCategory]:
        text_lower = text.lower()
        for term, category in patterns.NETWORK_CATEGORY_TERMS:
            if term in text_lower:
                return category
        return None

    def _extract_shielding_type(self, text: str) -> Optional[ShieldingType]:
        text_lower = text.lower()
        for terms, shielding in patterns.SHIELDING_TERMS:
            if any(term in text_lower for term in terms):
                return shielding
        return None

    def _extract_bandwidth(
        self,
        text: str,
        network_category: Optional[NetworkCategory],
    ) -> Optional[str]:
        """Explicit "<n> MHz", else the nominal bandwidth of the category."""
        match = patterns.BANDWIDTH_PATTERN.search(text)
        if match:
            return f"{match.group(1)} MHz"
        if network_category is None:
            return None
        return patterns.BANDWIDTH_BY_CATEGORY.get(network_category)
