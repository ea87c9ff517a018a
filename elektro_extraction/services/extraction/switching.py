"""Switching-material attribute extraction.

The breadcrumb is prepended to title and description: category paths like
"Schakelmateriaal > Stopcontacten" help when the title itself is terse.
"""
from typing import Any, Dict, Optional, Tuple

import structlog

from elektro_extraction.config import get_settings
from elektro_extraction.models.extraction import SwitchingRecord
from elektro_extraction.models.fields import ProductDomain, SocketType
from elektro_extraction.services.extraction import switching_patterns as patterns
from elektro_extraction.services.extraction.base import AttributeExtractor
from elektro_extraction.services.extraction.cable_patterns import QUANTITY_RULES
from elektro_extraction.services.extraction.rules import join_text

logger = structlog.get_logger(__name__)

SWITCHING_CANONICAL_FIELDS: Tuple[str, ...] = (
    "product_type",
    "switch_type",
    "socket_type",
    "voltage",
    "current_amp",
    "power_watt",
    "poles",
    "frame_slots",
    "color",
    "series",
    "quantity",
)


class SwitchingExtractor(AttributeExtractor):
    """Extract switching-material specifications.

    Extracts:
        - Product type: schakelaar, stopcontact, dimmer, drukknop, frame, ...
        - Switch/socket type: enkelpolig, wisselschakelaar / schuko, usb, ...
        - Ratings: "230V" (220/240 -> 230, 380 -> 400), "16A", "400W"
        - Physical: poles, frame slots ("2-voudig"), mounting depth
        - Design: color (Dutch canonical name), series (Gira E2, Jung A500)
        - Features: LED indication, child protection, smart, IP rating
        - Packaging: quantity, frame included or not

    Boolean features are True when their keywords are present and None
    otherwise; absence of a keyword does not prove absence of the feature.
    """

    canonical_fields = SWITCHING_CANONICAL_FIELDS
    domain = ProductDomain.SWITCHING

    def __init__(self):
        """Initialize the switching-material extractor."""
        self._log = logger.bind(extractor="SwitchingExtractor")
        self._preview = get_settings().log_text_preview

    def get_extractor_name(self) -> str:
        """Get the name of this extractor."""
        return "switching"

    def extract(self, title: Any, description: Any = "", breadcrumb: Any = "") -> SwitchingRecord:
        """Extract switching-material specifications.

        Args:
            title: Product title
            description: Product description
            breadcrumb: Breadcrumb path, used as extra context

        Returns:
            SwitchingRecord with every field either populated or None
        """
        text = join_text(breadcrumb, title, description)
        text_lower = text.lower()
        provenance: Dict[str, str] = {}

        record = SwitchingRecord(
            product_type=self._first(patterns.PRODUCT_TYPE_RULES, text, provenance),
            switch_type=self._first(patterns.SWITCH_TYPE_RULES, text, provenance),
            socket_type=self._extract_socket_type(text_lower, provenance),
            voltage=self._first(patterns.VOLTAGE_RULES, text, provenance),
            current_amp=self._first(patterns.CURRENT_RULES, text, provenance),
            power_watt=self._first(patterns.POWER_RULES, text, provenance),
            poles=self._extract_poles(text, text_lower, provenance),
            frame_slots=self._first(patterns.FRAME_SLOT_RULES, text, provenance),
            mounting_depth_mm=self._first(patterns.MOUNTING_DEPTH_RULES, text, provenance),
            color=self._first(patterns.COLOR_RULES, text, provenance),
            series=self._first(patterns.SERIES_RULES, text, provenance),
            led_indication=self._has_feature(patterns.LED_INDICATION_PATTERN, text),
            child_protection=self._has_feature(patterns.CHILD_PROTECTION_PATTERN, text),
            smart_compatible=self._has_feature(patterns.SMART_PATTERN, text),
            ip_rating=self._first(patterns.IP_RATING_RULES, text, provenance),
            quantity=self._extract_quantity(text, text_lower, provenance),
            includes_frame=self._includes_frame(text_lower),
            provenance=provenance,
        )

        self._log.debug(
            "switching_extracted",
            text=text[:self._preview],
            product_type=record.product_type.value if record.product_type else None,
            switch_type=record.switch_type.value if record.switch_type else None,
            series=record.series,
            color=record.color,
        )

        return record

    def _extract_socket_type(
        self,
        text_lower: str,
        provenance: Dict[str, str],
    ) -> Optional[SocketType]:
        for term, socket_type in patterns.SOCKET_TERMS:
            if term in text_lower:
                provenance["socket_type"] = f"term:{term}"
                return socket_type
        return None

    def _extract_poles(
        self,
        text: str,
        text_lower: str,
        provenance: Dict[str, str],
    ) -> Optional[int]:
        """Explicit "<n>-polig", else inferred from enkel-/dubbelpolig."""
        poles = self._first(patterns.POLES_RULES, text, provenance)
        if poles is not None:
            return poles

        for terms, count in patterns.POLES_TERMS:
            if any(term in text_lower for term in terms):
                provenance["poles"] = f"term:{terms[0]}"
                return count
        return None

    def _has_feature(self, pattern, text: str) -> Optional[bool]:
        """True if the feature keywords occur, otherwise undetermined."""
        return True if pattern.search(text) else None

    def _extract_quantity(
        self,
        text: str,
        text_lower: str,
        provenance: Dict[str, str],
    ) -> Optional[int]:
        quantity = self._first(QUANTITY_RULES, text, provenance)
        if quantity is not None:
            return quantity

        if any(term in text_lower for term in patterns.SINGLE_UNIT_TERMS):
            provenance["quantity"] = "single_unit"
            return 1
        return None

    def _includes_frame(self, text_lower: str) -> Optional[bool]:
        if any(term in text_lower for term in patterns.INCLUDES_FRAME_TERMS):
            return True
        if any(term in text_lower for term in patterns.EXCLUDES_FRAME_TERMS):
            return False
        return None
