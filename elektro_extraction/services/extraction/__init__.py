"""Attribute extraction services for Dutch electrical-parts listings.

Key Components:
    - AttributeExtractor: Abstract base class for domain extractors
    - CableExtractor: Cable type, cross-section, conductors, length, packaging
    - SwitchingExtractor: Switches, sockets, dimmers, frames and their ratings
    - EXTRACTOR_REGISTRY: Dictionary of available extractors by domain
    - create_extractor: Factory function for extractor creation
    - extract_product: Classify, extract, score and validate one product
"""
from elektro_extraction.services.extraction.base import AttributeExtractor
from elektro_extraction.services.extraction.cable import (
    CABLE_CANONICAL_FIELDS,
    CableExtractor,
)
from elektro_extraction.services.extraction.switching import (
    SWITCHING_CANONICAL_FIELDS,
    SwitchingExtractor,
)
from elektro_extraction.services.extraction.extractors import (
    EXTRACTOR_REGISTRY,
    create_extractor,
    extract_product,
)

__all__: list[str] = [
    "AttributeExtractor",
    "CABLE_CANONICAL_FIELDS",
    "CableExtractor",
    "SWITCHING_CANONICAL_FIELDS",
    "SwitchingExtractor",
    "EXTRACTOR_REGISTRY",
    "create_extractor",
    "extract_product",
]
