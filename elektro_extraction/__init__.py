"""Attribute extraction engine for Dutch electrical-parts listings.

Turns free-text product titles and descriptions into typed cable and
switching-material records with a completeness score.

Example:
    from elektro_extraction import extract_product

    result = extract_product("YMvK kabel 3x2.5mm² per 100 meter")
    result.record.diameter_mm2   # 2.5
    result.confidence            # 0.666...

Call configure_logging() once at start-up when using the package as a
library; unconfigured structlog prints every debug event to stdout.
"""
from elektro_extraction.config import ExtractionSettings, configure_logging, get_settings
from elektro_extraction.errors import (
    ExtractionError,
    RuleDefinitionError,
    UnknownExtractorError,
)
from elektro_extraction.models import (
    CableRecord,
    ExtractionResult,
    ProductDomain,
    SwitchingRecord,
    ValidationWarning,
)
from elektro_extraction.services.classification import CategoryClassifier, ClassificationResult
from elektro_extraction.services.enrichment import ProductEnricher, resolve_target_sheet
from elektro_extraction.services.extraction import (
    EXTRACTOR_REGISTRY,
    AttributeExtractor,
    CableExtractor,
    SwitchingExtractor,
    create_extractor,
    extract_product,
)
from elektro_extraction.services.quality import score, validate_cable_record, validate_result

__version__ = "0.1.0"

__all__ = [
    "ExtractionSettings",
    "configure_logging",
    "get_settings",
    "ExtractionError",
    "RuleDefinitionError",
    "UnknownExtractorError",
    "CableRecord",
    "ExtractionResult",
    "ProductDomain",
    "SwitchingRecord",
    "ValidationWarning",
    "CategoryClassifier",
    "ClassificationResult",
    "ProductEnricher",
    "resolve_target_sheet",
    "EXTRACTOR_REGISTRY",
    "AttributeExtractor",
    "CableExtractor",
    "SwitchingExtractor",
    "create_extractor",
    "extract_product",
    "score",
    "validate_cable_record",
    "validate_result",
]
