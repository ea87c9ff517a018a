"""Extractor registry and the single-product extraction pipeline.

Key Components:
    - EXTRACTOR_REGISTRY: Attribute extractors by product domain
    - create_extractor: Factory function for extractor creation
    - extract_product: classify -> extract -> score -> validate

Open/Closed: a new domain gets an extractor class and a registry entry;
the pipeline itself does not change.
"""
from typing import Any, Dict, Optional, Type, Union

import structlog

from elektro_extraction.config import get_settings
from elektro_extraction.errors import UnknownExtractorError
from elektro_extraction.models.extraction import ExtractionResult
from elektro_extraction.models.fields import ProductDomain
from elektro_extraction.services.classification.classifier import CategoryClassifier
from elektro_extraction.services.extraction.base import AttributeExtractor
from elektro_extraction.services.extraction.cable import CableExtractor
from elektro_extraction.services.extraction.switching import SwitchingExtractor
from elektro_extraction.services.quality.validation import validate_result

logger = structlog.get_logger(__name__)


# Registry of available extractors by product domain
EXTRACTOR_REGISTRY: Dict[ProductDomain, Type[AttributeExtractor]] = {
    ProductDomain.CABLE: CableExtractor,
    ProductDomain.SWITCHING: SwitchingExtractor,
}


def create_extractor(domain: Union[ProductDomain, str]) -> AttributeExtractor:
    """Factory function to create an extractor by domain.

    Args:
        domain: Product domain (enum member or its value, e.g. "cable")

    Returns:
        AttributeExtractor instance

    Raises:
        UnknownExtractorError: If no extractor is registered for the domain
    """
    try:
        key = ProductDomain(domain)
    except ValueError:
        key = None

    if key not in EXTRACTOR_REGISTRY:
        raise UnknownExtractorError(
            f"Unknown extractor: {domain}. "
            f"Available: {[d.value for d in EXTRACTOR_REGISTRY]}"
        )

    return EXTRACTOR_REGISTRY[key]()


def extract_product(
    title: Any,
    description: Any = "",
    breadcrumb: Any = "",
    classifier: Optional[CategoryClassifier] = None,
) -> Optional[ExtractionResult]:
    """Classify a product and run the matching extractor.

    Args:
        title: Product title
        description: Product description
        breadcrumb: Category breadcrumb path
        classifier: Classifier to use (default: CategoryClassifier())

    Returns:
        Scored ExtractionResult, with validation warnings attached when
        enabled in settings, or None for domains without an extractor
    """
    classifier = classifier or CategoryClassifier()
    classification = classifier.classify(title, description, breadcrumb)

    if not classification.has_extractor_domain:
        logger.debug("no_extractor_for_domain", domain=classification.domain.value)
        return None

    extractor = create_extractor(classification.domain)
    result = extractor.extract_result(title, description, breadcrumb)

    if get_settings().run_validation:
        result.warnings = validate_result(result)

    logger.debug(
        "product_extracted",
        domain=result.domain.value,
        extractor=extractor.get_extractor_name(),
        confidence=result.confidence,
        warnings=len(result.warnings),
    )
    return result
