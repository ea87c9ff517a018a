"""Flat product enrichment for the spreadsheet sink.

The sink reads plain dictionaries: every engine-owned column is present
and gaps are the literal string "unknown", never None.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

import structlog

from elektro_extraction.config import ExtractionSettings, get_settings
from elektro_extraction.models.fields import CableCategory, ProductDomain
from elektro_extraction.services.classification.classifier import CategoryClassifier
from elektro_extraction.services.extraction.extractors import EXTRACTOR_REGISTRY, create_extractor
from elektro_extraction.services.extraction.rules import coerce_text
from elektro_extraction.services.quality.validation import validate_result

logger = structlog.get_logger(__name__)

SHEET_GROUND_CABLES = "Grondkabels"
SHEET_NETWORK_CABLES = "Netwerkkabels"
SHEET_AV_CABLES = "AV_Kabels"
SHEET_INDUSTRIAL_CABLES = "Industriele_Kabels"
SHEET_INSTALLATION_CABLES = "Installatiekabels"
SHEET_SWITCHING = "Schakelmateriaal"
SHEET_OTHER = "Overige_Producten"

# Cable categories with a dedicated worksheet; the rest go to Installatiekabels
CABLE_CATEGORY_SHEETS: Dict[str, str] = {
    CableCategory.GROUND.value: SHEET_GROUND_CABLES,
    CableCategory.NETWORK.value: SHEET_NETWORK_CABLES,
    CableCategory.AV.value: SHEET_AV_CABLES,
    CableCategory.INDUSTRIAL.value: SHEET_INDUSTRIAL_CABLES,
}


class ProductEnricher:
    """Merge extracted attributes into a scraped product dictionary.

    Example:
        enricher = ProductEnricher()
        row = enricher.enrich({"title": "YMvK kabel 3x2.5mm² per 100 meter"})
        # row["category"] = "cable"
        # row["diameter_mm2"] = 2.5
        # row["quantity_per_unit"] = "unknown"
        # row["parsing_confidence"] = "67%"
    """

    def __init__(
        self,
        classifier: Optional[CategoryClassifier] = None,
        settings: Optional[ExtractionSettings] = None,
    ):
        """Initialize enricher.

        Args:
            classifier: Domain classifier (default: CategoryClassifier())
            settings: Settings (default: cached get_settings())
        """
        self.classifier = classifier or CategoryClassifier()
        self.settings = settings or get_settings()
        self._extractors = {domain: create_extractor(domain) for domain in EXTRACTOR_REGISTRY}
        self._log = logger.bind(component="ProductEnricher")

    def enrich(self, product_data: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``product_data`` with the extracted columns added.

        Args:
            product_data: Scraped product with title, description, breadcrumb

        Returns:
            New dictionary; the input mapping is not modified
        """
        enriched: Dict[str, Any] = dict(product_data)
        title = coerce_text(product_data.get("title"))
        description = coerce_text(product_data.get("description"))
        breadcrumb = coerce_text(product_data.get("breadcrumb"))

        classification = self.classifier.classify(title, description, breadcrumb)
        enriched["category"] = classification.domain.value

        extractor = self._extractors.get(classification.domain)
        if extractor is not None:
            result = extractor.extract_result(title, description, breadcrumb)
            fields = result.to_sheet_fields()

            # A packaging format scraped from the product page beats the parsed one
            scraped_format = coerce_text(product_data.get("packaging_format"))
            if scraped_format and "packaging_format" in fields:
                fields["packaging_format"] = scraped_format

            enriched.update(fields)

            if self.settings.run_validation:
                result.warnings = validate_result(result)
                enriched["parsing_warnings"] = [w.message for w in result.warnings]

        enriched["parsed_at"] = datetime.now(timezone.utc).isoformat()

        self._log.debug(
            "product_enriched",
            title=title[:self.settings.log_text_preview],
            category=enriched["category"],
        )
        return enriched


def resolve_target_sheet(enriched: Mapping[str, Any]) -> str:
    """Pick the worksheet an enriched product is written to.

    Args:
        enriched: Output of ProductEnricher.enrich()

    Returns:
        Worksheet name
    """
    category = enriched.get("category")

    if category == ProductDomain.CABLE.value:
        return CABLE_CATEGORY_SHEETS.get(enriched.get("cable_category"), SHEET_INSTALLATION_CABLES)

    if category == ProductDomain.SWITCHING.value:
        return SHEET_SWITCHING

    return SHEET_OTHER
