"""Product domain classifier using ordered keyword rules.

The domain decides which attribute extractor runs on a product.

Strategy:
1. Lower-case breadcrumb + title + description
2. Test keyword sets in their declared order (substring match)
3. The first set with a hit wins; no hit -> "other"

The order is load-bearing: "groepenkast met 12 modules" mentions the
switching keyword "module", so distribution must be tested first.

Example:
    classifier = CategoryClassifier()
    result = classifier.classify(title="YMvK kabel 3x2.5mm²")
    # result.domain = ProductDomain.CABLE
    # result.matched_keyword = "kabel"
"""
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import structlog

from elektro_extraction.models.fields import ProductDomain

logger = structlog.get_logger(__name__)

KeywordRules = Tuple[Tuple[ProductDomain, Tuple[str, ...]], ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Result of product classification."""
    domain: ProductDomain
    matched_keyword: Optional[str] = None

    @property
    def has_extractor_domain(self) -> bool:
        """Returns True if an attribute extractor exists for the domain."""
        return self.domain in (ProductDomain.CABLE, ProductDomain.SWITCHING)


class CategoryClassifier:
    """Keyword-priority product domain classifier.

    Attributes:
        keyword_rules: Ordered (domain, keywords) pairs, tested first to last
    """

    DEFAULT_KEYWORD_RULES: KeywordRules = (
        (ProductDomain.DISTRIBUTION, ("groepenkast", "verdeler", "automaat")),
        (ProductDomain.CABLE, ("kabel", "draad", "cable")),
        (ProductDomain.SWITCHING, (
            "schakelmateriaal", "schakelaar", "stopcontact", "dimmer",
            "frame", "afdekframe", "drukknop", "module",
        )),
        (ProductDomain.LIGHTING, ("verlichting", "lamp", "led", "armatuur")),
    )

    def __init__(self, keyword_rules: Optional[KeywordRules] = None):
        """Initialize classifier with rules.

        Args:
            keyword_rules: Replacement rule table (default: DEFAULT_KEYWORD_RULES)
        """
        self.keyword_rules = keyword_rules if keyword_rules is not None else self.DEFAULT_KEYWORD_RULES
        self._log = logger.bind(component="CategoryClassifier")

    def classify(
        self,
        title: Any = "",
        description: Any = "",
        breadcrumb: Any = "",
    ) -> ClassificationResult:
        """Classify a product into a domain.

        Non-string inputs are treated as empty strings.

        Args:
            title: Product title
            description: Product description
            breadcrumb: Category breadcrumb path

        Returns:
            ClassificationResult with the domain and the keyword that decided it
        """
        parts = (breadcrumb, title, description)
        return self.classify_text(" ".join(p for p in parts if isinstance(p, str)))

    def classify_text(self, combined_text: Any) -> ClassificationResult:
        """Classify already-combined product text."""
        text = combined_text.lower() if isinstance(combined_text, str) else ""

        for domain, keywords in self.keyword_rules:
            for keyword in keywords:
                if keyword in text:
                    self._log.debug(
                        "product_classified",
                        text=text[:50],
                        domain=domain.value,
                        keyword=keyword,
                    )
                    return ClassificationResult(domain=domain, matched_keyword=keyword)

        self._log.debug("product_unclassified", text=text[:50])
        return ClassificationResult(domain=ProductDomain.OTHER)
