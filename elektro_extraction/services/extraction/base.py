"""Abstract base class for attribute extractors."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, TypeVar, Union

from elektro_extraction.models.extraction import CableRecord, ExtractionResult, SwitchingRecord
from elektro_extraction.models.fields import ProductDomain
from elektro_extraction.services.extraction.rules import RuleFamily
from elektro_extraction.services.quality.confidence import score

T = TypeVar("T")


class AttributeExtractor(ABC):
    """Abstract base class for domain attribute extractors.

    All implementations must honor the contract:
        - extract() is total: any input, including non-strings, yields a record
        - every record field is a typed value or None
        - canonical_fields lists the record attributes scored for confidence
    """

    canonical_fields: Tuple[str, ...] = ()
    domain: ProductDomain = ProductDomain.OTHER

    @abstractmethod
    def extract(
        self,
        title: Any,
        description: Any = "",
        breadcrumb: Any = "",
    ) -> Union[CableRecord, SwitchingRecord]:
        """Extract attributes from product text.

        Args:
            title: Product title
            description: Product description
            breadcrumb: Category breadcrumb path

        Returns:
            Attribute record for this extractor's domain
        """
        pass

    @abstractmethod
    def get_extractor_name(self) -> str:
        """Get the name of this extractor (e.g., "cable")."""
        pass

    def extract_result(
        self,
        title: Any,
        description: Any = "",
        breadcrumb: Any = "",
    ) -> ExtractionResult:
        """Extract a record and attach its completeness score."""
        record = self.extract(title, description, breadcrumb)
        return ExtractionResult(
            domain=self.domain,
            record=record,
            confidence=score(record, self.canonical_fields),
        )

    def _first(
        self,
        family: RuleFamily[T],
        text: str,
        provenance: Dict[str, str],
    ) -> Optional[T]:
        """Run a rule family and record which rule produced the value."""
        found = family.first_match(text)
        if found is None:
            return None
        provenance[family.field] = found.rule
        return found.value
