"""Product classification service.

Key Components:
    - CategoryClassifier: Ordered keyword classifier picking the product domain
    - ClassificationResult: Domain plus the keyword that decided it
"""
from elektro_extraction.services.classification.classifier import (
    CategoryClassifier,
    ClassificationResult,
)

__all__ = [
    "CategoryClassifier",
    "ClassificationResult",
]
