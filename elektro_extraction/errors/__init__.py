"""Error handling module."""
from elektro_extraction.errors.exceptions import (
    ExtractionError,
    RuleDefinitionError,
    UnknownExtractorError,
)

__all__ = [
    "ExtractionError",
    "RuleDefinitionError",
    "UnknownExtractorError",
]
