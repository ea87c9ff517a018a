"""Flat enrichment of scraped products for the spreadsheet sink.

Key Components:
    - ProductEnricher: Adds extracted columns with "unknown" for gaps
    - resolve_target_sheet: Worksheet routing by domain and cable category
"""
from elektro_extraction.services.enrichment.enricher import (
    ProductEnricher,
    resolve_target_sheet,
)

__all__ = [
    "ProductEnricher",
    "resolve_target_sheet",
]
