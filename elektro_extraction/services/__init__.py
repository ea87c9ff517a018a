"""Classification, extraction, quality and enrichment services."""
