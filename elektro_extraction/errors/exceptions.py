"""Custom exception hierarchy for attribute extraction errors."""


class ExtractionError(Exception):
    """Base exception for all attribute extraction errors."""
    
    def __init__(self, message: str, *args, **kwargs):
        """Initialize error with message."""
        self.message = message
        super().__init__(message, *args, **kwargs)


class RuleDefinitionError(ExtractionError):
    """Raised when a pattern library rule cannot be built."""
    pass


class UnknownExtractorError(ExtractionError, ValueError):
    """Raised when no extractor is registered for a product domain."""
    pass
