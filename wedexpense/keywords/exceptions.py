class KeywordExtractionError(Exception):
    """Raised when keyword extraction fails."""


class KeywordExtractionNetworkError(KeywordExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
