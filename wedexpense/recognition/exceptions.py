class RecognitionError(Exception):
    """Raised when text recognition fails."""


class RecognitionNetworkError(RecognitionError):
    """Raised when the OCR service cannot be reached or answers with an error status."""
