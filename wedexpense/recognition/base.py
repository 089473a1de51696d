from abc import ABC, abstractmethod

from wedexpense.recognition.models import RecognizedDocument
from wedexpense.upload.staging import StagedFile


class BaseRecognizer(ABC):
    """Contract for all text recognition adapters."""

    @abstractmethod
    def recognize(self, staged: StagedFile) -> RecognizedDocument:
        """Recover machine-readable text from an uploaded image or PDF.

        Args:
            staged: The upload, written to a scratch file.

        Returns:
            RecognizedDocument with the text (possibly empty) and a 0-100
            confidence score.

        Raises:
            RecognitionError: if recognition fails for any reason.
        """
