from abc import ABC, abstractmethod


class BaseKeywordExtractor(ABC):
    """Contract for keyword extraction adapters."""

    @abstractmethod
    def extract_keywords(self, text: str) -> list[str]:
        """Return the salient keywords of ``text``, most relevant first.

        An empty list means the provider found nothing useful; callers then
        fall back to the raw text.

        Raises:
            KeywordExtractionError: on any failure.
        """
