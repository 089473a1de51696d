from wedexpense.config.settings import Settings
from wedexpense.keywords.base import BaseKeywordExtractor
from wedexpense.keywords.openai_adapter import OpenAIKeywordAdapter


class KeywordExtractorFactory:
    """Creates the configured keyword extractor, or None when disabled."""

    PROVIDERS = ("none", "openai")

    @classmethod
    def create(cls, settings: Settings) -> BaseKeywordExtractor | None:
        provider = settings.keyword_provider.lower()
        if provider == "none":
            return None
        if provider == "openai":
            return OpenAIKeywordAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds,
            )
        raise ValueError(
            f"Unknown keyword provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
