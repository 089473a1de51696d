from wedexpense.config.settings import Settings
from wedexpense.recognition.base import BaseRecognizer
from wedexpense.recognition.http_ocr_adapter import HttpOcrRecognizer
from wedexpense.recognition.pdfplumber_adapter import PdfPlumberRecognizer
from wedexpense.recognition.pymupdf_adapter import PyMuPdfRecognizer


class RecognizerFactory:
    """Creates the recognition adapter named by settings."""

    ADAPTERS: dict[str, type[BaseRecognizer]] = {
        "pdfplumber": PdfPlumberRecognizer,
        "pymupdf": PyMuPdfRecognizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRecognizer:
        engine = settings.recognition_engine.lower()
        if engine == "http":
            return HttpOcrRecognizer(
                base_url=settings.ocr_base_url,
                timeout_seconds=settings.ocr_timeout_seconds,
                language=settings.ocr_language,
                default_confidence=settings.default_confidence,
            )
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown recognition engine '{engine}'. "
                f"Choose from: {['http', *cls.ADAPTERS]}"
            )
        return adapter_cls()
