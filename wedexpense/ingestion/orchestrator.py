"""Receipt ingestion: decode -> stage -> store + recognize -> extract -> categorize.

Storage and recognition run side by side and are each best-effort: a failed
call empties its own output field and nothing else. ``ingest`` never raises.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from wedexpense.categorization.categorizer import CategoryAssignment, Categorizer
from wedexpense.categorization.taxonomy import WEDDING_TAXONOMY
from wedexpense.config.settings import Settings
from wedexpense.extraction.extractor import FieldExtractor
from wedexpense.ingestion.models import IngestionResult
from wedexpense.ingestion.outcomes import Failure, Outcome, Success, attempt
from wedexpense.keywords.base import BaseKeywordExtractor
from wedexpense.keywords.factory import KeywordExtractorFactory
from wedexpense.logging.logger import Log
from wedexpense.recognition.base import BaseRecognizer
from wedexpense.recognition.factory import RecognizerFactory
from wedexpense.recognition.models import RecognizedDocument
from wedexpense.storage.base import BaseObjectStore
from wedexpense.storage.factory import ObjectStoreFactory
from wedexpense.upload.decoder import decode_upload, first_file_part
from wedexpense.upload.staging import StagedFile, sanitize_file_name, staged_upload

FALLBACK_MEDIA_TYPE = "image/jpeg"
RECEIPT_KEY_PREFIX = "receipts"


@dataclass(frozen=True)
class Attachment:
    """The file selected from an upload for storage and recognition."""

    file_name: str
    media_type: str
    content: bytes


def _millis() -> int:
    return int(time.time() * 1000)


def _default_file_name() -> str:
    return f"receipt_{_millis()}.jpg"


class IngestionOrchestrator:
    """Turns one uploaded receipt into an IngestionResult."""

    def __init__(
        self,
        *,
        object_store: BaseObjectStore,
        recognizer: BaseRecognizer,
        extractor: FieldExtractor,
        categorizer: Categorizer,
        keyword_extractor: BaseKeywordExtractor | None = None,
    ) -> None:
        self._object_store = object_store
        self._recognizer = recognizer
        self._extractor = extractor
        self._categorizer = categorizer
        self._keyword_extractor = keyword_extractor

    def ingest(self, body: bytes, content_type: str | None) -> IngestionResult:
        """Process one upload request body."""
        attachment = self.select_attachment(body, content_type)
        Log.info(
            f"Ingesting '{attachment.file_name}' ({attachment.media_type}, "
            f"{len(attachment.content)} bytes)"
        )

        try:
            with staged_upload(
                attachment.content, attachment.file_name, attachment.media_type
            ) as staged:
                stored, recognized = self._store_and_recognize(staged)
        except OSError as exc:
            Log.warning(f"Failed to stage upload '{attachment.file_name}': {exc}")
            return IngestionResult()

        receipt_url = ""
        match stored:
            case Success(value=url):
                receipt_url = url

        match recognized:
            case Success(value=RecognizedDocument(text=text, confidence=confidence)) if text:
                return self._build_result(text, confidence, receipt_url)
            case Success():
                Log.info(f"No text recognized in '{attachment.file_name}'")
            case Failure():
                pass
        return IngestionResult(receipt_url=receipt_url)

    def categorize_description(self, description: str) -> str:
        """Categorize a free-text expense description."""
        return self._categorize(description).category

    @staticmethod
    def select_attachment(body: bytes, content_type: str | None) -> Attachment:
        """Pick the first file part, or treat the whole body as the file."""
        part = first_file_part(decode_upload(body, content_type))
        if part is not None:
            return Attachment(
                file_name=part.file_name or _default_file_name(),
                media_type=part.media_type,
                content=part.content,
            )
        Log.debug("No file part in upload, using the whole body as the attachment")
        return Attachment(
            file_name=_default_file_name(),
            media_type=FALLBACK_MEDIA_TYPE,
            content=body,
        )

    @staticmethod
    def object_key(file_name: str) -> str:
        return f"{RECEIPT_KEY_PREFIX}/{_millis()}_{sanitize_file_name(file_name)}"

    def _store_and_recognize(
        self, staged: StagedFile
    ) -> tuple[Outcome[str], Outcome[RecognizedDocument]]:
        key = self.object_key(staged.file_name)
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="ingest") as pool:
            stored = pool.submit(attempt, "storage", lambda: self._object_store.put(staged, key))
            recognized = pool.submit(
                attempt, "recognition", lambda: self._recognizer.recognize(staged)
            )
            return stored.result(), recognized.result()

    def _build_result(self, text: str, confidence: float, receipt_url: str) -> IngestionResult:
        extraction = self._extractor.extract(text)
        assignment = self._categorize(text)
        Log.info(
            f"Extracted vendor={extraction.vendor_name!r} amount={extraction.amount} "
            f"date={extraction.date} category={assignment.category!r}"
        )
        return IngestionResult(
            vendor_name=extraction.vendor_name,
            amount=extraction.amount,
            date=extraction.date,
            category=assignment.category,
            receipt_url=receipt_url,
            confidence=confidence,
            raw_text=text,
        )

    def _categorize(self, text: str) -> CategoryAssignment:
        keywords: list[str] | None = None
        if self._keyword_extractor is not None and text:
            extractor = self._keyword_extractor
            match attempt("keyword extraction", lambda: extractor.extract_keywords(text)):
                case Success(value=found):
                    keywords = found
        return self._categorizer.categorize(text, keywords)


def build_orchestrator(settings: Settings) -> IngestionOrchestrator:
    """Build an IngestionOrchestrator with all configured adapters."""
    return IngestionOrchestrator(
        object_store=ObjectStoreFactory.create(settings),
        recognizer=RecognizerFactory.create(settings),
        extractor=FieldExtractor(),
        categorizer=Categorizer(WEDDING_TAXONOMY),
        keyword_extractor=KeywordExtractorFactory.create(settings),
    )
