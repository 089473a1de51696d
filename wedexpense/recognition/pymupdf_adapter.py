import pymupdf

from wedexpense.recognition.base import BaseRecognizer
from wedexpense.recognition.exceptions import RecognitionError
from wedexpense.recognition.models import RecognizedDocument
from wedexpense.upload.staging import StagedFile


class PyMuPdfRecognizer(BaseRecognizer):
    """Reads the embedded text layer of PDF uploads using PyMuPDF."""

    def recognize(self, staged: StagedFile) -> RecognizedDocument:
        try:
            with pymupdf.open(staged.path) as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return RecognizedDocument(text="\n".join(pages).strip())
        except RecognitionError:
            raise
        except Exception as exc:
            raise RecognitionError(f"pymupdf extraction failed: {exc}") from exc
