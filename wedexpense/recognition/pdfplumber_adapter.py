import pdfplumber

from wedexpense.recognition.base import BaseRecognizer
from wedexpense.recognition.exceptions import RecognitionError
from wedexpense.recognition.models import RecognizedDocument
from wedexpense.upload.staging import StagedFile


class PdfPlumberRecognizer(BaseRecognizer):
    """Reads the embedded text layer of PDF uploads using pdfplumber."""

    def recognize(self, staged: StagedFile) -> RecognizedDocument:
        try:
            with pdfplumber.open(staged.path) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return RecognizedDocument(text="\n".join(pages).strip())
        except RecognitionError:
            raise
        except Exception as exc:
            raise RecognitionError(f"pdfplumber extraction failed: {exc}") from exc
