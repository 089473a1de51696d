from pathlib import Path

import pytest

from wedexpense.recognition.base import BaseRecognizer
from wedexpense.recognition.exceptions import RecognitionError
from wedexpense.recognition.models import NEUTRAL_CONFIDENCE
from wedexpense.recognition.pdfplumber_adapter import PdfPlumberRecognizer
from wedexpense.recognition.pymupdf_adapter import PyMuPdfRecognizer
from wedexpense.upload.staging import StagedFile


def _staged(tmp_path: Path, content: bytes) -> StagedFile:
    path = tmp_path / "quote.pdf"
    path.write_bytes(content)
    return StagedFile(path=path, file_name="quote.pdf", media_type="application/pdf")


@pytest.fixture(params=[PdfPlumberRecognizer, PyMuPdfRecognizer], ids=["pdfplumber", "pymupdf"])
def recognizer(request: pytest.FixtureRequest) -> BaseRecognizer:
    return request.param()


class TestPdfRecognizers:
    def test_returns_text(
        self, recognizer: BaseRecognizer, receipt_pdf_bytes: bytes, tmp_path: Path
    ) -> None:
        document = recognizer.recognize(_staged(tmp_path, receipt_pdf_bytes))
        assert "Royal Caterers" in document.text
        assert "8,50,000" in document.text

    def test_multi_page(
        self, recognizer: BaseRecognizer, multi_page_pdf_bytes: bytes, tmp_path: Path
    ) -> None:
        document = recognizer.recognize(_staged(tmp_path, multi_page_pdf_bytes))
        assert "Page one content" in document.text
        assert "Page two content" in document.text

    def test_blank_pdf_returns_empty_text(
        self, recognizer: BaseRecognizer, empty_pdf_bytes: bytes, tmp_path: Path
    ) -> None:
        assert recognizer.recognize(_staged(tmp_path, empty_pdf_bytes)).text == ""

    def test_reports_neutral_confidence(
        self, recognizer: BaseRecognizer, receipt_pdf_bytes: bytes, tmp_path: Path
    ) -> None:
        document = recognizer.recognize(_staged(tmp_path, receipt_pdf_bytes))
        assert document.confidence == NEUTRAL_CONFIDENCE

    def test_raises_on_non_pdf(self, recognizer: BaseRecognizer, tmp_path: Path) -> None:
        with pytest.raises(RecognitionError):
            recognizer.recognize(_staged(tmp_path, b"\xff\xd8 not a pdf"))
