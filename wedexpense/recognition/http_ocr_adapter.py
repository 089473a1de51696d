"""Client for an HTTP OCR service.

The service accepts a multipart ``POST {base_url}/ocr`` with a ``file`` part
and answers with JSON ``{"text": "...", "confidence": 0-100}``. The
confidence key is optional.
"""

from typing import Any

import httpx

from wedexpense.recognition.base import BaseRecognizer
from wedexpense.recognition.exceptions import RecognitionError, RecognitionNetworkError
from wedexpense.recognition.models import NEUTRAL_CONFIDENCE, RecognizedDocument
from wedexpense.upload.staging import StagedFile


class HttpOcrRecognizer(BaseRecognizer):
    """Submits uploads to a remote OCR service over HTTP."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        language: str = "eng",
        default_confidence: float = NEUTRAL_CONFIDENCE,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._default_confidence = default_confidence
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def recognize(self, staged: StagedFile) -> RecognizedDocument:
        url = f"{self._base_url}/ocr"
        try:
            with staged.path.open("rb") as fh:
                response = self._client.post(
                    url,
                    files={"file": (staged.file_name, fh, staged.media_type)},
                    data={"language": self._language, "model_type": "OCR"},
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RecognitionNetworkError(
                f"OCR service returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RecognitionNetworkError(f"OCR service network error: {exc}") from exc
        except OSError as exc:
            raise RecognitionError(f"Failed to read staged upload: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise RecognitionError(f"OCR service returned invalid JSON: {exc}") from exc
        return self._build_document(payload)

    def _build_document(self, payload: Any) -> RecognizedDocument:
        if not isinstance(payload, dict):
            raise RecognitionError("OCR response must be a JSON object")
        text = payload.get("text")
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise RecognitionError("OCR response 'text' must be a string")
        return RecognizedDocument(
            text=text,
            confidence=self._confidence(payload.get("confidence")),
        )

    def _confidence(self, raw: Any) -> float:
        # Missing, zero or non-numeric scores fall back to the neutral default.
        if isinstance(raw, bool) or not isinstance(raw, (int, float)) or not raw:
            return self._default_confidence
        return max(0.0, min(100.0, float(raw)))
