"""Keyword extraction through an OpenAI-compatible chat completion API."""

import json
from typing import Any, ClassVar

import httpx
import openai

from wedexpense.keywords.base import BaseKeywordExtractor
from wedexpense.keywords.exceptions import (
    KeywordExtractionError,
    KeywordExtractionNetworkError,
)
from wedexpense.logging.logger import Log


class OpenAIKeywordAdapter(BaseKeywordExtractor):
    """Asks a chat model for the keywords of a receipt or expense description."""

    SYSTEM_PROMPT: ClassVar[str] = (
        "You extract keywords from wedding expense receipts and descriptions. "
        "Return the nouns that describe what was bought or which service was "
        "provided, lowercase, without amounts, dates or personal names."
    )
    JSON_SCHEMA: ClassVar[dict[str, object]] = {
        "type": "object",
        "properties": {
            "keywords": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["keywords"],
        "additionalProperties": False,
    }
    MAX_KEYWORDS: ClassVar[int] = 20

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def extract_keywords(self, text: str) -> list[str]:
        if not text.strip():
            return []
        raw = self._call_ai(text)
        Log.debug(f"Keyword provider raw response:\n{raw}")
        return self._parse_keywords(raw)

    def _call_ai(self, text: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=0.0,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "keyword_result",
                        "strict": True,
                        "schema": self.JSON_SCHEMA,
                    },
                },
                messages=[
                    {"role": "system", "content": self.SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise KeywordExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise KeywordExtractionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise KeywordExtractionError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise KeywordExtractionError("AI returned empty response")
        return content

    @classmethod
    def _parse_keywords(cls, raw: str) -> list[str]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed: Any = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise KeywordExtractionError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict) or not isinstance(parsed.get("keywords"), list):
            raise KeywordExtractionError("JSON response must be an object with a 'keywords' list")
        keywords = [k.strip() for k in parsed["keywords"] if isinstance(k, str) and k.strip()]
        return keywords[: cls.MAX_KEYWORDS]
