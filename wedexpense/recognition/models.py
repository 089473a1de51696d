from dataclasses import dataclass

NEUTRAL_CONFIDENCE = 70.0


@dataclass(frozen=True)
class RecognizedDocument:
    """Text recovered from an uploaded document by a recognition engine."""

    text: str = ""
    confidence: float = NEUTRAL_CONFIDENCE
