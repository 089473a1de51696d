from dataclasses import dataclass

from wedexpense.categorization.taxonomy import KeywordTaxonomy


@dataclass(frozen=True)
class CategoryAssignment:
    """Winning category and its number of matched trigger terms."""

    category: str
    match_score: int = 0


class Categorizer:
    """Scores a keyword taxonomy against text and picks one category.

    Each category scores the number of its distinct trigger terms found as
    case-insensitive substrings. A unique top score wins; a tie for the top
    score or no match at all yields the taxonomy's default category.
    """

    def __init__(self, taxonomy: KeywordTaxonomy) -> None:
        self._taxonomy = taxonomy

    def categorize(self, text: str, keywords: list[str] | None = None) -> CategoryAssignment:
        """Categorize ``keywords`` when given and non-empty, otherwise ``text``."""
        blob = " ".join(keywords) if keywords else text
        return self.assign(blob)

    def assign(self, blob: str) -> CategoryAssignment:
        default = CategoryAssignment(self._taxonomy.default_category, 0)
        if not blob:
            return default

        lowered = blob.lower()
        best: CategoryAssignment | None = None
        tied = False
        for category, terms in self._taxonomy.items():
            score = sum(1 for term in terms if term in lowered)
            if score == 0:
                continue
            if best is None or score > best.match_score:
                best = CategoryAssignment(category, score)
                tied = False
            elif score == best.match_score:
                tied = True

        if best is None or tied:
            return default
        return best
