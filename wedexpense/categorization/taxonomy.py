"""Spending categories and the trigger terms that point to them."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

DEFAULT_CATEGORY = "Miscellaneous"


class KeywordTaxonomy:
    """Immutable, ordered mapping of category name to trigger terms.

    Declared order is preserved and is the order categories are scored in.
    Terms are stored lowercased.
    """

    def __init__(
        self,
        categories: Mapping[str, tuple[str, ...]],
        default_category: str = DEFAULT_CATEGORY,
    ) -> None:
        self._categories: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {
                name: tuple(dict.fromkeys(term.lower() for term in terms))
                for name, terms in categories.items()
            }
        )
        self._default_category = default_category

    @property
    def default_category(self) -> str:
        return self._default_category

    def items(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        return iter(self._categories.items())

    def names(self) -> list[str]:
        return list(self._categories)

    def terms(self, category: str) -> tuple[str, ...]:
        return self._categories[category]

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __len__(self) -> int:
        return len(self._categories)


WEDDING_TAXONOMY = KeywordTaxonomy(
    {
        "Venue": (
            "venue", "hall", "banquet", "resort", "hotel", "lawn", "farmhouse",
            "palace", "mandap",
        ),
        "Catering": (
            "catering", "food", "caterer", "buffet", "menu", "kitchen", "chef",
            "meal", "dinner", "lunch", "sweet", "mithai",
        ),
        "Decoration & Flowers": (
            "decoration", "decor", "flower", "floral", "florist", "mandap",
            "stage", "lighting", "rangoli",
        ),
        "Photography & Videography": (
            "photography", "photo", "photographer", "videography", "video",
            "videographer", "camera", "drone", "album",
        ),
        "Bridal Clothing": ("bridal", "lehenga", "bride", "saree", "sari", "dupatta", "choli"),
        "Groom Clothing": ("groom", "sherwani", "suit", "kurta", "pagri", "safa"),
        "Jewelry": (
            "jewelry", "jewellery", "gold", "diamond", "necklace", "ring",
            "bangle", "earring", "maang tikka",
        ),
        "Music & DJ": ("music", "dj", "band", "dhol", "sangeet", "singer", "dance"),
        "Transportation": (
            "transport", "car", "travel", "bus", "flight", "taxi", "cab",
            "vehicle", "limousine",
        ),
        "Gifts & Favors": ("gift", "favour", "favor", "return gift", "trousseau", "shagun"),
        "Invitations & Cards": ("invitation", "card", "invite", "printing", "stationery"),
        "Makeup & Beauty": (
            "makeup", "beauty", "salon", "mehndi", "parlour", "parlor", "facial", "spa",
        ),
        "Pandit & Rituals": ("pandit", "priest", "puja", "ritual", "hawan", "pooja", "ceremony"),
        "Mehendi Artist": ("mehendi", "mehndi", "henna"),
        "Honeymoon": ("honeymoon", "trip", "holiday", "vacation"),
        "Wedding Planner Fee": ("planner", "coordinator", "planning", "management"),
        "Miscellaneous": ("misc", "other", "miscellaneous"),
    }
)
