"""Food catalog reference data."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class FoodUnit(StrEnum):
    """How a catalog entry counts quantity."""

    GRAMS_PER_100 = "grams-per-100"
    PIECE = "piece"


@dataclass(frozen=True)
class FoodCatalogEntry:
    """Calorie density for a single food."""

    key: str
    calories_per_unit: float
    unit: FoodUnit


class FoodCatalog(Mapping[str, FoodCatalogEntry]):
    """Read-only food lookup keyed by lowercase name."""

    def __init__(self, entries: list[FoodCatalogEntry]) -> None:
        self._entries = MappingProxyType(
            {entry.key.lower(): entry for entry in entries}
        )

    def __getitem__(self, key: str) -> FoodCatalogEntry:
        return self._entries[key.strip().lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, name: str) -> FoodCatalogEntry | None:
        """Return the entry for a food name, ignoring case and padding."""
        return self._entries.get(name.strip().lower())

    def names(self) -> list[str]:
        """Return catalog keys in alphabetical order."""
        return sorted(self._entries)


def _grams(key: str, calories: float) -> FoodCatalogEntry:
    return FoodCatalogEntry(
        key=key, calories_per_unit=calories, unit=FoodUnit.GRAMS_PER_100
    )


def _piece(key: str, calories: float) -> FoodCatalogEntry:
    return FoodCatalogEntry(key=key, calories_per_unit=calories, unit=FoodUnit.PIECE)


# Common Indian foods, calories per 100 g or per piece.
FOOD_CATALOG = FoodCatalog(
    [
        # Grains and staples
        _grams("rice", 130),
        _grams("brown rice", 112),
        _piece("dosa", 120),
        _piece("idli", 39),
        _piece("roti", 71),
        _piece("chapati", 71),
        _piece("paratha", 126),
        _piece("naan", 262),
        _grams("poha", 158),
        _grams("upma", 95),
        # Dairy
        _grams("milk", 42),
        _grams("curd", 60),
        _grams("yogurt", 60),
        _grams("paneer", 265),
        _grams("ghee", 900),
        _grams("butter", 717),
        # Lentils and legumes
        _grams("dal", 116),
        _grams("moong dal", 105),
        _grams("toor dal", 335),
        _grams("masoor dal", 116),
        _grams("rajma", 127),
        _grams("chana", 164),
        # Vegetables
        _grams("potato", 77),
        _grams("mixed vegetables", 65),
        _grams("spinach", 23),
        _grams("tomato", 18),
        _grams("onion", 40),
        _grams("carrot", 41),
        # Proteins
        _grams("chicken", 239),
        _grams("fish", 206),
        _piece("egg", 155),
        _grams("mutton", 294),
        # Snacks
        _piece("samosa", 252),
        _piece("pakora", 180),
        _piece("vada", 185),
        # Fruits
        _piece("banana", 89),
        _piece("apple", 52),
        _grams("mango", 60),
        _piece("orange", 47),
    ]
)
