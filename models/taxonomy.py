"""Canonical taxonomy definitions for wardrobe items.

This module centralises the canonical labels for categories, garment slots,
seasons, occasions and weather tags. Helper functions keep validation logic
consistent across the matcher, selector and data models.
"""

from typing import Dict, Iterable, List, Optional, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a lookup key."""

    return " ".join(str(value).strip().lower().replace("_", " ").replace("-", " ").split())


CATEGORIES: List[str] = [
    "T-Shirts",
    "Shirts",
    "Hoodies",
    "Sweaters",
    "Jackets",
    "Coats",
    "Jeans",
    "Pants",
    "Shorts",
    "Shoes",
    "Sneakers",
    "Boots",
    "Accessories",
    "Other",
]

TOP_CATEGORIES: Tuple[str, ...] = ("T-Shirts", "Shirts")
BOTTOM_CATEGORIES: Tuple[str, ...] = ("Pants", "Jeans", "Shorts")
SHOE_CATEGORIES: Tuple[str, ...] = ("Shoes", "Sneakers", "Boots")

SEASONS: List[str] = ["Spring", "Summer", "Fall", "Winter", "All Year"]
ALL_YEAR = "All Year"
OCCASIONS: List[str] = ["Casual", "Work", "Formal", "Gym", "Party", "Date Night", "Travel", "Other"]

TEMPERATURE_BANDS: List[str] = ["very_cold", "cold", "cool", "mild", "warm", "hot"]
WEATHER_CONDITIONS: List[str] = ["sunny", "cloudy", "rainy", "snowy", "windy"]

_CATEGORY_LOOKUP: Dict[str, str] = {_normalize_key(label): label for label in CATEGORIES}
_SEASON_LOOKUP: Dict[str, str] = {_normalize_key(label): label for label in SEASONS}
_OCCASION_LOOKUP: Dict[str, str] = {_normalize_key(label): label for label in OCCASIONS}


def validate_category(value: str) -> str:
    """Validate and canonicalise a category label.

    Matching is case-insensitive. Raises a :class:`ValueError` if the category
    is not part of the closed category set.
    """

    label = _CATEGORY_LOOKUP.get(_normalize_key(value))
    if label is None:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {CATEGORIES}")
    return label


def normalize_color_name(raw_string: Optional[str]) -> Optional[str]:
    """Strip a raw color string, returning ``None`` for blank values."""

    if raw_string is None:
        return None
    value = " ".join(str(raw_string).split())
    return value or None


def normalise_tags(values: Iterable[str], allowed: List[str]) -> Tuple[str, ...]:
    """Normalise and deduplicate snake_case tags against an allowed set."""

    normalised = []
    seen = set()
    for value in values:
        key = _normalize_key(value).replace(" ", "_")
        if key in allowed and key not in seen:
            normalised.append(key)
            seen.add(key)
    return tuple(normalised)


def normalise_labels(values: Iterable[str], kind: str) -> Tuple[str, ...]:
    """Canonicalise season or occasion labels, dropping unknown entries."""

    lookup = _SEASON_LOOKUP if kind == "season" else _OCCASION_LOOKUP
    labels = []
    for value in values:
        label = lookup.get(_normalize_key(value))
        if label and label not in labels:
            labels.append(label)
    return tuple(labels)


__all__ = [
    "CATEGORIES",
    "TOP_CATEGORIES",
    "BOTTOM_CATEGORIES",
    "SHOE_CATEGORIES",
    "SEASONS",
    "ALL_YEAR",
    "OCCASIONS",
    "TEMPERATURE_BANDS",
    "WEATHER_CONDITIONS",
    "validate_category",
    "normalize_color_name",
    "normalise_tags",
    "normalise_labels",
]
