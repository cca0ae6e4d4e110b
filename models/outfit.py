"""Outfit selection and weather context schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from models.clothing_item import ClothingItem

STATUS_OK = "ok"
STATUS_NO_ITEMS = "no_items_available"


class NoCandidatesError(Exception):
    """Raised when no weather-suitable top, bottom or shoe exists."""

    def __init__(self, message: str = "No items available", diagnostics: Optional[Dict[str, object]] = None) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics or {}


@dataclass(frozen=True)
class WeatherContext:
    """Already-resolved weather for the day being planned."""

    temperature: float
    condition: str


@dataclass(frozen=True)
class WeatherClassification:
    temperature_band: str
    condition_tags: FrozenSet[str]


@dataclass
class OutfitSelection:
    """Chosen items (top, bottom, shoe order) and their color harmony score."""

    items: List[ClothingItem] = field(default_factory=list)
    harmony_score: int = 100
    status: str = STATUS_OK
    occasion: Optional[str] = None
    season: Optional[str] = None
    diagnostics: Dict[str, object] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]

    def raise_for_status(self) -> None:
        """Raise :class:`NoCandidatesError` when nothing could be selected."""

        if self.status != STATUS_OK:
            raise NoCandidatesError(
                "No items available: add tops, bottoms or shoes suited to this weather.",
                diagnostics=self.diagnostics,
            )


__all__ = [
    "NoCandidatesError",
    "WeatherContext",
    "WeatherClassification",
    "OutfitSelection",
    "STATUS_OK",
    "STATUS_NO_ITEMS",
]
