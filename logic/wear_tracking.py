"""In-memory wear history, usage counters and outfit ratings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from models.clothing_item import ClothingItem

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class WearRecord:
    outfit_id: str
    worn_date: date
    notes: Optional[str] = None


@dataclass
class ClothingUsage:
    item_id: str
    total_wears: int = 0
    last_worn: Optional[date] = None


@dataclass
class OutfitRating:
    outfit_id: str
    rating: int
    notes: Optional[str] = None


class WearTracker:
    """Records worn outfits and keeps per-item usage counters up to date."""

    def __init__(self) -> None:
        self._history: List[WearRecord] = []
        self._usage: Dict[str, ClothingUsage] = {}
        self._ratings: Dict[str, OutfitRating] = {}

    def mark_outfit_worn(
        self, outfit_id: str, item_ids: Iterable[str], worn_date: date, notes: Optional[str] = None
    ) -> WearRecord:
        record = WearRecord(outfit_id=str(outfit_id), worn_date=worn_date, notes=notes)
        self._history.append(record)
        for item_id in item_ids:
            usage = self._usage.setdefault(str(item_id), ClothingUsage(item_id=str(item_id)))
            usage.total_wears += 1
            if usage.last_worn is None or worn_date > usage.last_worn:
                usage.last_worn = worn_date
        logger.info("Marked outfit %s worn on %s", outfit_id, worn_date.isoformat())
        return record

    def rate_outfit(self, outfit_id: str, rating: int, notes: Optional[str] = None) -> OutfitRating:
        if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"rating must be an integer between {MIN_RATING} and {MAX_RATING}, got {rating!r}")
        entry = OutfitRating(outfit_id=str(outfit_id), rating=rating, notes=notes)
        self._ratings[entry.outfit_id] = entry
        return entry

    def outfit_history(self, outfit_id: str) -> List[WearRecord]:
        """Wear records for an outfit, newest first."""

        records = [record for record in self._history if record.outfit_id == str(outfit_id)]
        return sorted(records, key=lambda record: record.worn_date, reverse=True)

    def recent_history(self, limit: int = 10) -> List[WearRecord]:
        """The latest ``limit`` wear records across all outfits, newest first."""

        return sorted(self._history, key=lambda record: record.worn_date, reverse=True)[:limit]

    def outfit_rating(self, outfit_id: str) -> Optional[OutfitRating]:
        return self._ratings.get(str(outfit_id))

    def average_rating(self) -> float:
        if not self._ratings:
            return 0.0
        return round(sum(entry.rating for entry in self._ratings.values()) / len(self._ratings), 1)

    def usage_for(self, item_id: str) -> ClothingUsage:
        return self._usage.get(str(item_id), ClothingUsage(item_id=str(item_id)))

    def unworn_items(
        self, inventory: Iterable[ClothingItem], days: int = 30, today: Optional[date] = None
    ) -> List[ClothingItem]:
        """Items never worn, or last worn before ``today - days``."""

        cutoff = (today or date.today()) - timedelta(days=days)
        unworn = []
        for item in inventory:
            usage = self._usage.get(item.item_id)
            if usage is None or usage.last_worn is None or usage.last_worn < cutoff:
                unworn.append(item)
        return unworn

    def most_worn(self, limit: int = 5) -> List[ClothingUsage]:
        ranked = sorted(self._usage.values(), key=lambda usage: (-usage.total_wears, usage.item_id))
        return ranked[:limit]


__all__ = ["WearTracker", "WearRecord", "ClothingUsage", "OutfitRating"]
