"""Weather-aware outfit composition with color-compatibility restriction."""
from __future__ import annotations

import logging
import random
from datetime import date
from typing import Dict, List, Optional, Protocol, Sequence, TypeVar

from logic.color_matcher import ColorMatcher
from logic.weather_classifier import classify, season_for_date
from models.clothing_item import ClothingItem
from models.outfit import STATUS_NO_ITEMS, STATUS_OK, OutfitSelection, WeatherClassification, WeatherContext
from models.taxonomy import BOTTOM_CATEGORIES, SHOE_CATEGORIES, TOP_CATEGORIES

logger = logging.getLogger(__name__)

T = TypeVar("T")

SLOTS = {
    "top": TOP_CATEGORIES,
    "bottom": BOTTOM_CATEGORIES,
    "shoe": SHOE_CATEGORIES,
}


class Chooser(Protocol):
    """Anything exposing ``choice``, e.g. :class:`random.Random`."""

    def choice(self, seq: Sequence[T]) -> T: ...


def is_weather_suitable(item: ClothingItem, weather: Optional[WeatherClassification]) -> bool:
    """Items without weather metadata suit everything; each declared attribute must match."""

    if weather is None or not item.has_weather_constraints:
        return True
    if item.temperature_range is not None and item.temperature_range != weather.temperature_band:
        return False
    if item.weather_conditions and not set(item.weather_conditions).intersection(weather.condition_tags):
        return False
    return True


def _group_by_slot(items: List[ClothingItem]) -> Dict[str, List[ClothingItem]]:
    grouped: Dict[str, List[ClothingItem]] = {slot: [] for slot in SLOTS}
    for item in items:
        for slot, categories in SLOTS.items():
            if item.category in categories:
                grouped[slot].append(item)
    return grouped


def _restrict_by_color(
    pool: List[ClothingItem], anchor_colors: List[str], matcher: ColorMatcher, occasion: Optional[str]
) -> List[ClothingItem]:
    """Keep items compatible with at least one anchor color; unknown colors always stay."""

    if not anchor_colors:
        return []
    return [
        item
        for item in pool
        if item.color is None or any(matcher.are_compatible(anchor, item.color, occasion) for anchor in anchor_colors)
    ]


def _pick(
    slot: str,
    pool: List[ClothingItem],
    anchor_colors: List[str],
    matcher: ColorMatcher,
    occasion: Optional[str],
    rng: Chooser,
    diagnostics: Dict[str, object],
) -> Optional[ClothingItem]:
    slot_debug: Dict[str, object] = {"pool": len(pool), "anchor_colors": list(anchor_colors)}
    diagnostics[slot] = slot_debug
    if not pool:
        logger.info("No weather-suitable %s candidates", slot)
        slot_debug["chosen"] = None
        return None

    candidates = pool
    if slot != "top":
        restricted = _restrict_by_color(pool, anchor_colors, matcher, occasion)
        slot_debug["color_compatible"] = len(restricted)
        if restricted:
            candidates = restricted
        else:
            slot_debug["fallback"] = "no_known_colors" if not anchor_colors else "no_compatible_colors"
            logger.info("Falling back to full %s pool (%s)", slot, slot_debug["fallback"])

    chosen = rng.choice(candidates)
    slot_debug["chosen"] = chosen.item_id
    logger.debug("Chose %s %s from %s candidates", slot, chosen.item_id, len(candidates))
    return chosen


def select_outfit(
    inventory: Sequence[ClothingItem],
    target_date: date,
    weather: Optional[WeatherContext],
    occasion: Optional[str],
    rng: Optional[Chooser] = None,
    matcher: Optional[ColorMatcher] = None,
    skip_needs_washing: bool = False,
    southern_hemisphere: bool = False,
) -> OutfitSelection:
    """Compose a top, bottom and shoe for the day and score their colors.

    Empty slots degrade gracefully. When every slot is empty the selection
    carries the ``no_items_available`` status instead of raising.
    """

    rng = rng or random.Random()
    matcher = matcher or ColorMatcher()
    season = season_for_date(target_date, southern_hemisphere=southern_hemisphere)
    classification = classify(weather)

    items = list(inventory)
    diagnostics: Dict[str, object] = {"initial_count": len(items), "season": season}
    if skip_needs_washing:
        items = [item for item in items if not item.needs_washing]
        diagnostics["clean_count"] = len(items)
    suitable = [item for item in items if is_weather_suitable(item, classification)]
    diagnostics["weather_suitable_count"] = len(suitable)
    if classification is not None:
        diagnostics["temperature_band"] = classification.temperature_band
        diagnostics["condition_tags"] = sorted(classification.condition_tags)
    logger.info("%s of %s items suit the weather for %s", len(suitable), len(items), target_date.isoformat())

    grouped = _group_by_slot(suitable)
    selected: List[ClothingItem] = []

    top = _pick("top", grouped["top"], [], matcher, occasion, rng, diagnostics)
    if top is not None:
        selected.append(top)

    top_colors = [top.color] if top is not None and top.color else []
    bottom = _pick("bottom", grouped["bottom"], top_colors, matcher, occasion, rng, diagnostics)
    if bottom is not None:
        selected.append(bottom)

    outfit_colors = [item.color for item in selected if item.color]
    shoe = _pick("shoe", grouped["shoe"], outfit_colors, matcher, occasion, rng, diagnostics)
    if shoe is not None:
        selected.append(shoe)

    if not selected:
        logger.warning("No items available for %s: no weather-suitable tops, bottoms or shoes", target_date.isoformat())
        return OutfitSelection(
            items=[], harmony_score=0, status=STATUS_NO_ITEMS, occasion=occasion, season=season, diagnostics=diagnostics
        )

    colors = [item.color for item in selected if item.color]
    harmony = matcher.score(colors, occasion, season)
    diagnostics["chosen_ids"] = [item.item_id for item in selected]
    logger.info("Selected outfit %s with harmony %s", diagnostics["chosen_ids"], harmony)
    return OutfitSelection(
        items=selected,
        harmony_score=harmony,
        status=STATUS_OK,
        occasion=occasion,
        season=season,
        diagnostics=diagnostics,
    )


__all__ = ["select_outfit", "is_weather_suitable", "Chooser", "SLOTS"]
