"""Planner facade wiring configuration, weather and outfit selection."""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from logic.color_matcher import ColorMatcher
from logic.outfit_selector import Chooser, select_outfit
from logic.weather_classifier import season_for_date
from logic.wear_tracking import WearTracker
from models.clothing_item import ClothingItem
from models.color_rules import DEFAULT_RULE_BOOK, ColorPalette, ColorRuleBook
from models.outfit import OutfitSelection
from tools.observability import instrument_operation
from tools.weather_provider import StaticWeatherProvider, WeatherProvider
from wardrobe_app.config import PlannerConfig
from wardrobe_app.logging_config import get_logger, log_event, operation_context

LOGGER = get_logger(__name__)


class WardrobePlanner:
    """Suggests daily and weekly outfits from an inventory supplied by the caller."""

    def __init__(
        self,
        config: PlannerConfig | None = None,
        weather_provider: WeatherProvider | None = None,
        rule_book: ColorRuleBook = DEFAULT_RULE_BOOK,
        rng: Chooser | None = None,
        wear_tracker: WearTracker | None = None,
    ) -> None:
        self.config = config or PlannerConfig.from_env()
        self.weather_provider = weather_provider or StaticWeatherProvider()
        self.matcher = ColorMatcher(rule_book)
        self.rng = rng or random.Random(self.config.random_seed)
        self.wear_tracker = wear_tracker or WearTracker()

    @instrument_operation("suggest_outfit")
    def suggest_outfit(
        self,
        inventory: Sequence[ClothingItem],
        target_date: date,
        occasion: str | None = None,
        location: str | None = None,
    ) -> OutfitSelection:
        """Fetch the day's weather and select an outfit for it."""

        occasion = occasion or self.config.default_occasion
        with operation_context("planner.suggest_outfit") as correlation_id:
            weather = self.weather_provider.get_weather(location, target_date)
            selection = select_outfit(
                inventory,
                target_date,
                weather,
                occasion,
                rng=self.rng,
                matcher=self.matcher,
                skip_needs_washing=self.config.skip_needs_washing,
                southern_hemisphere=self.config.southern_hemisphere,
            )
            log_event(
                LOGGER,
                level=logging.INFO if not selection.is_empty else logging.WARNING,
                event="outfit_suggested",
                correlation_id=correlation_id,
                date=target_date.isoformat(),
                location=location,
                occasion=occasion,
                status=selection.status,
                harmony_score=selection.harmony_score,
                item_ids=selection.item_ids,
            )
            return selection

    def plan_week(
        self,
        inventory: Sequence[ClothingItem],
        week_of: date,
        occasion: str | None = None,
        location: str | None = None,
    ) -> Dict[date, OutfitSelection]:
        """Suggest an outfit for each day of the Monday-start week containing ``week_of``."""

        week_start = week_of - timedelta(days=week_of.weekday())
        days: List[date] = [week_start + timedelta(days=offset) for offset in range(7)]
        return {day: self.suggest_outfit(inventory, day, occasion=occasion, location=location) for day in days}

    def palette_for(self, target_date: date, occasion: str | None = None) -> ColorPalette:
        season = season_for_date(target_date, southern_hemisphere=self.config.southern_hemisphere)
        return self.matcher.best_palette(occasion or self.config.default_occasion, season)

    def record_worn(self, outfit_id: str, selection: OutfitSelection, worn_date: date, notes: Optional[str] = None):
        """Log a suggested outfit as worn in the wear ledger."""

        return self.wear_tracker.mark_outfit_worn(outfit_id, selection.item_ids, worn_date, notes=notes)

    def unworn_items(self, inventory: Sequence[ClothingItem], today: Optional[date] = None) -> List[ClothingItem]:
        return self.wear_tracker.unworn_items(inventory, days=self.config.unworn_days, today=today)


__all__ = ["WardrobePlanner"]
