"""Maps raw weather readings into the discrete bands used for outfit filtering."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Dict, FrozenSet, List, Optional, Tuple

from models.outfit import WeatherClassification, WeatherContext

logger = logging.getLogger(__name__)

DEFAULT_BAND = "mild"
DEFAULT_TAGS: FrozenSet[str] = frozenset({"sunny"})

# Half-open [min, max) bands in evaluation order.
TEMPERATURE_RANGES: List[Tuple[str, float, float]] = [
    ("very_cold", -math.inf, 0.0),
    ("cold", 0.0, 10.0),
    ("cool", 10.0, 15.0),
    ("mild", 15.0, 20.0),
    ("warm", 20.0, 25.0),
    ("hot", 25.0, math.inf),
]

# First matching phrase wins, so order matters.
WEATHER_CONDITION_MAP: List[Tuple[str, FrozenSet[str]]] = [
    ("clear sky", frozenset({"sunny"})),
    ("few clouds", frozenset({"sunny", "cloudy"})),
    ("scattered clouds", frozenset({"cloudy"})),
    ("broken clouds", frozenset({"cloudy"})),
    ("overcast clouds", frozenset({"cloudy"})),
    ("light rain", frozenset({"rainy"})),
    ("moderate rain", frozenset({"rainy"})),
    ("heavy intensity rain", frozenset({"rainy"})),
    ("snow", frozenset({"snowy"})),
    ("light snow", frozenset({"snowy"})),
    ("heavy snow", frozenset({"snowy"})),
    ("mist", frozenset({"cloudy"})),
    ("fog", frozenset({"cloudy"})),
    ("haze", frozenset({"cloudy"})),
    ("thunderstorm", frozenset({"rainy", "windy"})),
    ("drizzle", frozenset({"rainy"})),
]

_NORTHERN_SEASONS: Dict[int, str] = {
    12: "Winter",
    1: "Winter",
    2: "Winter",
    3: "Spring",
    4: "Spring",
    5: "Spring",
    6: "Summer",
    7: "Summer",
    8: "Summer",
    9: "Fall",
    10: "Fall",
    11: "Fall",
}


def temperature_band(temp_celsius: object) -> str:
    """Return the band whose ``[min, max)`` interval contains the temperature.

    Boundary values belong to the upper band. Non-numeric or non-finite input
    yields ``mild``.
    """

    if isinstance(temp_celsius, bool) or not isinstance(temp_celsius, (int, float)):
        logger.warning("Non-numeric temperature %r, defaulting to %s", temp_celsius, DEFAULT_BAND)
        return DEFAULT_BAND
    if not math.isfinite(temp_celsius):
        logger.warning("Non-finite temperature %r, defaulting to %s", temp_celsius, DEFAULT_BAND)
        return DEFAULT_BAND
    for band, lower, upper in TEMPERATURE_RANGES:
        if lower <= temp_celsius < upper:
            return band
    return DEFAULT_BAND


def condition_tags(description: object) -> FrozenSet[str]:
    """Return the tags of the first phrase found in the description, else ``{sunny}``."""

    if not isinstance(description, str) or not description.strip():
        logger.warning("Empty weather description %r, defaulting to %s", description, sorted(DEFAULT_TAGS))
        return DEFAULT_TAGS
    normalized = description.lower()
    for phrase, tags in WEATHER_CONDITION_MAP:
        if phrase in normalized:
            return tags
    return DEFAULT_TAGS


def season_for_date(target_date: date, southern_hemisphere: bool = False) -> str:
    """Meteorological season label for a date."""

    month = target_date.month
    if southern_hemisphere:
        month = (month + 5) % 12 + 1
    return _NORTHERN_SEASONS[month]


def classify(weather: Optional[WeatherContext]) -> Optional[WeatherClassification]:
    if weather is None:
        return None
    classification = WeatherClassification(
        temperature_band=temperature_band(weather.temperature),
        condition_tags=condition_tags(weather.condition),
    )
    logger.info(
        "Classified weather %s / %r -> %s %s",
        weather.temperature,
        weather.condition,
        classification.temperature_band,
        sorted(classification.condition_tags),
    )
    return classification


__all__ = [
    "TEMPERATURE_RANGES",
    "WEATHER_CONDITION_MAP",
    "temperature_band",
    "condition_tags",
    "season_for_date",
    "classify",
]
