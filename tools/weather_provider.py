"""Weather provider abstractions feeding already-resolved weather to the planner."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
import datetime
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ValidationError

from models.outfit import WeatherContext

LOGGER = logging.getLogger(__name__)


class _Temperature(BaseModel):
    min: float
    max: float


class _ForecastEntry(BaseModel):
    date: datetime.date
    temperature: _Temperature
    condition: str = ""


class _ForecastPayload(BaseModel):
    forecast: List[_ForecastEntry] = []


class WeatherProvider(ABC):
    """Abstract weather source. Returning ``None`` means no weather is known."""

    @abstractmethod
    def get_weather(self, location: Optional[str], target_date: date) -> Optional[WeatherContext]:
        """Return the weather for a location and date."""


class StaticWeatherProvider(WeatherProvider):
    """Offline deterministic provider returning the same context for every day."""

    def __init__(self, weather: Optional[WeatherContext] = None) -> None:
        self.weather = weather

    def get_weather(self, location: Optional[str], target_date: date) -> Optional[WeatherContext]:
        LOGGER.debug("Returning static weather for %s", target_date.isoformat())
        return self.weather


class ForecastWeatherProvider(WeatherProvider):
    """Serves daily weather from a forecast payload supplied by the caller.

    The payload shape is ``{"forecast": [{"date": ..., "temperature": {"min": ..,
    "max": ..}, "condition": ...}]}``. The daily temperature is the midpoint of
    min and max. A payload that fails validation leaves the provider empty.
    """

    def __init__(self, payload: Dict[str, object]) -> None:
        self._by_date: Dict[date, WeatherContext] = {}
        try:
            parsed = _ForecastPayload.model_validate(payload)
        except ValidationError as exc:
            LOGGER.warning("Forecast payload schema validation failed: %s", exc.error_count())
            return
        for entry in parsed.forecast:
            midpoint = (entry.temperature.min + entry.temperature.max) / 2
            self._by_date[entry.date] = WeatherContext(temperature=midpoint, condition=entry.condition)

    def get_weather(self, location: Optional[str], target_date: date) -> Optional[WeatherContext]:
        weather = self._by_date.get(target_date)
        if weather is None:
            LOGGER.info("No forecast entry for %s", target_date.isoformat())
        return weather


__all__ = ["WeatherProvider", "StaticWeatherProvider", "ForecastWeatherProvider"]
