"""Temperature band, condition tag and season classification tests."""

import math
import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.weather_classifier import (
    TEMPERATURE_RANGES,
    classify,
    condition_tags,
    season_for_date,
    temperature_band,
)
from models.outfit import WeatherContext


@pytest.mark.parametrize(
    "celsius, band",
    [
        (-40, "very_cold"),
        (-0.01, "very_cold"),
        (0, "cold"),
        (9.99, "cold"),
        (10, "cool"),
        (15, "mild"),
        (20, "warm"),
        (24.9, "warm"),
        (25, "hot"),
        (48, "hot"),
    ],
)
def test_temperature_bands_are_half_open(celsius, band):
    assert temperature_band(celsius) == band


def test_bands_partition_the_line():
    for value in [x / 4 for x in range(-80, 160)]:
        matches = [name for name, low, high in TEMPERATURE_RANGES if low <= value < high]
        assert len(matches) == 1
        assert temperature_band(value) == matches[0]


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, None, "warm", True])
def test_malformed_temperature_defaults_to_mild(bad):
    assert temperature_band(bad) == "mild"


def test_condition_tags_first_phrase_wins():
    assert condition_tags("thunderstorm") == {"rainy", "windy"}
    assert condition_tags("Light Rain showers") == {"rainy"}
    assert condition_tags("few clouds") == {"sunny", "cloudy"}
    # "snow" precedes "light snow" in the table; both map to snowy.
    assert condition_tags("light snow") == {"snowy"}
    # "light rain" is listed before "thunderstorm".
    assert condition_tags("thunderstorm with light rain") == {"rainy"}


@pytest.mark.parametrize("text", ["banana", "", "   ", None])
def test_condition_tags_default_to_sunny(text):
    assert condition_tags(text) == {"sunny"}


def test_season_for_date_by_hemisphere():
    assert season_for_date(date(2025, 1, 15)) == "Winter"
    assert season_for_date(date(2025, 4, 1)) == "Spring"
    assert season_for_date(date(2025, 7, 4)) == "Summer"
    assert season_for_date(date(2025, 10, 18)) == "Fall"
    assert season_for_date(date(2025, 1, 15), southern_hemisphere=True) == "Summer"
    assert season_for_date(date(2025, 10, 18), southern_hemisphere=True) == "Spring"


def test_classify_bundles_band_and_tags():
    assert classify(None) is None
    result = classify(WeatherContext(temperature=3.5, condition="overcast clouds"))
    assert result.temperature_band == "cold"
    assert result.condition_tags == {"cloudy"}
