"""Outfit selector tests: weather filtering, slot composition and scoring."""
from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_selector import is_weather_suitable, select_outfit
from logic.weather_classifier import classify
from models.clothing_item import ClothingItem, from_raw_metadata
from models.outfit import NoCandidatesError, WeatherContext

TARGET = date(2025, 6, 12)
CLEAR_22 = WeatherContext(temperature=22, condition="clear sky")


class FirstChooser:
    """Deterministic stand-in for random.Random that records each pool."""

    def __init__(self) -> None:
        self.pools: List[List[str]] = []

    def choice(self, seq):
        self.pools.append([item.item_id for item in seq])
        return seq[0]


def _item(item_id: str, category: str, color: str | None = None, **kwargs) -> ClothingItem:
    return ClothingItem(item_id=item_id, category=category, color=color, **kwargs)


def test_end_to_end_black_blue_white():
    inventory = [
        from_raw_metadata({"id": 1, "category": "T-Shirts", "color": "Black"}),
        from_raw_metadata({"id": 2, "category": "Jeans", "color": "Blue"}),
        from_raw_metadata({"id": 3, "category": "Sneakers", "color": "White"}),
    ]

    selection = select_outfit(inventory, TARGET, CLEAR_22, "Casual", rng=random.Random(7))

    assert selection.item_ids == ["1", "2", "3"]
    # Black->Blue (Monochromatic via Navy Blue), Black->White and Blue->White are all compatible.
    assert selection.harmony_score == 100
    assert selection.status == "ok"
    selection.raise_for_status()


def test_accessories_only_reports_no_candidates():
    inventory = [_item("a1", "Accessories", "Black"), _item("a2", "Other", "Red")]

    selection = select_outfit(inventory, TARGET, CLEAR_22, "Casual")

    assert selection.items == []
    assert selection.is_empty
    assert selection.status == "no_items_available"
    with pytest.raises(NoCandidatesError):
        selection.raise_for_status()


def test_weather_suitability_rules():
    weather = classify(WeatherContext(temperature=5, condition="light rain"))
    assert is_weather_suitable(_item("x", "Jackets"), weather)
    assert is_weather_suitable(_item("x", "Jackets", temperature_range="cold"), weather)
    assert not is_weather_suitable(_item("x", "Jackets", temperature_range="hot"), weather)
    assert is_weather_suitable(_item("x", "Boots", weather_conditions=("rainy", "snowy")), weather)
    assert not is_weather_suitable(_item("x", "Boots", weather_conditions=("sunny",)), weather)
    assert not is_weather_suitable(
        _item("x", "Boots", temperature_range="cold", weather_conditions=("sunny",)), weather
    )
    assert is_weather_suitable(_item("x", "Boots", temperature_range="hot"), None)


def test_weather_filter_drops_unsuitable_items():
    inventory = [
        _item("summer-tee", "T-Shirts", "White", temperature_range="hot"),
        _item("warm-shirt", "Shirts", "White", temperature_range="warm", weather_conditions=("sunny",)),
        _item("jeans", "Jeans", "Blue"),
        _item("rain-boots", "Boots", "Black", weather_conditions=("rainy",)),
        _item("sneakers", "Sneakers", "White"),
    ]

    selection = select_outfit(inventory, TARGET, CLEAR_22, "Casual", rng=FirstChooser())

    assert selection.item_ids == ["warm-shirt", "jeans", "sneakers"]
    assert selection.diagnostics["weather_suitable_count"] == 3
    assert selection.diagnostics["temperature_band"] == "warm"


def test_bottom_pool_restricted_by_top_color():
    chooser = FirstChooser()
    inventory = [
        _item("top", "T-Shirts", "Brown"),
        _item("pink-shorts", "Shorts", "Pink"),
        _item("tan-pants", "Pants", "Tan"),
        _item("plain-jeans", "Jeans"),
    ]

    selection = select_outfit(inventory, TARGET, None, "Casual", rng=chooser)

    # Pink is avoided with Brown; the colorless jeans stay compatible.
    assert chooser.pools[1] == ["tan-pants", "plain-jeans"]
    assert selection.item_ids == ["top", "tan-pants"]


def test_bottom_falls_back_when_nothing_compatible():
    chooser = FirstChooser()
    inventory = [_item("top", "Shirts", "Brown"), _item("pink", "Shorts", "Pink"), _item("purple", "Pants", "Purple")]

    selection = select_outfit(inventory, TARGET, None, "Casual", rng=chooser)

    assert chooser.pools[1] == ["pink", "purple"]
    assert selection.diagnostics["bottom"]["fallback"] == "no_compatible_colors"
    assert selection.harmony_score == 30


def test_shoes_match_any_selected_color():
    chooser = FirstChooser()
    inventory = [
        _item("top", "T-Shirts", "Purple"),
        _item("bottom", "Jeans", "Black"),
        _item("orange-shoes", "Shoes", "Orange"),
        _item("gray-boots", "Boots", "Gray"),
    ]

    select_outfit(inventory, TARGET, None, "Casual", rng=chooser)

    # Orange pairs with neither Purple nor Black for Casual; Gray pairs with Purple.
    assert chooser.pools[2] == ["gray-boots"]


def test_missing_top_still_fills_other_slots():
    chooser = FirstChooser()
    inventory = [_item("jeans", "Jeans", "Blue"), _item("shoes", "Shoes", "White")]

    selection = select_outfit(inventory, TARGET, CLEAR_22, "Casual", rng=chooser)

    assert selection.item_ids == ["jeans", "shoes"]
    assert selection.diagnostics["top"]["chosen"] is None
    assert selection.diagnostics["bottom"]["fallback"] == "no_known_colors"
    assert selection.harmony_score == 100


def test_unknown_colors_are_skipped_in_scoring():
    inventory = [_item("top", "T-Shirts"), _item("bottom", "Pants", "Brown"), _item("shoe", "Shoes", "Pink")]

    selection = select_outfit(inventory, TARGET, None, None, rng=FirstChooser())

    assert len(selection.items) == 3
    assert selection.harmony_score == 30


def test_skip_needs_washing_drops_dirty_items():
    inventory = [
        _item("dirty-tee", "T-Shirts", "Black", needs_washing=True),
        _item("clean-shirt", "Shirts", "White"),
    ]

    default = select_outfit(inventory, TARGET, None, "Casual", rng=FirstChooser())
    clean = select_outfit(inventory, TARGET, None, "Casual", rng=FirstChooser(), skip_needs_washing=True)

    assert default.item_ids == ["dirty-tee"]
    assert clean.item_ids == ["clean-shirt"]


def test_seeded_selection_is_reproducible():
    inventory = [_item(f"top{i}", "T-Shirts", "White") for i in range(5)] + [
        _item(f"bottom{i}", "Jeans", "Blue") for i in range(5)
    ]

    first = select_outfit(inventory, TARGET, CLEAR_22, "Casual", rng=random.Random(42))
    second = select_outfit(inventory, TARGET, CLEAR_22, "Casual", rng=random.Random(42))

    assert first.item_ids == second.item_ids
    assert first.season == "Summer"
