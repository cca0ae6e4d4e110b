"""Color rule book and matcher tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic import color_matcher
from logic.color_matcher import ColorMatcher, colors_match
from models.color_rules import DEFAULT_RULE_BOOK, ColorRule, ColorRuleBook


def test_rule_book_is_immutable():
    assert len(DEFAULT_RULE_BOOK.rules) == 13
    assert [palette.name for palette in DEFAULT_RULE_BOOK.palettes] == [
        "Classic Neutral",
        "Navy Elegance",
        "Earth Natural",
        "Modern Minimalist",
    ]
    with pytest.raises(AttributeError):
        DEFAULT_RULE_BOOK.rules = ()  # type: ignore[misc]


def test_fuzzy_color_identity():
    assert colors_match("Blue", "Navy Blue")
    assert colors_match("navy blue", "BLUE")
    assert not colors_match("Red", "Cream")
    assert not colors_match("", "Black")


def test_compatible_colors_filters_by_occasion():
    casual = color_matcher.compatible_colors("Black", occasion="Casual")
    assert casual == {"Black", "White", "Gray", "Navy Blue", "Brown"}

    gym = color_matcher.compatible_colors("Black", occasion="gym")
    assert "Orange" in gym and "Brown" not in gym


def test_compatible_colors_season_filter_and_all_year():
    # Autumn Warmth is fall-only; Earth Tones lists "All Year" so it survives any season.
    spring = color_matcher.compatible_colors("Tan", season="Spring")
    assert "Khaki" in spring
    assert "Olive Green" not in color_matcher.compatible_colors("Orange", season="Spring")
    assert "Olive Green" in color_matcher.compatible_colors("Orange", season="fall")


def test_unknown_color_has_no_rules():
    assert color_matcher.compatible_colors("Chartreuse") == set()
    assert color_matcher.colors_to_avoid("Chartreuse") == set()
    assert color_matcher.compatible_colors("   ") == set()


def test_colors_to_avoid_ignores_occasion():
    assert color_matcher.colors_to_avoid("Brown") == {"Pink", "Purple", "Orange", "Yellow"}
    assert color_matcher.colors_to_avoid("White") == set()


def test_compatibility_is_anchored_on_first_color():
    assert color_matcher.are_compatible("Purple", "Black") is True
    assert color_matcher.are_compatible("Black", "Purple") is False


def test_avoid_list_overrides_compatible_list():
    # Gym Active lists Orange as compatible with Gray but Business Professional avoids it.
    assert "Orange" in color_matcher.compatible_colors("Gray")
    assert color_matcher.are_compatible("Gray", "Orange") is False


def test_score_trivial_and_pairwise_values():
    assert color_matcher.score([]) == 100
    assert color_matcher.score(["Pink"]) == 100
    assert color_matcher.score(["Brown", "Pink"]) == 30
    assert color_matcher.score(["Black", "White"]) == 100
    for a, b in [("Red", "Blue"), ("Navy", "Gray"), ("Olive", "Maroon"), ("Chartreuse", "Teal")]:
        assert color_matcher.score([a, b]) in {30, 100}


def test_score_averages_pairs_and_rounds_half_up():
    assert color_matcher.score(["Brown", "Pink", "White"]) == 77
    assert color_matcher.score(["Black", "Blue", "White"], occasion="Casual", season="Fall") == 100


def test_best_palette_priorities():
    assert color_matcher.best_palette("Work").name == "Navy Elegance"
    assert color_matcher.best_palette("FORMAL", "Winter").name == "Navy Elegance"
    assert color_matcher.best_palette("Casual", "winter").name == "Earth Natural"
    assert color_matcher.best_palette().name == "Classic Neutral"


def test_pure_lookups_are_repeatable():
    first = color_matcher.compatible_colors("Navy Blue", "Work", "Winter")
    second = color_matcher.compatible_colors("Navy Blue", "Work", "Winter")
    assert first == second


def test_matcher_uses_injected_rule_book():
    book = ColorRuleBook(
        rules=(
            ColorRule(
                name="Test",
                description="only teal",
                base_colors=("Teal",),
                compatible_colors=("Coral",),
                avoid_colors=("Lime",),
            ),
        ),
        palettes=DEFAULT_RULE_BOOK.palettes,
    )
    matcher = ColorMatcher(book)
    assert matcher.are_compatible("Teal", "coral")
    assert not matcher.are_compatible("Teal", "Lime")
    assert matcher.compatible_colors("Black") == set()
