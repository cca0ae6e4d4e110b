"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, from_raw_metadata
from models.color_rules import DEFAULT_RULE_BOOK, ColorPalette, ColorRule, ColorRuleBook
from models.outfit import NoCandidatesError, OutfitSelection, WeatherContext

__all__ = [
    "ClothingItem",
    "from_raw_metadata",
    "ColorRule",
    "ColorPalette",
    "ColorRuleBook",
    "DEFAULT_RULE_BOOK",
    "NoCandidatesError",
    "OutfitSelection",
    "WeatherContext",
]
