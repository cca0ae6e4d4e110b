"""Static color-harmony rules and palettes used for outfit suggestions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

_FOUR_SEASONS_AND_ALL_YEAR = ("Spring", "Summer", "Fall", "Winter", "All Year")


@dataclass(frozen=True)
class ColorRule:
    """A named harmony rule keyed by its base colors.

    Empty ``occasions`` or ``seasons`` mean the rule is unrestricted on that axis.
    """

    name: str
    description: str
    base_colors: Tuple[str, ...]
    compatible_colors: Tuple[str, ...]
    avoid_colors: Tuple[str, ...] = ()
    occasions: Tuple[str, ...] = ()
    seasons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ColorPalette:
    """A curated palette suggested for an occasion or season."""

    name: str
    primary: str
    secondary: Tuple[str, ...]
    neutrals: Tuple[str, ...]
    accent: Optional[str] = None
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ColorRuleBook:
    """Immutable table of harmony rules and palettes, built once and shared."""

    rules: Tuple[ColorRule, ...]
    palettes: Tuple[ColorPalette, ...]

    def palette(self, name: str) -> ColorPalette:
        for palette in self.palettes:
            if palette.name == name:
                return palette
        raise KeyError(f"Unknown palette '{name}'")

    def palette_tagged(self, tag: str) -> Optional[ColorPalette]:
        for palette in self.palettes:
            if tag in palette.tags:
                return palette
        return None


COLOR_RULES: Tuple[ColorRule, ...] = (
    # Classic
    ColorRule(
        name="Monochromatic",
        description="Different shades of the same color",
        base_colors=("Black", "White", "Gray", "Navy Blue", "Brown"),
        compatible_colors=("Black", "White", "Gray", "Navy Blue", "Brown"),
        occasions=("Work", "Formal", "Casual"),
        seasons=_FOUR_SEASONS_AND_ALL_YEAR,
    ),
    ColorRule(
        name="Black & White Classic",
        description="Timeless black and white combination",
        base_colors=("Black", "White"),
        compatible_colors=("Black", "White", "Gray"),
        occasions=("Work", "Formal", "Party", "Date Night"),
        seasons=_FOUR_SEASONS_AND_ALL_YEAR,
    ),
    # Warm
    ColorRule(
        name="Earth Tones",
        description="Natural, warm earth colors",
        base_colors=("Brown", "Tan", "Beige", "Khaki"),
        compatible_colors=("Brown", "Tan", "Beige", "Khaki", "Cream", "Orange", "Yellow"),
        avoid_colors=("Pink", "Purple"),
        occasions=("Casual", "Work", "Travel"),
        seasons=("Fall", "Winter", "All Year"),
    ),
    ColorRule(
        name="Warm Sunset",
        description="Warm colors inspired by sunset",
        base_colors=("Orange", "Red", "Yellow"),
        compatible_colors=("Orange", "Red", "Yellow", "Brown", "Cream", "Tan"),
        avoid_colors=("Blue", "Purple", "Pink"),
        occasions=("Casual", "Party"),
        seasons=("Summer", "Fall"),
    ),
    # Cool
    ColorRule(
        name="Ocean Blues",
        description="Cool blue and navy combinations",
        base_colors=("Navy Blue", "Blue"),
        compatible_colors=("Navy Blue", "Blue", "White", "Gray", "Black"),
        occasions=("Work", "Formal", "Casual"),
        seasons=("Spring", "Summer", "All Year"),
    ),
    ColorRule(
        name="Cool Breeze",
        description="Cool colors for fresh look",
        base_colors=("Blue", "Green", "Purple"),
        compatible_colors=("Blue", "Green", "Purple", "White", "Gray", "Black"),
        avoid_colors=("Orange", "Red", "Yellow"),
        occasions=("Casual", "Work"),
        seasons=("Spring", "Summer"),
    ),
    # Seasonal
    ColorRule(
        name="Spring Fresh",
        description="Light, fresh spring colors",
        base_colors=("Green", "Pink", "Yellow"),
        compatible_colors=("Green", "Pink", "Yellow", "White", "Cream", "Beige"),
        occasions=("Casual", "Date Night", "Party"),
        seasons=("Spring",),
    ),
    ColorRule(
        name="Summer Bright",
        description="Bright, energetic summer colors",
        base_colors=("Yellow", "Orange", "Pink", "Blue"),
        compatible_colors=("Yellow", "Orange", "Pink", "Blue", "White", "Cream"),
        occasions=("Casual", "Party", "Travel"),
        seasons=("Summer",),
    ),
    ColorRule(
        name="Autumn Warmth",
        description="Rich, warm autumn colors",
        base_colors=("Brown", "Orange", "Red", "Yellow"),
        compatible_colors=("Brown", "Orange", "Red", "Yellow", "Tan", "Cream", "Olive Green"),
        occasions=("Casual", "Work"),
        seasons=("Fall",),
    ),
    ColorRule(
        name="Winter Elegance",
        description="Deep, sophisticated winter colors",
        base_colors=("Black", "Navy Blue", "Gray", "Maroon"),
        compatible_colors=("Black", "Navy Blue", "Gray", "Maroon", "White", "Purple"),
        occasions=("Work", "Formal", "Date Night"),
        seasons=("Winter",),
    ),
    # Special occasion
    ColorRule(
        name="Business Professional",
        description="Conservative colors for business",
        base_colors=("Navy Blue", "Black", "Gray", "Brown"),
        compatible_colors=("Navy Blue", "Black", "Gray", "Brown", "White", "Cream"),
        avoid_colors=("Pink", "Orange", "Yellow", "Purple"),
        occasions=("Work", "Formal"),
        seasons=_FOUR_SEASONS_AND_ALL_YEAR,
    ),
    ColorRule(
        name="Date Night Romantic",
        description="Romantic colors for date nights",
        base_colors=("Black", "Red", "Navy Blue", "Maroon"),
        compatible_colors=("Black", "Red", "Navy Blue", "Maroon", "White", "Pink"),
        occasions=("Date Night", "Party", "Formal"),
        seasons=_FOUR_SEASONS_AND_ALL_YEAR,
    ),
    ColorRule(
        name="Gym Active",
        description="Energetic colors for workouts",
        base_colors=("Black", "Navy Blue", "Gray"),
        compatible_colors=("Black", "Navy Blue", "Gray", "Blue", "Green", "Red", "Orange"),
        occasions=("Gym",),
        seasons=_FOUR_SEASONS_AND_ALL_YEAR,
    ),
)

COLOR_PALETTES: Tuple[ColorPalette, ...] = (
    ColorPalette(
        name="Classic Neutral",
        primary="Black",
        secondary=("White", "Gray"),
        neutrals=("Beige", "Cream", "Tan"),
        tags=("default",),
    ),
    ColorPalette(
        name="Navy Elegance",
        primary="Navy Blue",
        secondary=("White", "Gray"),
        accent="Red",
        neutrals=("Cream", "Tan"),
        tags=("professional",),
    ),
    ColorPalette(
        name="Earth Natural",
        primary="Brown",
        secondary=("Tan", "Beige"),
        accent="Orange",
        neutrals=("Cream", "Khaki"),
        tags=("earth",),
    ),
    ColorPalette(
        name="Modern Minimalist",
        primary="Gray",
        secondary=("Black", "White"),
        neutrals=("Cream",),
    ),
)

DEFAULT_RULE_BOOK = ColorRuleBook(rules=COLOR_RULES, palettes=COLOR_PALETTES)


__all__ = [
    "ColorRule",
    "ColorPalette",
    "ColorRuleBook",
    "COLOR_RULES",
    "COLOR_PALETTES",
    "DEFAULT_RULE_BOOK",
]
