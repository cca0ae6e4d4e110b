"""Rule-based color compatibility and harmony scoring."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence, Set

from models.color_rules import DEFAULT_RULE_BOOK, ColorPalette, ColorRule, ColorRuleBook
from models.taxonomy import ALL_YEAR

logger = logging.getLogger(__name__)

COMPATIBLE_PAIR_POINTS = 100
INCOMPATIBLE_PAIR_POINTS = 30


def _fold(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def colors_match(color_a: str, color_b: str) -> bool:
    """Fuzzy color identity: case-insensitive containment in either direction.

    "Blue" matches "Navy Blue". Blank values never match.
    """

    a, b = _fold(color_a), _fold(color_b)
    if not a or not b:
        return False
    return a in b or b in a


def _matches_any(color: str, candidates: Iterable[str]) -> bool:
    return any(colors_match(candidate, color) for candidate in candidates)


def _label_allowed(value: Optional[str], allowed: Sequence[str]) -> bool:
    if not value or not allowed:
        return True
    wanted = _fold(value)
    return any(_fold(option) == wanted for option in allowed)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ColorMatcher:
    """Pure lookups over an immutable :class:`ColorRuleBook`.

    Compatibility is anchored on the first color: ``are_compatible(a, b)`` uses
    the rules keyed by ``a`` and may differ from ``are_compatible(b, a)``.
    """

    def __init__(self, rule_book: ColorRuleBook = DEFAULT_RULE_BOOK) -> None:
        self.rule_book = rule_book

    def _rules_for(self, base_color: str) -> list[ColorRule]:
        return [rule for rule in self.rule_book.rules if _matches_any(base_color, rule.base_colors)]

    def compatible_colors(
        self, base_color: str, occasion: Optional[str] = None, season: Optional[str] = None
    ) -> Set[str]:
        """Union of compatible colors from every rule that applies to ``base_color``."""

        colors: Set[str] = set()
        for rule in self._rules_for(base_color):
            if not _label_allowed(occasion, rule.occasions):
                continue
            if ALL_YEAR not in rule.seasons and not _label_allowed(season, rule.seasons):
                continue
            colors.update(rule.compatible_colors)
        logger.debug(
            "compatible colors for %s (occasion=%s season=%s) -> %s", base_color, occasion, season, sorted(colors)
        )
        return colors

    def colors_to_avoid(self, base_color: str) -> Set[str]:
        """Union of avoid lists from rules keyed by ``base_color``; occasion and season are ignored."""

        colors: Set[str] = set()
        for rule in self._rules_for(base_color):
            colors.update(rule.avoid_colors)
        return colors

    def are_compatible(self, color_a: str, color_b: str, occasion: Optional[str] = None) -> bool:
        compatible = _matches_any(color_b, self.compatible_colors(color_a, occasion))
        avoided = _matches_any(color_b, self.colors_to_avoid(color_a))
        result = compatible and not avoided
        logger.debug("compatibility (%s -> %s, occasion=%s) -> %s", color_a, color_b, occasion, result)
        return result

    def score(self, colors: Sequence[str], occasion: Optional[str] = None, season: Optional[str] = None) -> int:
        """Average pairwise harmony in [0, 100].

        Every unordered pair counts once: 100 when compatible, 30 otherwise.
        Fewer than two colors is trivially harmonious. ``season`` is accepted
        for callers but pair checks only consider the occasion.
        """

        colors = list(colors)
        if len(colors) < 2:
            return COMPATIBLE_PAIR_POINTS

        total = 0
        pairs = 0
        for i in range(len(colors)):
            for j in range(i + 1, len(colors)):
                if self.are_compatible(colors[i], colors[j], occasion):
                    total += COMPATIBLE_PAIR_POINTS
                else:
                    total += INCOMPATIBLE_PAIR_POINTS
                pairs += 1
        result = _round_half_up(total / pairs)
        logger.info("Harmony score for %s (occasion=%s season=%s) -> %s", colors, occasion, season, result)
        return result

    def best_palette(self, occasion: Optional[str] = None, season: Optional[str] = None) -> ColorPalette:
        """Pick a palette: professional for work/formal, earth tones for fall/winter, else neutral."""

        if _fold(occasion) in {"work", "formal"}:
            palette = self.rule_book.palette_tagged("professional")
        elif _fold(season) in {"fall", "winter"}:
            palette = self.rule_book.palette_tagged("earth")
        else:
            palette = None
        return palette or self.rule_book.palette_tagged("default") or self.rule_book.palettes[0]


_DEFAULT_MATCHER = ColorMatcher()


def compatible_colors(base_color: str, occasion: Optional[str] = None, season: Optional[str] = None) -> Set[str]:
    return _DEFAULT_MATCHER.compatible_colors(base_color, occasion, season)


def colors_to_avoid(base_color: str) -> Set[str]:
    return _DEFAULT_MATCHER.colors_to_avoid(base_color)


def are_compatible(color_a: str, color_b: str, occasion: Optional[str] = None) -> bool:
    return _DEFAULT_MATCHER.are_compatible(color_a, color_b, occasion)


def score(colors: Sequence[str], occasion: Optional[str] = None, season: Optional[str] = None) -> int:
    return _DEFAULT_MATCHER.score(colors, occasion, season)


def best_palette(occasion: Optional[str] = None, season: Optional[str] = None) -> ColorPalette:
    return _DEFAULT_MATCHER.best_palette(occasion, season)


__all__ = [
    "ColorMatcher",
    "colors_match",
    "compatible_colors",
    "colors_to_avoid",
    "are_compatible",
    "score",
    "best_palette",
    "COMPATIBLE_PAIR_POINTS",
    "INCOMPATIBLE_PAIR_POINTS",
]
