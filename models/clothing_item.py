"""Clothing item data model and helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, field_validator

from models.taxonomy import (
    TEMPERATURE_BANDS,
    WEATHER_CONDITIONS,
    normalise_labels,
    normalise_tags,
    normalize_color_name,
    validate_category,
)

logger = logging.getLogger(__name__)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _unknown_tags(values: List[Any], allowed: List[str]) -> List[str]:
    """Non-blank values that do not normalise to an allowed tag."""

    return [str(value) for value in values if str(value).strip() and not normalise_tags([value], allowed)]


@dataclass(frozen=True)
class ClothingItem:
    """Represents one garment in the user's inventory.

    Items are immutable values: laundry and wear updates return new instances.
    """

    item_id: str
    category: str
    color: Optional[str] = None
    temperature_range: Optional[str] = None
    weather_conditions: Tuple[str, ...] = ()
    name: str = ""
    brand: Optional[str] = None
    seasons: Tuple[str, ...] = ()
    occasions: Tuple[str, ...] = ()
    needs_washing: bool = False
    last_washed: Optional[date] = None
    wash_frequency_days: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_id", str(self.item_id))
        object.__setattr__(self, "category", validate_category(self.category))
        object.__setattr__(self, "color", normalize_color_name(self.color))
        declared_band = _ensure_list(self.temperature_range)
        band = normalise_tags(declared_band, TEMPERATURE_BANDS)
        unknown_band = _unknown_tags(declared_band, TEMPERATURE_BANDS)
        if unknown_band:
            logger.warning(
                "Item %s has unknown temperature range %r; it will match any temperature",
                self.item_id,
                unknown_band[0],
            )
        object.__setattr__(self, "temperature_range", band[0] if band else None)
        declared_conditions = _ensure_list(self.weather_conditions)
        unknown_conditions = _unknown_tags(declared_conditions, WEATHER_CONDITIONS)
        if unknown_conditions:
            logger.warning("Item %s ignores unknown weather conditions %r", self.item_id, unknown_conditions)
        object.__setattr__(self, "weather_conditions", normalise_tags(declared_conditions, WEATHER_CONDITIONS))
        object.__setattr__(self, "seasons", normalise_labels(_ensure_list(self.seasons), "season"))
        object.__setattr__(self, "occasions", normalise_labels(_ensure_list(self.occasions), "occasion"))

    @property
    def has_weather_constraints(self) -> bool:
        return self.temperature_range is not None or bool(self.weather_conditions)


class _ClothingRow(BaseModel):
    """Loose inventory row as returned by the storage collaborator."""

    id: str
    category: str
    name: str = ""
    color: Optional[str] = None
    brand: Optional[str] = None
    temperature_range: Optional[str] = None
    weather_conditions: Optional[List[str]] = None
    seasons: Optional[List[str]] = None
    occasions: Optional[List[str]] = None
    needs_washing: Optional[bool] = None
    last_washed: Optional[date] = None
    wash_frequency_days: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        if value is None or str(value).strip() == "":
            raise ValueError("id is required")
        return str(value)


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from a loose inventory row.

    Accepts either ``id`` or ``item_id`` as the identity key. Raises
    :class:`pydantic.ValidationError` for malformed rows and
    :class:`ValueError` for categories outside the closed set.
    """

    payload = dict(metadata)
    if "id" not in payload and "item_id" in payload:
        payload["id"] = payload.pop("item_id")
    row = _ClothingRow.model_validate(payload)
    return ClothingItem(
        item_id=row.id,
        category=row.category,
        color=row.color,
        temperature_range=row.temperature_range,
        weather_conditions=tuple(row.weather_conditions or ()),
        name=row.name,
        brand=row.brand,
        seasons=tuple(row.seasons or ()),
        occasions=tuple(row.occasions or ()),
        needs_washing=bool(row.needs_washing),
        last_washed=row.last_washed,
        wash_frequency_days=row.wash_frequency_days,
    )


__all__ = ["ClothingItem", "from_raw_metadata"]
