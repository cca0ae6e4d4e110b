"""Laundry status helpers and wash sessions over immutable clothing items."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from models.clothing_item import ClothingItem

logger = logging.getLogger(__name__)

SESSION_PLANNED = "planned"
SESSION_IN_PROGRESS = "in_progress"
SESSION_COMPLETED = "completed"
SESSION_STATUSES = (SESSION_PLANNED, SESSION_IN_PROGRESS, SESSION_COMPLETED)


@dataclass(frozen=True)
class LaundrySession:
    """A scheduled wash of a group of items."""

    session_id: str
    scheduled_date: date
    item_ids: Tuple[str, ...]
    notes: Optional[str] = None
    status: str = SESSION_PLANNED


def mark_dirty(item: ClothingItem) -> ClothingItem:
    return replace(item, needs_washing=True)


def mark_clean(item: ClothingItem, washed_on: Optional[date] = None) -> ClothingItem:
    washed_on = washed_on or date.today()
    logger.debug("Marked %s washed on %s", item.item_id, washed_on.isoformat())
    return replace(item, needs_washing=False, last_washed=washed_on)


def is_wash_due(item: ClothingItem, today: Optional[date] = None) -> bool:
    """True when flagged dirty or the wash interval has elapsed since the last wash."""

    if item.needs_washing:
        return True
    if not item.wash_frequency_days or item.last_washed is None:
        return False
    today = today or date.today()
    return today - item.last_washed >= timedelta(days=item.wash_frequency_days)


def items_needing_wash(inventory: Iterable[ClothingItem], today: Optional[date] = None) -> List[ClothingItem]:
    due = [item for item in inventory if is_wash_due(item, today)]
    logger.info("%s items need washing", len(due))
    return due


def schedule_session(
    item_ids: Iterable[str],
    scheduled_date: Optional[date],
    notes: Optional[str] = None,
    session_id: Optional[str] = None,
) -> LaundrySession:
    """Plan a wash for ``item_ids`` on ``scheduled_date``.

    Raises :class:`ValueError` when no date is given or no items are selected.
    """

    if scheduled_date is None:
        raise ValueError("a laundry session needs a scheduled date")
    ids = tuple(dict.fromkeys(str(item_id) for item_id in item_ids))
    if not ids:
        raise ValueError("a laundry session needs at least one item")
    session = LaundrySession(
        session_id=session_id or uuid.uuid4().hex,
        scheduled_date=scheduled_date,
        item_ids=ids,
        notes=notes,
    )
    logger.info("Scheduled laundry session %s for %s with %s items", session.session_id, scheduled_date, len(ids))
    return session


def update_session_status(
    session: LaundrySession,
    status: str,
    inventory: Iterable[ClothingItem] = (),
    today: Optional[date] = None,
) -> Tuple[LaundrySession, List[ClothingItem]]:
    """Move a session to ``status`` and return it with the resulting inventory.

    Completing a session marks every inventory item in it clean as of
    ``today``; other transitions return the inventory unchanged.
    """

    if status not in SESSION_STATUSES:
        raise ValueError(f"unknown laundry session status {status!r}; expected one of {SESSION_STATUSES}")
    updated = replace(session, status=status)
    items = list(inventory)
    if status == SESSION_COMPLETED:
        washed_on = today or date.today()
        items = [mark_clean(item, washed_on) if item.item_id in session.item_ids else item for item in items]
    logger.info("Laundry session %s is now %s", session.session_id, status)
    return updated, items


__all__ = [
    "LaundrySession",
    "SESSION_STATUSES",
    "mark_dirty",
    "mark_clean",
    "is_wash_due",
    "items_needing_wash",
    "schedule_session",
    "update_session_status",
]
