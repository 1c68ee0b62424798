"""Reference reconciliation: prune hotel room lists of ids whose room type is gone."""

import logging

from sqlalchemy.orm import Session

from hotelbook.models import Hotel, RoomType

logger = logging.getLogger(__name__)


def reconcile_references(session: Session) -> tuple[int, int]:
    """
    Drop dangling RoomType ids from every hotel's ``rooms`` list.

    Returns (hotels_updated, references_removed). Idempotent: safe to run repeatedly.
    """
    existing = {room_id for (room_id,) in session.query(RoomType.id).all()}
    hotels_updated = 0
    references_removed = 0
    for hotel in session.query(Hotel).order_by(Hotel.id).with_for_update().all():
        rooms = list(hotel.rooms or [])
        kept = [room_id for room_id in rooms if room_id in existing]
        if len(kept) == len(rooms):
            continue
        hotel.rooms = kept
        hotels_updated += 1
        references_removed += len(rooms) - len(kept)
    session.commit()

    if references_removed > 0:
        logger.info(
            "Reconciliation run: hotels_updated=%s, references_removed=%s",
            hotels_updated,
            references_removed,
        )
    return (hotels_updated, references_removed)
