"""
Reservation ledger.

Брони пишутся без проверок: нет проверки существования места, дублей,
пересечений по времени и вместимости. Двойное бронирование разрешено.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import CreateFailed, SearchFailed
from modules.locations.models import Location

from .models import Record, RecordDetail

logger = logging.getLogger(__name__)


class ReservationLedger:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, user_id: int, location_id: int, date: str, time: str) -> Record:
        record = Record(user_id=user_id, location_id=location_id, date=date, time=time)
        self.session.add(record)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to create record for user id=%s", user_id)
            raise CreateFailed() from exc

        logger.info("Created record id=%s user=%s location=%s", record.id, user_id, location_id)
        return record

    def list_by_user(self, user_id: int) -> list[Record]:
        try:
            return (self.session.query(Record)
                    .filter_by(user_id=user_id)
                    .order_by(Record.id.asc())
                    .all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to list records for user id=%s", user_id)
            raise SearchFailed() from exc

    def list_detail_by_user(self, user_id: int) -> list[RecordDetail]:
        """Records of ``user_id`` left-joined with ``locations``."""

        try:
            rows = (self.session.query(
                        Record.id,
                        Record.user_id,
                        Record.location_id,
                        Record.date,
                        Record.time,
                        Location.name.label("location_name"),
                        Location.description.label("location_description"),
                    )
                    .outerjoin(Location, Record.location_id == Location.id)
                    .filter(Record.user_id == user_id)
                    .order_by(Record.id.asc())
                    .all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to list record details for user id=%s", user_id)
            raise SearchFailed() from exc

        return [
            RecordDetail(
                id=row.id,
                user_id=row.user_id,
                location_id=row.location_id,
                date=row.date,
                time=row.time,
                location_name=row.location_name or "",
                location_description=row.location_description or "",
            )
            for row in rows
        ]
