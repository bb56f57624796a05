"""Location catalog."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import CreateFailed, NotFound, SearchFailed, UpdateFailed

from .models import Location

logger = logging.getLogger(__name__)


class LocationCatalog:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, name: str, description: str) -> Location:
        location = Location(name=name, description=description)
        self.session.add(location)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to add location")
            raise CreateFailed() from exc

        logger.info("Added location id=%s", location.id)
        return location

    def get(self, location_id: int) -> Location:
        location = self.session.get(Location, location_id)
        if location is None:
            raise NotFound("location not found")
        return location

    def update(self, location_id: int, name: str, description: str) -> None:
        """Overwrite name and description; empty strings are written as-is."""

        location = self.get(location_id)
        location.name = name
        location.description = description
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to update location id=%s", location_id)
            raise UpdateFailed() from exc

    def search(self, keyword: str) -> list[Location]:
        """
        Substring match on the name, i.e. ``name LIKE '%keyword%'``.
        The keyword is not escaped, so ``%`` and ``_`` act as wildcards.
        An empty keyword matches every location.
        """

        try:
            return (self.session.query(Location)
                    .filter(Location.name.like(f"%{keyword}%"))
                    .order_by(Location.id.asc())
                    .all())
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Location search failed")
            raise SearchFailed() from exc
