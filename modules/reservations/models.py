"""
SQLAlchemy models for the reservations domain.

Record: одна бронь: пользователь + место + дата + время (строки как пришли).
Ссылки на users/locations не проверяются и не каскадятся.
"""

from dataclasses import dataclass

from extensions import db


class Record(db.Model):
    __tablename__ = "records"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    location_id = db.Column(db.Integer, nullable=False)
    date = db.Column(db.String(64), nullable=False, default="")
    time = db.Column(db.String(64), nullable=False, default="")

    def to_dict(self) -> dict:
        return {
            "ID": self.id,
            "UserID": self.user_id,
            "LocationID": self.location_id,
            "Date": self.date,
            "Time": self.time,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Record {self.id}: user={self.user_id} location={self.location_id}>"


@dataclass
class RecordDetail:
    """A record joined with its location. Empty strings when the location is gone."""

    id: int
    user_id: int
    location_id: int
    date: str
    time: str
    location_name: str = ""
    location_description: str = ""

    def to_dict(self) -> dict:
        return {
            "ID": self.id,
            "UserID": self.user_id,
            "LocationID": self.location_id,
            "Date": self.date,
            "Time": self.time,
            "LocationName": self.location_name,
            "LocationDescription": self.location_description,
        }
