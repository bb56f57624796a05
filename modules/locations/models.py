"""SQLAlchemy models for the locations domain."""

from extensions import db


class Location(db.Model):
    """A bookable place. Anyone with a valid token may add or edit one."""

    __tablename__ = "locations"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")

    def to_dict(self) -> dict:
        return {"ID": self.id, "Name": self.name, "Description": self.description}

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Location {self.id}: {self.name}>"
