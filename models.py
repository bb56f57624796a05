"""Shared SQLAlchemy models: accounts and their session tokens."""

from extensions import db


class User(db.Model):
    """Represents a registered account."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    # хранится как есть, без хэширования
    password = db.Column(db.String(150), nullable=False, default="")
    avatar = db.Column(db.String(255), nullable=False, default="")
    nickname = db.Column(db.String(150), nullable=False, default="")
    phone_number = db.Column(db.String(50), nullable=False, default="")

    def to_dict(self) -> dict:
        return {
            "ID": self.id,
            "Username": self.username,
            "Password": self.password,
            "Avatar": self.avatar,
            "NickName": self.nickname,
            "PhoneNumber": self.phone_number,
        }

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<User {self.username}>"


class Token(db.Model):
    """Opaque bearer token bound to a user. Never expires."""

    __tablename__ = "tokens"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    token = db.Column(db.String(64), unique=True, nullable=False)
    created_at = db.Column(db.BigInteger, nullable=False)  # unix seconds

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Token user={self.user_id}>"
