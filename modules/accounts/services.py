"""Credential store: user accounts keyed by a unique username."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from errors import CreateFailed, DuplicateUsername, InvalidCredential, NotFound, ProfileUpdateFailed
from models import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Account operations against an explicit SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def register(self, username: str, password: str) -> int:
        """Create an account with empty profile fields and return its ID."""

        if self.session.query(User.id).filter_by(username=username).first() is not None:
            raise DuplicateUsername()

        user = User(username=username, password=password, avatar="", nickname="", phone_number="")
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            # параллельная регистрация с тем же именем
            self.session.rollback()
            raise DuplicateUsername() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to create user")
            raise CreateFailed() from exc

        logger.info("Registered user id=%s", user.id)
        return user.id

    def authenticate(self, username: str, password: str) -> int:
        """Return the user ID when ``password`` equals the stored one exactly.

        Passwords are stored and compared as plain text.
        """

        user = self.session.query(User).filter_by(username=username).first()
        if user is None:
            raise NotFound("user not found")
        if user.password != password:
            raise InvalidCredential()
        return user.id

    def get_profile(self, user_id: int) -> User:
        """Return a detached copy of the account with the password blanked."""

        user = self.session.get(User, user_id)
        if user is None:
            raise NotFound("user not found")
        return User(
            id=user.id,
            username=user.username,
            password="",
            avatar=user.avatar,
            nickname=user.nickname,
            phone_number=user.phone_number,
        )

    def update_profile(
        self,
        user_id: int,
        username: str,
        password: str,
        avatar: str,
        nickname: str,
        phone_number: str,
    ) -> None:
        """Overwrite every profile field, empty values included."""

        try:
            self.session.query(User).filter(User.id == user_id).update(
                {
                    User.username: username,
                    User.password: password,
                    User.avatar: avatar,
                    User.nickname: nickname,
                    User.phone_number: phone_number,
                },
                synchronize_session="fetch",
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning("Profile update failed for user id=%s: %s", user_id, exc.__class__.__name__)
            raise ProfileUpdateFailed() from exc
