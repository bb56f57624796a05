"""
Session/token manager.

Tokens are random UUID4 strings stored in the ``tokens`` table. A token stays
valid forever: there is no TTL check and no revocation.
"""

import logging
import time
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from errors import AuthFailed, TokenPersistError
from models import Token

logger = logging.getLogger(__name__)


def generate_token() -> str:
    # uuid4 берёт случайность из os.urandom
    return str(uuid.uuid4())


class TokenManager:
    def __init__(self, session: Session) -> None:
        self.session = session

    def issue_token(self, user_id: int) -> str:
        """Persist a fresh token for ``user_id`` and return the token string."""

        record = Token(user_id=user_id, token=generate_token(), created_at=int(time.time()))
        self.session.add(record)
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Failed to persist token for user id=%s", user_id)
            raise TokenPersistError() from exc

        logger.info("Issued token for user id=%s", user_id)
        return record.token

    def resolve(self, token: str) -> int:
        """Return the user ID bound to ``token``.

        The user row itself is not checked: callers that need the account must
        fetch it and handle its absence.
        """

        if not token:
            raise AuthFailed()
        user_id = self.session.query(Token.user_id).filter_by(token=token).scalar()
        if user_id is None:
            raise AuthFailed()
        return user_id
