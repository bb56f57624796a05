# permissions.py
"""
Доступ по bearer-токену.

- request_loader читает поле ``Token`` из JSON-тела и резолвит его через
  TokenManager. Пользователь по user_id не перепроверяется.
- token_required(schema): декоратор на роуты: сначала разбор тела запроса
  (ParameterError), потом проверка токена (AuthFailed). Вьюха получает
  распарсенный payload первым аргументом.
"""

import logging
from functools import wraps
from typing import Type

from flask_login import UserMixin, current_user
from pydantic import BaseModel

from errors import AuthFailed
from extensions import db, login_manager
from utils import parse_payload

logger = logging.getLogger(__name__)


class TokenPrincipal(UserMixin):
    """The caller behind a resolved token. Only the user ID is known."""

    def __init__(self, user_id: int, token: str) -> None:
        self.id = user_id
        self.token = token


@login_manager.request_loader
def load_principal_from_request(req) -> TokenPrincipal | None:
    payload = req.get_json(silent=True)
    token = payload.get("Token") if isinstance(payload, dict) else None
    if not isinstance(token, str):
        return None

    # модуль accounts сам импортирует permissions
    from modules.accounts.sessions import TokenManager

    try:
        user_id = TokenManager(db.session).resolve(token)
    except AuthFailed:
        logger.warning("Rejected token on %s", req.path)
        return None
    return TokenPrincipal(user_id, token)


def token_required(schema: Type[BaseModel]):
    """
    Декоратор для JSON-эндпоинтов, требующих токен.
    Пример:
        @bp.route("/listrecord", methods=["POST"])
        @token_required(TokenPayload)
        def listrecord(payload): ...
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapped(*args, **kwargs):
            payload = parse_payload(schema)
            if not current_user.is_authenticated:
                raise AuthFailed()
            return view_func(payload, *args, **kwargs)

        return wrapped
    return decorator


def current_user_id() -> int:
    return int(current_user.id)
