"""Request parsing and reply helpers shared by every JSON endpoint."""

from contextlib import contextmanager
from typing import Mapping, Type, TypeVar

from flask import jsonify, request
from pydantic import BaseModel, ValidationError

from errors import BookingError, ParameterError

P = TypeVar("P", bound=BaseModel)


def parse_payload(schema: Type[P]) -> P:
    """Validate the JSON body against ``schema`` or raise ParameterError."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ParameterError()
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        raise ParameterError() from exc


def ok(message: str, data=None, **extra):
    """Success reply: ``{"code": 0, "message": ..., "data"?: ..., **extra}``."""
    body = {"code": 0, "message": message}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), 200


def fail(error: BookingError):
    return jsonify(error.to_reply()), int(error.status)


@contextmanager
def error_messages(messages: Mapping[Type[BookingError], str]):
    """Replace the client-facing message of listed error kinds for one endpoint."""
    try:
        yield
    except BookingError as exc:
        for kind, message in messages.items():
            if isinstance(exc, kind):
                exc.message = message
                break
        raise
