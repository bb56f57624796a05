"""HTTP routes for the reservations domain."""

from errors import CreateFailed, SearchFailed
from extensions import db
from permissions import current_user_id, token_required
from schemas import ReservationPayload, TokenPayload
from utils import error_messages, ok

from . import bp
from .services import ReservationLedger


@bp.route("/reservation", methods=["POST"])
@token_required(ReservationPayload)
def reservation(payload):
    with error_messages({CreateFailed: "reservation failed"}):
        record = ReservationLedger(db.session).create(
            current_user_id(), payload.location_id, payload.date, payload.time
        )
    return ok("reservation successful", data=record.to_dict())


@bp.route("/listrecord", methods=["POST"])
@token_required(TokenPayload)
def listrecord(payload):
    with error_messages({SearchFailed: "query failed"}):
        records = ReservationLedger(db.session).list_by_user(current_user_id())
    return ok("query successful", data=[r.to_dict() for r in records])


@bp.route("/listrecorddetail", methods=["POST"])
@token_required(TokenPayload)
def listrecorddetail(payload):
    with error_messages({SearchFailed: "query failed"}):
        details = ReservationLedger(db.session).list_detail_by_user(current_user_id())
    return ok("query successful", data=[d.to_dict() for d in details])
