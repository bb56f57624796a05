"""HTTP routes for the locations domain."""

from errors import CreateFailed, NotFound, SearchFailed, UpdateFailed
from extensions import db
from modules.accounts.services import CredentialStore
from permissions import current_user_id, token_required
from schemas import AddLocationPayload, LocationInfoPayload, SearchLocationPayload, UpdateLocationPayload
from utils import error_messages, ok

from . import bp
from .services import LocationCatalog


@bp.route("/addlocation", methods=["POST"])
@token_required(AddLocationPayload)
def addlocation(payload):
    with error_messages({NotFound: "failed to get user info"}):
        # владелец токена должен существовать
        CredentialStore(db.session).get_profile(current_user_id())
    with error_messages({CreateFailed: "failed to add location"}):
        location = LocationCatalog(db.session).add(payload.name, payload.description)
    return ok("location added", data=location.to_dict())


@bp.route("/updatelocation", methods=["POST"])
@token_required(UpdateLocationPayload)
def updatelocation(payload):
    with error_messages({NotFound: "location lookup failed", UpdateFailed: "failed to update location"}):
        LocationCatalog(db.session).update(payload.location_id, payload.name, payload.description)
    return ok("location updated")


@bp.route("/searchlocation", methods=["POST"])
@token_required(SearchLocationPayload)
def searchlocation(payload):
    with error_messages({SearchFailed: "search failed"}):
        locations = LocationCatalog(db.session).search(payload.keyword)
    return ok("search successful", data=[loc.to_dict() for loc in locations])


@bp.route("/locationinfo", methods=["POST"])
@token_required(LocationInfoPayload)
def locationinfo(payload):
    with error_messages({NotFound: "query failed"}):
        location = LocationCatalog(db.session).get(payload.location_id)
    return ok("query successful", data=location.to_dict())
