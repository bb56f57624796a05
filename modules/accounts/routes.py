"""HTTP routes for registration, login and the caller's profile."""

from errors import CreateFailed, InvalidCredential, NotFound
from extensions import db
from permissions import current_user_id, token_required
from schemas import CredentialsPayload, TokenPayload, UpdateUserPayload
from utils import error_messages, ok, parse_payload

from . import bp
from .services import CredentialStore
from .sessions import TokenManager


@bp.route("/register", methods=["POST"])
def register():
    payload = parse_payload(CredentialsPayload)
    with error_messages({CreateFailed: "registration failed"}):
        CredentialStore(db.session).register(payload.username, payload.password)
    return ok("registration successful")


@bp.route("/login", methods=["POST"])
def login():
    payload = parse_payload(CredentialsPayload)
    # одно и то же сообщение для неизвестного логина и неверного пароля
    with error_messages({NotFound: InvalidCredential.message}):
        user_id = CredentialStore(db.session).authenticate(payload.username, payload.password)
    token = TokenManager(db.session).issue_token(user_id)
    return ok("login successful", Token=token)


@bp.route("/userinfo", methods=["POST"])
@token_required(TokenPayload)
def userinfo(payload):
    with error_messages({NotFound: "failed to get user info"}):
        profile = CredentialStore(db.session).get_profile(current_user_id())
    return ok("user info retrieved", data=profile.to_dict())


@bp.route("/updateuserinfo", methods=["POST"])
@token_required(UpdateUserPayload)
def updateuserinfo(payload):
    CredentialStore(db.session).update_profile(
        current_user_id(),
        username=payload.username,
        password=payload.password,
        avatar=payload.avatar,
        nickname=payload.nickname,
        phone_number=payload.phone_number,
    )
    return ok("user info updated")
