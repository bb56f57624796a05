"""Request bodies of the JSON endpoints.

Field names follow the wire format (``UserName``, ``LocationID``...). Types
are strict: ``"5"`` is not a valid ``LocationID``. Unknown keys are ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ID колонки: 64-битный INTEGER в SQLite
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def location_id_field():
    return Field(alias="LocationID", ge=ID_MIN, le=ID_MAX)


class Payload(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")


class CredentialsPayload(Payload):
    username: str = Field(alias="UserName")
    password: str = Field(alias="Password")


class TokenPayload(Payload):
    token: Optional[str] = Field(default="", alias="Token")

    @field_validator("token")
    @classmethod
    def null_token_is_empty(cls, value: Optional[str]) -> str:
        # "Token": null == нет токена -> ошибка аутентификации, не параметров
        return value or ""


class UpdateUserPayload(TokenPayload):
    username: str = Field(default="", alias="UserName")
    password: str = Field(default="", alias="Password")
    avatar: str = Field(default="", alias="Avatar")
    nickname: str = Field(default="", alias="NickName")
    phone_number: str = Field(default="", alias="PhoneNumber")


class AddLocationPayload(TokenPayload):
    name: str = Field(default="", alias="Name")
    description: str = Field(default="", alias="Description")


class UpdateLocationPayload(AddLocationPayload):
    location_id: int = location_id_field()


class SearchLocationPayload(TokenPayload):
    keyword: str = Field(default="", alias="Keyword")


class LocationInfoPayload(TokenPayload):
    location_id: int = location_id_field()


class ReservationPayload(TokenPayload):
    location_id: int = location_id_field()
    date: str = Field(default="", alias="Date")
    time: str = Field(default="", alias="Time")
