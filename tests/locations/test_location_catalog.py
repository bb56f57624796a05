"""Location catalog: service operations and JSON endpoints."""

import pytest

from errors import CreateFailed, NotFound, SearchFailed, UpdateFailed
from extensions import db
from modules.locations.models import Location
from modules.locations.services import LocationCatalog


def _add_locations(*names: str) -> list[int]:
    catalog = LocationCatalog(db.session)
    return [catalog.add(name, f"{name} description").id for name in names]


def test_add_and_get(app) -> None:
    with app.app_context():
        catalog = LocationCatalog(db.session)
        location = catalog.add("Lib", "Library")

        fetched = catalog.get(location.id)
        assert (fetched.name, fetched.description) == ("Lib", "Library")

        with pytest.raises(NotFound):
            catalog.get(location.id + 100)


def test_add_storage_failure(app, fail_commit) -> None:
    with app.app_context():
        fail_commit()
        with pytest.raises(CreateFailed):
            LocationCatalog(db.session).add("Lib", "Library")
        assert Location.query.count() == 0


def test_update_overwrites_with_empty_values(app) -> None:
    with app.app_context():
        catalog = LocationCatalog(db.session)
        location_id = catalog.add("Lib", "Library").id

        catalog.update(location_id, "Gym", "")

        db.session.expire_all()
        location = catalog.get(location_id)
        assert location.name == "Gym"
        assert location.description == ""


def test_update_missing_location(app) -> None:
    with app.app_context():
        with pytest.raises(NotFound):
            LocationCatalog(db.session).update(1, "Gym", "")


def test_update_storage_failure(app, fail_commit) -> None:
    with app.app_context():
        location_id = LocationCatalog(db.session).add("Lib", "Library").id
        fail_commit()
        with pytest.raises(UpdateFailed):
            LocationCatalog(db.session).update(location_id, "Gym", "")


def test_search_is_substring_match(app) -> None:
    with app.app_context():
        _add_locations("Main Library", "Gym", "Library Annex", "Pool")
        catalog = LocationCatalog(db.session)

        assert [loc.name for loc in catalog.search("Library")] == ["Main Library", "Library Annex"]
        assert [loc.name for loc in catalog.search("o")] == ["Pool"]
        assert catalog.search("Stadium") == []


def test_search_empty_keyword_returns_everything(app) -> None:
    with app.app_context():
        ids = _add_locations("Lib", "Gym", "Pool")
        assert [loc.id for loc in LocationCatalog(db.session).search("")] == ids


def test_location_endpoints(client, token) -> None:
    resp = client.post("/addlocation", json={"Token": token, "Name": "Lib", "Description": "Library"})
    body = resp.get_json()
    assert body["code"] == 0
    location = body["data"]
    assert location["Name"] == "Lib"
    assert location["Description"] == "Library"
    assert isinstance(location["ID"], int)

    resp = client.post(
        "/updatelocation",
        json={"Token": token, "LocationID": location["ID"], "Name": "Main Lib", "Description": "Library"},
    )
    assert resp.get_json() == {"code": 0, "message": "location updated"}

    resp = client.post("/locationinfo", json={"Token": token, "LocationID": location["ID"]})
    assert resp.get_json()["data"] == {"ID": location["ID"], "Name": "Main Lib", "Description": "Library"}

    resp = client.post("/searchlocation", json={"Token": token, "Keyword": "Lib"})
    assert [loc["ID"] for loc in resp.get_json()["data"]] == [location["ID"]]

    resp = client.post("/searchlocation", json={"Token": token, "Keyword": "zzz"})
    assert resp.get_json() == {"code": 0, "message": "search successful", "data": []}


def test_location_endpoints_errors(client, token) -> None:
    resp = client.post("/updatelocation", json={"Token": token, "LocationID": 404, "Name": "X"})
    assert resp.get_json() == {"code": 1, "message": "location lookup failed"}

    resp = client.post("/locationinfo", json={"Token": token, "LocationID": 404})
    assert resp.get_json() == {"code": 1, "message": "query failed"}

    # LocationID обязателен и должен быть числом
    resp = client.post("/locationinfo", json={"Token": token})
    assert resp.get_json() == {"code": 1, "message": "parameter error"}
    resp = client.post("/locationinfo", json={"Token": token, "LocationID": "1"})
    assert resp.get_json() == {"code": 1, "message": "parameter error"}

    resp = client.post("/addlocation", json={"Token": "nope", "Name": "Lib"})
    assert resp.get_json() == {"code": 1, "message": "authentication failed"}


def test_addlocation_requires_existing_user(client, app, token) -> None:
    from models import User

    with app.app_context():
        db.session.delete(User.query.one())
        db.session.commit()

    resp = client.post("/addlocation", json={"Token": token, "Name": "Lib"})
    assert resp.get_json() == {"code": 1, "message": "failed to get user info"}


def test_search_storage_failure(app, fail_queries_on) -> None:
    with app.app_context():
        _add_locations("Lib")
        fail_queries_on("locations")
        with pytest.raises(SearchFailed):
            LocationCatalog(db.session).search("Lib")


def test_searchlocation_storage_failure(client, token, fail_queries_on) -> None:
    fail_queries_on("locations")
    resp = client.post("/searchlocation", json={"Token": token, "Keyword": "Lib"})
    assert resp.status_code == 400
    assert resp.get_json() == {"code": 1, "message": "search failed"}


def test_location_id_out_of_range(client, token) -> None:
    # больше 64-битного INTEGER: ошибка разбора, а не 500
    for location_id in (2**64, 2**63, -(2**63) - 1):
        resp = client.post("/locationinfo", json={"Token": token, "LocationID": location_id})
        assert resp.status_code == 400
        assert resp.get_json() == {"code": 1, "message": "parameter error"}

        resp = client.post("/updatelocation", json={"Token": token, "LocationID": location_id, "Name": "X"})
        assert resp.get_json() == {"code": 1, "message": "parameter error"}
