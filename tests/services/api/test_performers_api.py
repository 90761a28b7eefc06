from __future__ import annotations

from http import HTTPStatus
from uuid import uuid4

PERFORMERS = "/api/performers"

BTS = {
    "type": "group",
    "name": "BTS",
    "genre": "K-pop",
    "description": "Seven-member boy group formed by Big Hit",
    "formation_date": "2013-06-13",
    "group_gender": "male",
    "activity_status": "active",
}


def test_create_group_round_trip(api_client):
    r = api_client.post(PERFORMERS, json=BTS)
    assert r.status_code == HTTPStatus.CREATED, r.text
    body = r.json()
    assert body["type"] == "group"
    assert body["formation_date"] == "2013-06-13"
    assert body["group_gender"] == "male"
    assert body["birth_date"] is None
    assert body["death_date"] is None
    assert body["solo_gender"] is None

    got = api_client.get(f"{PERFORMERS}/{body['id']}")
    assert got.status_code == HTTPStatus.OK
    assert got.json()["activity_status"] == "active"


def test_solo_without_primary_language_is_rejected_and_not_stored(api_client):
    r = api_client.post(PERFORMERS, json={"type": "solo", "name": "X", "primary_language": None})
    assert r.status_code == HTTPStatus.BAD_REQUEST
    assert r.json()["detail"] == "Primary language is required for solo artists"

    listed = api_client.get(PERFORMERS, params={"type": "solo"})
    assert listed.json() == []


def test_unknown_type_is_unprocessable(api_client):
    r = api_client.post(PERFORMERS, json={"type": "band", "name": "X"})
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    assert "No factory for performer type" in r.json()["detail"]

    r = api_client.post(PERFORMERS, json={"name": "No type"})
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_franchise_has_no_profile_fields(api_client):
    r = api_client.post(
        PERFORMERS,
        json={
            "type": "franchise",
            "name": "K/DA",
            "origin_country": "US",
            "description": "Virtual girl group from a video game universe, with four characters.",
        },
    )
    assert r.status_code == HTTPStatus.CREATED, r.text
    body = r.json()
    assert body["formation_date"] is None and body["birth_date"] is None


def test_profile_fields_of_other_type_rejected(api_client):
    r = api_client.post(
        PERFORMERS, json={"type": "solo", "name": "IU", "primary_language": "Korean", "formation_date": "2008-09-18"}
    )
    assert r.status_code == HTTPStatus.BAD_REQUEST


def test_patch_is_null_propagating(api_client):
    created = api_client.post(PERFORMERS, json=BTS).json()
    r = api_client.patch(f"{PERFORMERS}/{created['id']}", json={"image": "bts.jpg", "genre": None})
    assert r.status_code == HTTPStatus.OK, r.text
    body = r.json()
    assert body["image"] == "bts.jpg"
    assert body["genre"] == "K-pop"
    assert body["formation_date"] == "2013-06-13"

    r = api_client.patch(f"{PERFORMERS}/{created['id']}", json={"description": ""})
    assert r.json()["description"] == ""


def test_missing_performer_is_404(api_client):
    missing = uuid4()
    assert api_client.get(f"{PERFORMERS}/{missing}").status_code == HTTPStatus.NOT_FOUND
    assert api_client.patch(f"{PERFORMERS}/{missing}", json={"name": "x"}).status_code == HTTPStatus.NOT_FOUND
    assert api_client.delete(f"{PERFORMERS}/{missing}").status_code == HTTPStatus.NOT_FOUND


def test_external_id_lookup_and_conflict(api_client):
    solo = {"type": "solo", "name": "IU", "primary_language": "Korean", "external_id": "3HqSLMAZ3g3d5poNaI7GOU"}
    assert api_client.post(PERFORMERS, json=solo).status_code == HTTPStatus.CREATED
    r = api_client.get(f"{PERFORMERS}/by-external-id/3HqSLMAZ3g3d5poNaI7GOU")
    assert r.status_code == HTTPStatus.OK
    assert r.json()["name"] == "IU"

    dup = api_client.post(PERFORMERS, json={**solo, "name": "IU again"})
    assert dup.status_code == HTTPStatus.CONFLICT


def test_batch_is_all_or_nothing(api_client):
    good = {"type": "solo", "name": "Taeyeon", "primary_language": "Korean"}
    bad = {"type": "solo", "name": "Nameless language"}
    r = api_client.post(f"{PERFORMERS}/batch", json={"items": [good, bad]})
    assert r.status_code == HTTPStatus.BAD_REQUEST
    assert api_client.get(f"{PERFORMERS}/search", params={"name": "taeyeon"}).json() == []

    r = api_client.post(f"{PERFORMERS}/batch", json={"items": [good, BTS]})
    assert r.status_code == HTTPStatus.CREATED, r.text
    assert {p["type"] for p in r.json()} == {"solo", "group"}


def test_solo_and_group_listings(api_client):
    api_client.post(PERFORMERS, json=BTS)
    api_client.post(
        PERFORMERS,
        json={"type": "solo", "name": "Jonghyun", "primary_language": "Korean",
              "birth_date": "1990-04-08", "death_date": "2017-12-18"},
    )
    deceased = api_client.get("/api/solos/deceased").json()
    assert [p["name"] for p in deceased] == ["Jonghyun"]
    active_groups = api_client.get("/api/groups/active").json()
    assert [g["name"] for g in active_groups] == ["BTS"]


def test_delete_performer(api_client):
    created = api_client.post(PERFORMERS, json=BTS).json()
    assert api_client.delete(f"{PERFORMERS}/{created['id']}").status_code == HTTPStatus.NO_CONTENT
    assert api_client.get(f"{PERFORMERS}/{created['id']}").status_code == HTTPStatus.NOT_FOUND
