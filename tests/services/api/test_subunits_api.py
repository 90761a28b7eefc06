from __future__ import annotations

from http import HTTPStatus
from uuid import uuid4

SUBUNITS = "/api/subunits"


def test_subunit_requires_main_group(api_client):
    r = api_client.post(SUBUNITS, json={"name": "X", "main_group_id": None})
    assert r.status_code == HTTPStatus.BAD_REQUEST
    assert r.json()["detail"] == "Main group is required"


def test_subunit_with_unknown_group(api_client):
    r = api_client.post(SUBUNITS, json={"name": "X", "main_group_id": str(uuid4())})
    assert r.status_code == HTTPStatus.BAD_REQUEST
    assert "Main group not found" in r.json()["detail"]


def test_subunit_cannot_hang_off_a_solo(api_client):
    solo = api_client.post(
        "/api/performers", json={"type": "solo", "name": "IU", "primary_language": "Korean"}
    ).json()
    r = api_client.post(SUBUNITS, json={"name": "X", "main_group_id": solo["id"]})
    assert r.status_code == HTTPStatus.BAD_REQUEST


def test_create_subunit_and_identity(api_client, make_group):
    svt = make_group("SEVENTEEN")
    bss = make_group("BSS")
    r = api_client.post(
        SUBUNITS,
        json={"name": "BSS", "main_group_id": svt["id"], "group_identity_id": bss["id"], "formation_date": "2018-03-21"},
    )
    assert r.status_code == HTTPStatus.CREATED, r.text
    body = r.json()
    assert body["main_group_name"] == "SEVENTEEN"
    assert body["group_identity_name"] == "BSS"

    listed = api_client.get(SUBUNITS, params={"main_group_id": svt["id"]}).json()
    assert [s["id"] for s in listed] == [body["id"]]

    r = api_client.patch(f"{SUBUNITS}/{body['id']}", json={"group_identity_id": svt["id"]})
    assert r.status_code == HTTPStatus.BAD_REQUEST


def test_group_identity_cleared_only_by_explicit_null(api_client, make_group):
    svt = make_group("SEVENTEEN")
    bss = make_group("BSS")
    sub = api_client.post(
        SUBUNITS, json={"name": "BSS", "main_group_id": svt["id"], "group_identity_id": bss["id"]}
    ).json()
    url = f"{SUBUNITS}/{sub['id']}"

    r = api_client.patch(url, json={"description": "Comedy unit"})
    assert r.status_code == HTTPStatus.OK
    assert r.json()["group_identity_id"] == bss["id"]

    r = api_client.patch(url, json={"group_identity_id": None})
    assert r.status_code == HTTPStatus.OK, r.text
    body = r.json()
    assert body["group_identity_id"] is None
    assert body["group_identity_name"] is None
    assert body["description"] == "Comedy unit"
    assert api_client.get(url).json()["group_identity_id"] is None


def test_list_by_main_group_is_paginated(api_client, make_group):
    svt = make_group("SEVENTEEN")
    for name in ("BSS", "Hip-hop Team", "Performance Team", "Vocal Team"):
        r = api_client.post(SUBUNITS, json={"name": name, "main_group_id": svt["id"]})
        assert r.status_code == HTTPStatus.CREATED

    page = api_client.get(SUBUNITS, params={"main_group_id": svt["id"], "limit": 2, "offset": 1}).json()
    assert [s["name"] for s in page] == ["Hip-hop Team", "Performance Team"]
    rest = api_client.get(SUBUNITS, params={"main_group_id": svt["id"], "offset": 3}).json()
    assert [s["name"] for s in rest] == ["Vocal Team"]


def test_subunit_members(api_client, make_group, make_member):
    svt = make_group("SEVENTEEN")
    sub = api_client.post(SUBUNITS, json={"name": "BSS", "main_group_id": svt["id"]}).json()
    hoshi = make_member("Hoshi", "Kwon Soon-young")

    url = f"{SUBUNITS}/{sub['id']}/members/{hoshi['id']}"
    assert api_client.get(url).json() == {"exists": False}
    assert api_client.put(url).status_code == HTTPStatus.OK
    assert api_client.put(url).status_code == HTTPStatus.OK
    assert api_client.get(url).json() == {"exists": True}

    members = api_client.get(f"{SUBUNITS}/{sub['id']}/members").json()
    assert [m["member_name"] for m in members] == ["Hoshi"]
    subs = api_client.get(f"/api/members/{hoshi['id']}/subunits").json()
    assert [s["name"] for s in subs] == ["BSS"]

    assert api_client.delete(url).status_code == HTTPStatus.NO_CONTENT
    assert api_client.delete(url).status_code == HTTPStatus.NOT_FOUND


def test_add_unknown_member_to_subunit(api_client, make_group):
    svt = make_group("SEVENTEEN")
    sub = api_client.post(SUBUNITS, json={"name": "BSS", "main_group_id": svt["id"]}).json()
    r = api_client.put(f"{SUBUNITS}/{sub['id']}/members/{uuid4()}")
    assert r.status_code == HTTPStatus.BAD_REQUEST


def test_delete_subunit(api_client, make_group):
    svt = make_group("SEVENTEEN")
    sub = api_client.post(SUBUNITS, json={"name": "BSS", "main_group_id": svt["id"]}).json()
    assert api_client.delete(f"{SUBUNITS}/{sub['id']}").status_code == HTTPStatus.NO_CONTENT
    assert api_client.get(f"{SUBUNITS}/{sub['id']}").status_code == HTTPStatus.NOT_FOUND
