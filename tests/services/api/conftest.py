from __future__ import annotations

import pytest


@pytest.fixture()
def make_group(api_client):
    def _make(name: str = "BTS", **extra) -> dict:
        payload = {
            "type": "group",
            "name": name,
            "genre": "K-pop",
            "description": f"{name} is a group",
            "formation_date": "2013-06-13",
            **extra,
        }
        r = api_client.post("/api/performers", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _make


@pytest.fixture()
def make_member(api_client):
    def _make(member_name: str = "Han", real_name: str = "Han Ji-sung", **extra) -> dict:
        r = api_client.post("/api/members", json={"member_name": member_name, "real_name": real_name, **extra})
        assert r.status_code == 201, r.text
        return r.json()

    return _make
