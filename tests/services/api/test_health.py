from musicopedia.common.settings import get_settings


def test_healthz(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["app"] == get_settings().app_name
    assert body["env"] == "test"
    assert body["db"] == "ok"
