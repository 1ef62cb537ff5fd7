import pytest

pytestmark = pytest.mark.integration


async def test_dashboard_redirects_anonymous_to_auth(client):
    resp = await client.get("/dashboard", follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/auth"


async def test_dashboard_redirects_on_garbage_token(client):
    resp = await client.get("/dashboard", headers={"Authorization": "Bearer not-a-jwt"}, follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/auth"


async def test_landing_redirects_signed_in_user_to_dashboard(client, auth_headers):
    resp = await client.get("/", headers=auth_headers, follow_redirects=False)
    assert resp.status_code == 307
    assert resp.headers["location"] == "/dashboard"


async def test_landing_for_anonymous(client):
    resp = await client.get("/", follow_redirects=False)
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Portfolio Manager"
    assert data["get_started_url"] == "/auth"
