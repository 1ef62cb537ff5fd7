from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlmodel import select

from portfolio_tracker.models.portfolio import Portfolio
from portfolio_tracker.models.watchlist import WatchlistItem
from portfolio_tracker.models.user import User

pytestmark = pytest.mark.integration


async def test_add_with_blank_optionals_stores_null(client, db, auth_headers):
    resp = await client.post(
        "/watchlist",
        json={"symbol": "nvda", "name": "NVIDIA Corporation", "sector": "", "notes": "   "},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["message"] == "NVDA has been added to your watchlist."

    with db() as session:
        item = session.exec(select(WatchlistItem)).one()
    assert item.symbol == "NVDA"
    assert item.sector is None
    assert item.notes is None


async def test_add_requires_symbol_and_name(client, db, auth_headers):
    resp = await client.post("/watchlist", json={"symbol": "", "name": "X"}, headers=auth_headers)
    assert resp.status_code == 422
    resp = await client.post("/watchlist", json={"symbol": "X"}, headers=auth_headers)
    assert resp.status_code == 422
    with db() as session:
        assert session.exec(select(WatchlistItem)).all() == []


async def test_add_requires_authentication(client):
    resp = await client.post("/watchlist", json={"symbol": "NVDA", "name": "NVIDIA"})
    assert resp.status_code == 401


async def test_add_to_foreign_portfolio_is_404(client, db, auth_headers, other_headers):
    other_portfolio = (await client.get("/portfolio", headers=other_headers)).json()
    resp = await client.post(
        "/watchlist",
        json={"portfolio_id": other_portfolio["id"], "symbol": "NVDA", "name": "NVIDIA"},
        headers=auth_headers,
    )
    assert resp.status_code == 404
    with db() as session:
        assert session.exec(select(WatchlistItem)).all() == []


async def test_list_newest_first_and_scoped(client, db, auth_headers, other_headers):
    await client.post("/watchlist", json={"symbol": "ZZZ", "name": "Other"}, headers=other_headers)

    with db() as session:
        portfolio = session.exec(
            select(Portfolio).join(User, User.id == Portfolio.user_id).where(User.email == "alice@example.com")
        ).one()
        for day, symbol in [(1, "OLD"), (5, "NEW"), (3, "MID")]:
            session.add(WatchlistItem(
                user_id=portfolio.user_id,
                portfolio_id=portfolio.id,
                symbol=symbol,
                name=symbol,
                added_at=datetime(2026, 2, day, tzinfo=timezone.utc),
            ))
        session.commit()

    resp = await client.get("/watchlist", headers=auth_headers)
    assert resp.status_code == 200
    items = resp.json()["items"]
    assert [i["symbol"] for i in items] == ["NEW", "MID", "OLD"]
    assert items[0]["added_display"] == "2/5/2026"


async def test_list_explicit_portfolio(client, auth_headers):
    portfolio = (await client.get("/portfolio", headers=auth_headers)).json()
    await client.post("/watchlist", json={"symbol": "JPM", "name": "JPMorgan"}, headers=auth_headers)

    resp = await client.get("/watchlist", params={"portfolio_id": portfolio["id"]}, headers=auth_headers)
    assert [i["symbol"] for i in resp.json()["items"]] == ["JPM"]

    resp = await client.get("/watchlist", params={"portfolio_id": str(uuid4())}, headers=auth_headers)
    assert resp.status_code == 404


async def test_empty_state(client, auth_headers):
    resp = await client.get("/watchlist", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["items"] == []
    assert resp.json()["empty_message"] == "No stocks in your watchlist yet."


async def test_remove_without_confirmation(client, db, auth_headers):
    created = (await client.post("/watchlist", json={"symbol": "JNJ", "name": "J&J"}, headers=auth_headers)).json()
    resp = await client.delete(f"/watchlist/{created['item']['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "JNJ has been removed from your watchlist."
    with db() as session:
        assert session.exec(select(WatchlistItem)).all() == []


async def test_remove_someone_elses_item_is_404(client, db, auth_headers, other_headers):
    created = (await client.post("/watchlist", json={"symbol": "JNJ", "name": "J&J"}, headers=auth_headers)).json()
    resp = await client.delete(f"/watchlist/{created['item']['id']}", headers=other_headers)
    assert resp.status_code == 404
    with db() as session:
        assert len(session.exec(select(WatchlistItem)).all()) == 1


async def test_add_without_portfolio_is_noop(client, db, no_portfolio_headers):
    resp = await client.post("/watchlist", json={"symbol": "NVDA", "name": "NVIDIA"}, headers=no_portfolio_headers)
    assert resp.status_code == 204
    assert resp.content == b""
    with db() as session:
        assert session.exec(select(WatchlistItem)).all() == []


async def test_add_store_failure(client, db, fail_statements, auth_headers):
    fail_statements("INSERT", "watchlist")
    resp = await client.post("/watchlist", json={"symbol": "NVDA", "name": "NVIDIA"}, headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to add stock to watchlist. Please try again."
    with db() as session:
        assert session.exec(select(WatchlistItem)).all() == []


async def test_list_store_failure(client, fail_statements, auth_headers):
    fail_statements("SELECT", "watchlist")
    resp = await client.get("/watchlist", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to load watchlist items."


async def test_remove_store_failure_keeps_item(client, db, fail_statements, auth_headers):
    created = (await client.post("/watchlist", json={"symbol": "JNJ", "name": "J&J"}, headers=auth_headers)).json()

    fail_statements("DELETE", "watchlist")
    resp = await client.delete(f"/watchlist/{created['item']['id']}", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to remove stock from watchlist."
    with db() as session:
        assert len(session.exec(select(WatchlistItem)).all()) == 1
